"""Worktree formatting utilities."""

from typing import Optional

from gwt.constants import (
    MAX_MESSAGE_LENGTH,
    SYMBOL_AHEAD,
    SYMBOL_BEHIND,
    SYMBOL_CLEAN,
    SYMBOL_DIRTY,
    SYMBOL_DIVERGED,
    SYMBOL_NO_REMOTE,
    SYMBOL_SYNCED,
)
from gwt.models.worktree import RemoteSyncStatus, WorktreeInfo

SYNC_SYMBOLS = {
    RemoteSyncStatus.SYNCED: SYMBOL_SYNCED,
    RemoteSyncStatus.AHEAD: SYMBOL_AHEAD,
    RemoteSyncStatus.BEHIND: SYMBOL_BEHIND,
    RemoteSyncStatus.DIVERGED: SYMBOL_DIVERGED,
    RemoteSyncStatus.NO_REMOTE: SYMBOL_NO_REMOTE,
}

SYNC_COLORS = {
    RemoteSyncStatus.SYNCED: "green",
    RemoteSyncStatus.AHEAD: "cyan",
    RemoteSyncStatus.BEHIND: "yellow",
    RemoteSyncStatus.DIVERGED: "red",
    RemoteSyncStatus.NO_REMOTE: "grey50",
}


def format_sync_status(status: RemoteSyncStatus) -> str:
    """
    Format remote sync status as symbol plus label.

    Args:
        status: Remote sync status

    Returns:
        String like "↑ ahead" or "- no-remote"
    """
    return f"{SYNC_SYMBOLS[status]} {status.value}"


def format_changes(worktree: WorktreeInfo) -> str:
    """Dirty marker for a worktree; unknown status reads as clean."""
    return SYMBOL_DIRTY if worktree.is_dirty else SYMBOL_CLEAN


def truncate_message(message: Optional[str], max_length: int = MAX_MESSAGE_LENGTH) -> str:
    """
    Reduce a commit message to its first line, truncated with "...".

    Args:
        message: Commit message (may be None when lookup failed)
        max_length: Maximum length of the returned string

    Returns:
        First line of the message, at most max_length characters
    """
    if not message:
        return ""
    lines = message.splitlines()
    first_line = lines[0] if lines else ""
    if len(first_line) > max_length:
        return first_line[: max_length - 3] + "..."
    return first_line


def format_worktree_choice(worktree: WorktreeInfo) -> str:
    """
    Format a worktree as a single plain-text line for selection menus.

    Example:
        "/src/app-feature-x (feature/x) [a1b2c3d]"
    """
    current = " *current*" if worktree.is_current else ""
    return f"{worktree.path} ({worktree.branch_name}) [{worktree.commit_sha}]{current}"
