"""Worktree data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from gwt.constants import UNKNOWN_TIME


class RemoteSyncStatus(Enum):
    """Sync status of a worktree's branch with its remote counterpart."""
    SYNCED = "synced"
    AHEAD = "ahead"
    BEHIND = "behind"
    DIVERGED = "diverged"
    NO_REMOTE = "no-remote"

    @classmethod
    def classify(cls, ahead: int, behind: int) -> "RemoteSyncStatus":
        """Classify a pair of left-right commit counts."""
        if ahead and behind:
            return cls.DIVERGED
        if ahead:
            return cls.AHEAD
        if behind:
            return cls.BEHIND
        return cls.SYNCED


@dataclass
class WorktreeInfo:
    """Information about a git worktree."""

    path: str
    branch_name: str
    commit_sha: str
    is_current: bool = False
    is_detached: bool = False
    is_main: bool = False  # Holds the shared .git directory
    is_prunable: bool = False  # Directory removed outside of git

    # Derived at list time, never persisted
    last_commit_message: Optional[str] = None
    last_commit_date: Optional[datetime] = None
    last_commit_relative: str = UNKNOWN_TIME
    has_changes: Optional[bool] = None  # None = couldn't check
    sync_status: RemoteSyncStatus = RemoteSyncStatus.NO_REMOTE

    @property
    def is_dirty(self) -> bool:
        """True only when uncommitted changes were actually detected."""
        return self.has_changes is True

    def __str__(self) -> str:
        """String representation of worktree."""
        status = "prunable" if self.is_prunable else "active"
        main_marker = " (main)" if self.is_main else ""
        return f"{self.branch_name} @ {self.path}{main_marker} [{status}]"


@dataclass
class WorktreeOptions:
    """Options for creating a worktree."""

    branch_name: Optional[str] = None  # None = use the current branch
    auto_rebase: bool = True
    copy_env: bool = True
    base_branch: Optional[str] = None  # None = detect develop/master/main
    custom_path: Optional[str] = None
    from_ref: Optional[str] = None  # Start point for new branches
