"""Formatting utilities for gwt.

- date: Date and relative time formatting
- worktree: Worktree status, sync and menu formatting
"""

from .date import format_relative_time
from .worktree import (
    format_changes,
    format_sync_status,
    format_worktree_choice,
    truncate_message,
)

__all__ = [
    # Date
    "format_relative_time",
    # Worktree
    "format_changes",
    "format_sync_status",
    "format_worktree_choice",
    "truncate_message",
]
