"""Data models for gwt."""

from .worktree import RemoteSyncStatus, WorktreeInfo, WorktreeOptions

__all__ = ["RemoteSyncStatus", "WorktreeInfo", "WorktreeOptions"]
