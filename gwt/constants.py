"""Shared constants for gwt."""

from typing import List


DEFAULT_REMOTE = "origin"

# Probed in order; the integration branch wins over the primary branch names
BASE_BRANCH_CANDIDATES: List[str] = ["develop", "master", "main"]

# Copied from the invoking directory into every new worktree
ENV_FILES: List[str] = [".env", ".env.local", ".env.development"]

# Branch name reported for worktrees in detached HEAD state
DETACHED_BRANCH = "HEAD"

STASH_MESSAGE = "gwt auto-stash before rebase"

SHORT_SHA_LENGTH = 7

# Commit subjects longer than this are truncated in listings
MAX_MESSAGE_LENGTH = 60

UNKNOWN_TIME = "unknown"


# Symbol constants
SYMBOL_CURRENT = "➤"
SYMBOL_DIRTY = "●"
SYMBOL_CLEAN = "✓"
SYMBOL_PRUNABLE = "✗"
SYMBOL_AHEAD = "↑"
SYMBOL_BEHIND = "↓"
SYMBOL_DIVERGED = "↕"
SYMBOL_SYNCED = "="
SYMBOL_NO_REMOTE = "-"


# CLI colors (Rich color names)
CLI_COLORS = {
    "path": "cyan",
    "branch": "green",
    "commit": "yellow",
    "muted": "grey50",
    "dirty": "red",
    "clean": "green",
}


LEGEND_TEXT = """\
Legend:
➤ = Current worktree      ● = Uncommitted changes   ✓ = Clean
↑ = Ahead of remote       ↓ = Behind remote         ↕ = Diverged
= = In sync with remote   - = No remote branch      ✗ = Prunable"""
