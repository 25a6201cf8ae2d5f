"""
gwt - Git worktree manager
"""

from .__version__ import __version__
from .services.git import GitOperations
from .services.worktree_manager import WorktreeManager

__all__ = ["GitOperations", "WorktreeManager", "__version__"]
