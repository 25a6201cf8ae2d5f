"""Custom exceptions for gwt"""

from typing import Iterable, Optional


class GwtError(Exception):
    """Base exception for all gwt errors."""
    pass


class GitOperationError(GwtError):
    """Exception raised for errors in Git operations."""

    def __init__(
        self,
        operation: str,
        branch: Optional[str] = None,
        message: Optional[str] = None,
        command: Optional[str] = None,
    ):
        self.operation = operation
        self.branch = branch
        self.message = message
        self.command = command

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class BranchNotFoundError(GitOperationError):
    """Exception raised when a branch is not found."""

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("find_branch", branch, message or f"Branch not found: {branch}")


class BaseBranchNotFoundError(BranchNotFoundError):
    """Exception raised when none of the base branch candidates exist."""

    def __init__(self, candidates: Iterable[str]):
        self.candidates = list(candidates)
        names = ", ".join(self.candidates)
        # No single branch is missing, so don't report one
        GitOperationError.__init__(
            self, "find_base_branch", message=f"No base branch found ({names})"
        )


class DetachedHeadError(GitOperationError):
    """Exception raised when repository is in detached HEAD state."""

    def __init__(self):
        super().__init__(
            "check_state",
            message="Cannot perform this operation in detached HEAD state",
            command="git rev-parse --abbrev-ref HEAD",
        )


class WorktreeError(GwtError):
    """Exception raised for errors in worktree operations."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        super().__init__(message)


class WorktreeExistsError(WorktreeError):
    """Exception raised when a worktree path is already taken."""

    def __init__(self, path: str):
        super().__init__(f"Worktree already exists: {path}", path)


class ValidationError(GwtError):
    """Exception raised for invalid user input or configuration."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)
