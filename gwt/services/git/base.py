"""Shared plumbing for services that talk to git."""

import os
from typing import Optional

import git

from gwt.exceptions import GitOperationError


def clean_stderr(error: git.exc.GitCommandError) -> str:
    """Extract git's own message from a GitCommandError."""
    stderr = (getattr(error, "stderr", "") or "").strip()
    # GitPython prefixes captured stderr with "stderr: '...'"
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip().strip("'").strip()
    return stderr


def git_command_error(
    error: git.exc.GitCommandError,
    operation: str,
    command: str,
    branch: Optional[str] = None,
) -> GitOperationError:
    """Translate a GitCommandError into a GitOperationError."""
    stderr = clean_stderr(error)
    status = getattr(error, "status", "unknown")

    if stderr:
        message = f"{command} failed (exit {status}): {stderr}"
    else:
        message = f"{command} failed with exit code {status}"

    return GitOperationError(operation, branch, message, command=command)


class RepositoryService:
    """Base for services bound to a repository working directory.

    When ``repo_path`` is None the service follows the process working
    directory at call time.
    """

    def __init__(self, repo_path: Optional[str] = None):
        self.repo_path = repo_path

    @property
    def working_dir(self) -> str:
        """Directory git commands run from."""
        return self.repo_path if self.repo_path is not None else os.getcwd()

    def _get_repo(self) -> git.Repo:
        """Get a git.Repo instance for the working directory.

        Creates a new repo instance for each call, so a change of the process
        working directory is always picked up.

        Returns:
            git.Repo: A fresh repository instance
        """
        try:
            return git.Repo(self.working_dir, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise GitOperationError(
                "open_repository", message=f"Not a git repository: {self.working_dir}"
            ) from e
