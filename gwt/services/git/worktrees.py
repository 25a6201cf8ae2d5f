"""Worktree operations service for gwt."""

from typing import Any, Dict, List, Optional

import git

from gwt.constants import DETACHED_BRANCH, SHORT_SHA_LENGTH
from gwt.exceptions import GitOperationError
from gwt.logging_config import get_logger
from gwt.models.worktree import WorktreeInfo
from gwt.services.git.base import RepositoryService, git_command_error

logger = get_logger(__name__)


def _build_worktree(entry: Dict[str, Any]) -> WorktreeInfo:
    return WorktreeInfo(
        path=entry["path"],
        branch_name=entry.get("branch", ""),
        commit_sha=entry.get("HEAD", ""),
        is_detached=entry.get("detached", False),
        is_main=entry.get("is_main", False),
        is_prunable=entry.get("prunable", False),
    )


def parse_worktree_list(output: str, current_path: Optional[str] = None) -> List[WorktreeInfo]:
    """Parse the output of ``git worktree list --porcelain``.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name
        (blank line between worktrees)

    Detached worktrees carry a ``detached`` line instead of ``branch``, and
    worktrees whose directory is gone carry ``prunable <reason>``.

    Args:
        output: Raw porcelain output
        current_path: Path to flag as the current worktree (exact match)

    Returns:
        Worktrees in git's listing order; the first one is the main worktree
    """
    worktrees: List[WorktreeInfo] = []
    entry: Dict[str, Any] = {}

    for line in output.split("\n"):
        line = line.rstrip("\r")

        if line.startswith("worktree "):
            if entry.get("path"):
                worktrees.append(_build_worktree(entry))
            # First worktree in list is always the main one
            entry = {"path": line[len("worktree "):], "is_main": not worktrees}
        elif not line:
            # Empty line marks end of worktree entry
            if entry.get("path"):
                worktrees.append(_build_worktree(entry))
            entry = {}
        elif line.startswith("HEAD "):
            entry["HEAD"] = line[len("HEAD "):][:SHORT_SHA_LENGTH]
        elif line.startswith("branch "):
            ref = line[len("branch "):]
            if ref.startswith("refs/heads/"):
                ref = ref[len("refs/heads/"):]
            entry["branch"] = ref
        elif line == "detached":
            entry["detached"] = True
            entry["branch"] = DETACHED_BRANCH
        elif line == "prunable" or line.startswith("prunable "):
            entry["prunable"] = True

    # Handle last entry if no trailing blank line
    if entry.get("path"):
        worktrees.append(_build_worktree(entry))

    if current_path is not None:
        for wt in worktrees:
            wt.is_current = wt.path == current_path

    return worktrees


class WorktreeService(RepositoryService):
    """Service for managing git worktrees."""

    def list_worktrees(self) -> List[WorktreeInfo]:
        """Get information about all worktrees.

        Returns:
            List of WorktreeInfo objects, main worktree first

        Raises:
            GitOperationError: If git cannot list worktrees
        """
        command = "git worktree list --porcelain"
        try:
            output = self._get_repo().git.worktree("list", "--porcelain")
        except git.exc.GitCommandError as e:
            raise git_command_error(e, "list_worktrees", command) from e

        worktree_list = parse_worktree_list(output, self.working_dir)
        logger.debug(f"Found {len(worktree_list)} worktrees")
        for wt in worktree_list:
            logger.debug(f"  {wt}")
        return worktree_list

    def add_worktree(
        self,
        path: str,
        branch_name: str,
        create_new: bool,
        start_point: Optional[str] = None,
    ) -> None:
        """Create a worktree at path.

        Args:
            path: Directory for the new worktree
            branch_name: Branch to check out
            create_new: Create branch_name at start_point instead of attaching it
            start_point: Commit-ish the new branch starts from

        Raises:
            GitOperationError: If git worktree add fails
        """
        if create_new:
            if not start_point:
                raise GitOperationError(
                    "create_worktree", branch_name, "A start point is required for a new branch"
                )
            args = ["add", path, "-b", branch_name, start_point]
        else:
            args = ["add", path, branch_name]

        command = "git worktree " + " ".join(args)
        try:
            self._get_repo().git.worktree(*args)
        except git.exc.GitCommandError as e:
            raise git_command_error(e, "create_worktree", command, branch_name) from e
        logger.info(f"Created worktree at {path} for branch {branch_name}")

    def remove_worktree(self, path: str, force: bool = False) -> None:
        """Remove a worktree at the specified path.

        Args:
            path: Path to the worktree directory
            force: Force removal even if working tree is dirty or locked

        Raises:
            GitOperationError: If git worktree remove fails
        """
        args = ["remove", path]
        if force:
            args.append("--force")

        command = "git worktree " + " ".join(args)
        try:
            self._get_repo().git.worktree(*args)
        except git.exc.GitCommandError as e:
            raise git_command_error(e, "remove_worktree", command) from e
        logger.info(f"Removed worktree at {path}")

    def prune_worktrees(self) -> str:
        """Prune worktree metadata whose directories no longer exist.

        Returns:
            git's verbose prune report, unparsed (empty when nothing was pruned)

        Raises:
            GitOperationError: If git worktree prune fails
        """
        command = "git worktree prune -v"
        try:
            # git prints the verbose report on stderr
            _, stdout, stderr = self._get_repo().git.worktree(
                "prune", "-v", with_extended_output=True
            )
        except git.exc.GitCommandError as e:
            raise git_command_error(e, "prune_worktrees", command) from e
        logger.info("Pruned orphaned worktree metadata")
        return "\n".join(part for part in (stdout, stderr) if part and part.strip())
