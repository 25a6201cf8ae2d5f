"""Worktree lifecycle management"""

import os
import shutil
from datetime import datetime
from typing import List, Optional

from gwt.config import Config
from gwt.constants import UNKNOWN_TIME
from gwt.exceptions import (
    GitOperationError,
    ValidationError,
    WorktreeError,
    WorktreeExistsError,
)
from gwt.formatters.date import format_relative_time
from gwt.logging_config import get_logger
from gwt.models.worktree import RemoteSyncStatus, WorktreeInfo, WorktreeOptions
from gwt.services.display_service import DisplayService
from gwt.services.git.operations import GitOperations
from gwt.utils.paths import is_non_empty_path, working_directory

logger = get_logger(__name__)

_PATH_SEPARATORS = ("/", "\\")


class WorktreeManager:
    """Turns user intent into git worktree operations.

    Knows nothing about git's command syntax; everything goes through
    GitOperations. Nothing is retried: a half-created worktree is left for
    the user to inspect rather than being created twice.
    """

    def __init__(
        self,
        git_ops: GitOperations,
        display: Optional[DisplayService] = None,
        config: Optional[Config] = None,
    ):
        self.git_ops = git_ops
        self.display = display or DisplayService()
        self.config = config or git_ops.config

    @staticmethod
    def generate_safe_name(branch_name: str) -> str:
        """Make a branch name usable as a single directory name.

        Example:
            "feature/sub/branch" -> "feature-sub-branch"
        """
        safe_name = branch_name
        for separator in _PATH_SEPARATORS:
            safe_name = safe_name.replace(separator, "-")
        return safe_name

    def compute_worktree_path(self, branch_name: str, custom_path: Optional[str] = None) -> str:
        """Compute where the worktree for a branch lives.

        A custom path is simply made absolute. Otherwise the worktree is a
        sibling of the current directory named ``<dirname>-<safe branch>``,
        e.g. ``/src/app`` + ``feature/x`` -> ``/src/app-feature-x``.
        """
        if custom_path:
            return os.path.abspath(custom_path)

        current_dir = os.getcwd()
        dirname = os.path.basename(current_dir.rstrip(os.sep))
        return os.path.abspath(
            os.path.join(current_dir, os.pardir, f"{dirname}-{self.generate_safe_name(branch_name)}")
        )

    @staticmethod
    def validate_branch_name(branch_name: str) -> str:
        """Reject branch names git would refuse or that break the path scheme."""
        name = branch_name.strip()
        if not name:
            raise ValidationError("Branch name cannot be empty", "branch_name")
        if name.startswith("-"):
            raise ValidationError(f"Invalid branch name: '{name}'", "branch_name")
        if any(ch.isspace() for ch in name) or ".." in name or name.endswith((".lock", "/")):
            raise ValidationError(f"Invalid branch name: '{name}'", "branch_name")
        return name

    def _ensure_path_available(self, worktree_path: str) -> None:
        known = {wt.path for wt in self.git_ops.list_worktrees()}
        if worktree_path in known or is_non_empty_path(worktree_path):
            raise WorktreeExistsError(worktree_path)

    def create_worktree(self, options: WorktreeOptions) -> str:
        """Create a worktree as described by options.

        Sequence: resolve branch, create or attach it, copy env files, then
        auto-rebase inside the new worktree. Env copy and rebase problems are
        reported as warnings because the worktree is already usable.

        Returns:
            Absolute path of the new worktree

        Raises:
            ValidationError: If the branch name is unusable
            WorktreeExistsError: If the target path is taken
            GitOperationError: If git cannot create the worktree
        """
        branch_name = options.branch_name
        if not branch_name:
            self.display.step("No branch name provided, using current branch")
            branch_name = self.git_ops.get_current_branch()
        branch_name = self.validate_branch_name(branch_name)

        self.display.step(f"Creating worktree for branch: {branch_name}")

        branch_exists = self.git_ops.branch_exists(branch_name)
        worktree_path = self.compute_worktree_path(branch_name, options.custom_path)
        self._ensure_path_available(worktree_path)

        if branch_exists:
            self.display.info(f"Using existing branch: {branch_name}")
            self.git_ops.create_worktree(worktree_path, branch_name, False)
        else:
            start_point = options.from_ref
            if not start_point and options.base_branch:
                start_point = f"{self.git_ops.remote_name}/{options.base_branch}"
            self.display.info(
                f"Creating new branch: {branch_name}"
                + (f" from {start_point}" if start_point else "")
            )
            self.git_ops.create_worktree(worktree_path, branch_name, True, start_point)

        self.display.success(f"Worktree created: {worktree_path}")

        if options.copy_env:
            self.copy_env_files(os.getcwd(), worktree_path)

        if options.auto_rebase:
            self.display.step("Performing auto-rebase...")
            try:
                with working_directory(worktree_path):
                    self.git_ops.rebase_to_base(options.base_branch)
            except GitOperationError as e:
                logger.debug(f"Auto-rebase failed: {e}")
                self.display.warn("Auto-rebase failed, you may need to rebase manually")
            else:
                self.display.success("Auto-rebase completed")

        return worktree_path

    def copy_env_files(self, source_path: str, target_path: str) -> int:
        """Copy known env files that exist in source_path.

        Returns:
            Number of files copied
        """
        copied = 0
        for name in self.config.env_files:
            src = os.path.join(source_path, name)
            if not os.path.isfile(src):
                continue
            try:
                shutil.copy2(src, os.path.join(target_path, name))
            except OSError as e:
                logger.debug(f"Copying {src} failed: {e}")
                self.display.warn(f"Failed to copy {name}")
                continue
            self.display.info(f"Copied {name}")
            copied += 1

        if copied == 0:
            self.display.info("No .env files found to copy")
        return copied

    def delete_worktree(self, worktree_path: str, force: bool = False) -> None:
        """Remove a worktree.

        Raises:
            WorktreeError: If git refuses to remove it
        """
        try:
            self.git_ops.remove_worktree(worktree_path, force)
        except GitOperationError as e:
            raise WorktreeError(f"Failed to delete worktree: {e}", worktree_path) from e
        self.display.success(f"Worktree deleted: {worktree_path}")

    def _enrich(self, wt: WorktreeInfo, now: datetime) -> None:
        wt.last_commit_message = self.git_ops.get_last_commit_message(wt.commit_sha or None)

        try:
            wt.last_commit_date = self.git_ops.get_commit_date(wt.commit_sha, wt.path)
            wt.last_commit_relative = format_relative_time(wt.last_commit_date, now)
        except GitOperationError as e:
            logger.debug(f"No commit date for {wt.path}: {e}")
            wt.last_commit_relative = UNKNOWN_TIME

        try:
            wt.has_changes = self.git_ops.has_changes(wt.path)
        except GitOperationError as e:
            logger.debug(f"Could not check changes in {wt.path}: {e}")
            wt.has_changes = False

        if wt.is_detached or wt.is_main:
            wt.sync_status = RemoteSyncStatus.NO_REMOTE
        else:
            wt.sync_status = self.git_ops.get_remote_sync_status(wt.branch_name, wt.path)

    def list_worktrees(self) -> List[WorktreeInfo]:
        """List worktrees enriched with commit, change and sync details.

        Each enrichment degrades on its own; only failing to list the
        worktrees at all is an error.

        Returns:
            Worktrees, most recently committed first (undated ones last,
            ties keep git's order)
        """
        worktrees = self.git_ops.list_worktrees()
        now = datetime.now().astimezone()
        for wt in worktrees:
            self._enrich(wt, now)

        dated = [wt for wt in worktrees if wt.last_commit_date is not None]
        undated = [wt for wt in worktrees if wt.last_commit_date is None]
        dated.sort(key=lambda wt: wt.last_commit_date, reverse=True)
        return dated + undated

    def find_worktree(
        self, target: str, worktrees: Optional[List[WorktreeInfo]] = None
    ) -> Optional[WorktreeInfo]:
        """Resolve a path or branch name to a worktree.

        Tries the exact path, then the path made absolute, then the branch name.
        """
        if worktrees is None:
            worktrees = self.git_ops.list_worktrees()

        for wt in worktrees:
            if wt.path == target:
                return wt

        absolute = os.path.abspath(os.path.expanduser(target))
        for wt in worktrees:
            if os.path.abspath(wt.path) == absolute:
                return wt

        for wt in worktrees:
            if wt.branch_name == target and not wt.is_detached:
                return wt
        return None
