"""Git operations service"""

import re
from datetime import datetime
from typing import List, Optional, Union

import git

from gwt.config import Config
from gwt.constants import DETACHED_BRANCH, STASH_MESSAGE
from gwt.exceptions import (
    BaseBranchNotFoundError,
    DetachedHeadError,
    GitOperationError,
)
from gwt.logging_config import get_logger
from gwt.models.worktree import RemoteSyncStatus, WorktreeInfo
from gwt.services.git.base import RepositoryService, git_command_error
from gwt.services.git.worktrees import WorktreeService

logger = get_logger(__name__)


class GitOperations(RepositoryService):
    """The single boundary between gwt and the git binary."""

    def __init__(self, repo_path: Optional[str] = None, config: Union[Config, dict, None] = None):
        """Initialize the service.

        Args:
            repo_path: Path inside the git repository. None follows the
                process working directory, which lets a scoped directory
                change retarget every subsequent call.
            config: Configuration dictionary or Config object
        """
        super().__init__(repo_path)
        if config is None:
            config = Config()
        elif isinstance(config, dict):
            config = Config.from_dict(config)
        self.config = config
        self.remote_name = config.remote_name

        self.worktree_service = WorktreeService(repo_path)

        logger.debug("Git operations initialized")

    def _remote_ref(self, branch_name: str) -> str:
        return f"{self.remote_name}/{branch_name}"

    # -- Branches ---------------------------------------------------------

    def _ref_resolves(self, repo: git.Repo, ref: str) -> bool:
        try:
            repo.git.rev_parse("--verify", "--quiet", ref)
            return True
        except git.exc.GitCommandError:
            return False

    def branch_exists(self, branch_name: str) -> bool:
        """Check if a branch exists locally or as a remote-tracking branch."""
        repo = self._get_repo()
        if self._ref_resolves(repo, branch_name):
            return True
        return self._ref_resolves(repo, self._remote_ref(branch_name))

    def get_current_branch(self) -> str:
        """Get the branch checked out in the working directory.

        Raises:
            DetachedHeadError: If HEAD does not point at a branch
            GitOperationError: If git cannot resolve HEAD
        """
        command = "git rev-parse --abbrev-ref HEAD"
        try:
            branch_name = self._get_repo().git.rev_parse("--abbrev-ref", "HEAD").strip()
        except git.exc.GitCommandError as e:
            raise git_command_error(e, "get_current_branch", command) from e

        if branch_name == DETACHED_BRANCH:
            raise DetachedHeadError()
        return branch_name

    def get_base_branch(self) -> str:
        """Find the base branch, probing candidates in priority order.

        Raises:
            BaseBranchNotFoundError: If none of the candidates exist
        """
        candidates: List[str] = self.config.base_branch_candidates
        for branch_name in candidates:
            if self.branch_exists(branch_name):
                logger.debug(f"Detected base branch: {branch_name}")
                return branch_name
        raise BaseBranchNotFoundError(candidates)

    def get_default_branch(self) -> str:
        """Get the default branch advertised by the remote's HEAD.

        Falls back to get_base_branch() when the remote HEAD is unknown.
        """
        remote_head = f"refs/remotes/{self.remote_name}/HEAD"
        try:
            result = self._get_repo().git.symbolic_ref(remote_head)
            match = re.match(rf"refs/remotes/{re.escape(self.remote_name)}/(.+)", result.strip())
            if match:
                return match.group(1)
        except git.exc.GitCommandError as e:
            logger.debug(f"Could not read {remote_head}: {e}")
        return self.get_base_branch()

    # -- Worktrees --------------------------------------------------------

    def list_worktrees(self) -> List[WorktreeInfo]:
        """List worktrees in git's order, main worktree first."""
        return self.worktree_service.list_worktrees()

    def create_worktree(
        self,
        path: str,
        branch_name: str,
        create_new: bool,
        start_point: Optional[str] = None,
    ) -> None:
        """Create a worktree, optionally creating its branch.

        Args:
            path: Directory for the new worktree
            branch_name: Branch to check out
            create_new: Create the branch instead of attaching an existing one
            start_point: Where a new branch starts (defaults to the remote base branch)
        """
        if create_new and not start_point:
            start_point = self._remote_ref(self.get_base_branch())
        self.worktree_service.add_worktree(path, branch_name, create_new, start_point)

    def remove_worktree(self, path: str, force: bool = False) -> None:
        """Remove a worktree."""
        self.worktree_service.remove_worktree(path, force)

    def prune_worktrees(self) -> str:
        """Prune stale worktree metadata, returning git's report verbatim."""
        return self.worktree_service.prune_worktrees()

    # -- Rebase & pull ----------------------------------------------------

    def rebase_to_base(self, base_branch: Optional[str] = None) -> None:
        """Rebase the current branch onto the remote base branch.

        Uncommitted changes (untracked files included) are stashed first and
        restored afterwards. The rebase targets ``origin/<base>`` directly so
        the local base branch, which may be checked out in another worktree,
        is never touched.

        A failing stash pop is logged and leaves the stash in place; it does
        not turn the successful rebase into a failure.

        Args:
            base_branch: Base branch override (default: detected base branch)

        Raises:
            GitOperationError: If stashing, fetching or rebasing fails
        """
        target_base = base_branch or self.get_base_branch()
        target = self._remote_ref(target_base)
        repo = self._get_repo()

        stashed = repo.is_dirty(untracked_files=True)
        if stashed:
            logger.info("Stashing local changes before rebase")
            command = f"git stash push --include-untracked -m \"{STASH_MESSAGE}\""
            try:
                repo.git.stash("push", "--include-untracked", "-m", STASH_MESSAGE)
            except git.exc.GitCommandError as e:
                raise git_command_error(e, "rebase", command) from e

        command = f"git fetch {self.remote_name}"
        try:
            repo.git.fetch(self.remote_name)
            command = f"git rebase {target}"
            repo.git.rebase(target)
        except git.exc.GitCommandError as e:
            if stashed:
                logger.warning(
                    f"Your local changes are saved in the stash ('{STASH_MESSAGE}'); "
                    "run 'git stash pop' once the rebase is resolved"
                )
            raise git_command_error(e, "rebase", command, target_base) from e

        if stashed:
            try:
                repo.git.stash("pop")
            except git.exc.GitCommandError as e:
                logger.warning(
                    "Rebase succeeded but restoring stashed changes failed; "
                    f"they remain in the stash ('{STASH_MESSAGE}'): {e}"
                )

    def pull_branch(self, branch_name: str) -> None:
        """Pull the latest changes for a branch from the remote."""
        command = f"git pull {self.remote_name} {branch_name}"
        try:
            self._get_repo().git.pull(self.remote_name, branch_name)
        except git.exc.GitCommandError as e:
            raise git_command_error(e, "pull", command, branch_name) from e

    # -- Per-worktree queries ---------------------------------------------

    def get_last_commit_message(self, commit: Optional[str] = None) -> Optional[str]:
        """Get the subject line of a commit (HEAD when omitted).

        Returns:
            The subject, or None if it could not be read
        """
        try:
            result = self._get_repo().git.show(commit or "HEAD", "--no-patch", "--format=%s")
            return result.strip()
        except (git.exc.GitError, GitOperationError) as e:
            logger.debug(f"Could not read commit message for {commit or 'HEAD'}: {e}")
            return None

    def get_commit_date(self, commit: str, worktree_path: Optional[str] = None) -> datetime:
        """Get the committer date of a commit.

        Args:
            commit: Commit hash (short or full)
            worktree_path: Worktree to resolve the commit in (git -C)

        Returns:
            Timezone-aware commit date

        Raises:
            GitOperationError: If the commit cannot be read
        """
        args = ["git"]
        if worktree_path:
            args += ["-C", worktree_path]
        args += ["show", "-s", "--format=%cI", commit]

        command = " ".join(args)
        try:
            output = self._get_repo().git.execute(args)
        except git.exc.GitCommandError as e:
            raise git_command_error(e, "get_commit_date", command) from e

        try:
            return datetime.fromisoformat(output.strip())
        except ValueError as e:
            raise GitOperationError(
                "get_commit_date", message=f"Unexpected date '{output.strip()}'", command=command
            ) from e

    def has_changes(self, worktree_path: str) -> bool:
        """Check if a worktree has staged, unstaged or untracked changes.

        Raises:
            GitOperationError: If git status fails in the worktree
        """
        args = ["git", "-C", worktree_path, "status", "--porcelain"]
        try:
            output = self._get_repo().git.execute(args)
        except git.exc.GitCommandError as e:
            raise git_command_error(e, "has_changes", " ".join(args)) from e
        return bool(output.strip())

    def get_remote_sync_status(self, branch_name: str, worktree_path: str) -> RemoteSyncStatus:
        """Compare a branch with its counterpart on the remote.

        Always compares against ``origin/<branch>``, whatever upstream the
        branch tracks. Never raises: any failure reads as NO_REMOTE.
        """
        if branch_name == DETACHED_BRANCH:
            return RemoteSyncStatus.NO_REMOTE

        remote_branch = self._remote_ref(branch_name)
        try:
            if not self._ref_resolves(self._get_repo(), remote_branch):
                return RemoteSyncStatus.NO_REMOTE

            output = self._get_repo().git.execute([
                "git", "-C", worktree_path,
                "rev-list", "--left-right", "--count",
                f"{branch_name}...{remote_branch}",
            ])
            # Output format: "<ahead>\t<behind>"
            ahead, behind = (int(count) for count in output.split())
        except (git.exc.GitError, GitOperationError, ValueError) as e:
            logger.debug(f"Error checking sync status for {branch_name}: {e}")
            return RemoteSyncStatus.NO_REMOTE

        return RemoteSyncStatus.classify(ahead, behind)
