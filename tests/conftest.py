"""Pytest fixtures for gwt tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest

from gwt.commands.context import CommandContext
from gwt.config import Config
from gwt.models.worktree import WorktreeInfo
from gwt.services.display_service import DisplayService
from gwt.services.git.operations import GitOperations
from gwt.services.prompt_service import PromptService
from gwt.services.worktree_manager import WorktreeManager


def _configure_identity(repo: git.Repo) -> None:
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")


def commit_file(repo: git.Repo, name: str, content: str, message: str) -> str:
    """Write a file into the repo's working tree and commit it."""
    path = Path(repo.working_tree_dir) / name
    path.write_text(content)
    repo.index.add([name])
    return repo.index.commit(message).hexsha


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        # Resolve symlinks (macOS /var) so paths compare equal to git's
        yield Path(tmpdir).resolve()


@pytest.fixture
def config():
    """Default configuration."""
    return Config()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main."""
    repo_path = temp_dir / "project"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    _configure_identity(repo)

    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    repo.git.branch("-M", "main")

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_remote(git_repo, temp_dir):
    """Repository whose main branch is pushed to a bare 'origin'."""
    remote_path = temp_dir / "origin.git"
    git.Repo.init(remote_path, bare=True)

    git_repo.create_remote("origin", str(remote_path))
    git_repo.git.push("-u", "origin", "main")
    git_repo.git.fetch("origin")

    yield git_repo


@pytest.fixture
def in_repo(git_repo, monkeypatch):
    """Run the test from inside the repository."""
    monkeypatch.chdir(git_repo.working_tree_dir)
    return git_repo


def make_worktree(path, branch="feature/x", sha="abc1234", **kwargs) -> WorktreeInfo:
    """Build a WorktreeInfo for tests."""
    return WorktreeInfo(path=str(path), branch_name=branch, commit_sha=sha, **kwargs)


@pytest.fixture
def worktree_factory():
    """Factory for WorktreeInfo objects."""
    return make_worktree


@pytest.fixture
def committer():
    """Factory that commits a file into a repository."""
    return commit_file


@pytest.fixture
def main_worktree():
    return make_worktree("/src/project", branch="main", sha="1111111", is_main=True, is_current=True)


@pytest.fixture
def feature_worktree():
    return make_worktree("/src/project-feature-x", branch="feature/x", sha="2222222")


@pytest.fixture
def mock_git_ops(config):
    """Create a mock GitOperations."""
    ops = Mock(spec=GitOperations)
    ops.config = config
    ops.remote_name = "origin"

    ops.list_worktrees = Mock(return_value=[])
    ops.branch_exists = Mock(return_value=False)
    ops.get_current_branch = Mock(return_value="main")
    ops.get_base_branch = Mock(return_value="main")
    ops.get_last_commit_message = Mock(return_value="Initial commit")
    ops.has_changes = Mock(return_value=False)

    return ops


@pytest.fixture
def mock_display():
    """Create a mock DisplayService."""
    return Mock(spec=DisplayService)


@pytest.fixture
def mock_prompt():
    """Create a mock PromptService that is interactive and answers nothing."""
    prompt = Mock(spec=PromptService)
    prompt.is_interactive = Mock(return_value=True)
    prompt.select = Mock(return_value=None)
    prompt.confirm = Mock(return_value=True)
    return prompt


@pytest.fixture
def manager(mock_git_ops, mock_display, config):
    """WorktreeManager wired to mocks."""
    return WorktreeManager(mock_git_ops, mock_display, config)


@pytest.fixture
def ctx(config, mock_git_ops, manager, mock_display, mock_prompt):
    """CommandContext wired to mocks."""
    return CommandContext(config, mock_git_ops, manager, mock_display, mock_prompt)
