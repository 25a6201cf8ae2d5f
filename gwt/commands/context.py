"""Shared wiring for command handlers."""

from dataclasses import dataclass
from typing import Optional

from gwt.config import Config
from gwt.exceptions import GwtError
from gwt.services.display_service import DisplayService
from gwt.services.git.operations import GitOperations
from gwt.services.prompt_service import PromptService
from gwt.services.worktree_manager import WorktreeManager


@dataclass
class CommandContext:
    """Services a command handler works with."""

    config: Config
    git_ops: GitOperations
    manager: WorktreeManager
    display: DisplayService
    prompt: PromptService

    @classmethod
    def create(
        cls,
        config: Optional[Config] = None,
        display: Optional[DisplayService] = None,
        prompt: Optional[PromptService] = None,
        repo_path: Optional[str] = None,
    ) -> "CommandContext":
        """Build the default service graph.

        The gateway follows the process working directory unless repo_path
        is given.
        """
        config = config or Config()
        display = display or DisplayService(debug=config.debug)
        prompt = prompt or PromptService(display.console)
        git_ops = GitOperations(repo_path, config)
        manager = WorktreeManager(git_ops, display, config)
        return cls(config, git_ops, manager, display, prompt)


def report_error(display: DisplayService, error: GwtError, debug: bool = False) -> None:
    """Print a domain error as one line, plus details in debug mode.

    Must be called while the error is being handled so the traceback is
    available.
    """
    display.error(str(error))
    if debug:
        command = getattr(error, "command", None)
        if command:
            display.debug(f"Command: {command}")
        display.print_exception()
