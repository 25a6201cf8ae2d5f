"""Interactive prompts rendered on stderr."""

import sys
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt

from gwt.logging_config import get_logger

logger = get_logger(__name__)

# (label, value)
Choice = Tuple[str, str]


class PromptService:
    """Narrow selection/confirmation capability.

    Callers only ever see plain strings and booleans back.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    @staticmethod
    def is_interactive() -> bool:
        """True when a user can answer prompts."""
        return sys.stdin.isatty()

    def select(self, message: str, choices: Sequence[Choice]) -> Optional[str]:
        """Present a numbered menu and return the chosen value.

        Args:
            message: Question shown above the prompt
            choices: (label, value) pairs in display order

        Returns:
            The value of the chosen entry, or None when cancelled
        """
        if not choices:
            return None

        self.console.print(f"[bold]{escape(message)}[/bold]")
        for number, (label, _) in enumerate(choices, start=1):
            self.console.print(f"  [cyan]{number:>2}[/cyan]) {escape(label)}")
        self.console.print("  [cyan] 0[/cyan]) Cancel")

        valid: List[str] = [str(n) for n in range(len(choices) + 1)]
        try:
            answer = IntPrompt.ask(
                "Select", console=self.console, choices=valid, show_choices=False, default=0
            )
        except EOFError:
            logger.debug("Prompt closed without an answer")
            return None

        if answer == 0:
            return None
        return choices[answer - 1][1]

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        try:
            return Confirm.ask(escape(message), console=self.console, default=default)
        except EOFError:
            logger.debug("Prompt closed without an answer")
            return default
