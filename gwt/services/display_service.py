"""Display and formatting service for worktree information"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from gwt.constants import CLI_COLORS, LEGEND_TEXT, SYMBOL_CURRENT, SYMBOL_PRUNABLE
from gwt.formatters import format_changes, format_sync_status, truncate_message
from gwt.formatters.worktree import SYNC_COLORS
from gwt.logging_config import get_logger
from gwt.models.worktree import WorktreeInfo

logger = get_logger(__name__)


class DisplayService:
    """Renders status lines and worktree listings.

    Everything is printed to stderr so that stdout only ever carries the
    path a shell wrapper should cd into.
    """

    def __init__(self, console: Optional[Console] = None, debug: bool = False):
        self.console = console or Console(stderr=True)
        self.debug_mode = debug

    def success(self, message: str) -> None:
        self.console.print(f"[green]✅[/green] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]❌ {escape(message)}[/red]")

    def warn(self, message: str) -> None:
        self.console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")

    def info(self, message: str) -> None:
        self.console.print(f"[blue]ℹ️[/blue]  {escape(message)}")

    def step(self, message: str) -> None:
        self.console.print(f"[cyan]→[/cyan] {escape(message)}")

    def debug(self, message: str) -> None:
        """Print only when debug output is enabled."""
        if self.debug_mode:
            self.console.print(f"[{CLI_COLORS['muted']}]🐛 {escape(message)}[/]")

    def separator(self) -> None:
        self.console.print(f"[{CLI_COLORS['muted']}]{'─' * 50}[/]")

    def highlight(self, message: str) -> None:
        self.console.print(f"[black on cyan] {escape(message)} [/]")

    def plain(self, message: str = "") -> None:
        self.console.print(message, markup=False, highlight=False)

    def print_exception(self) -> None:
        """Print the traceback of the exception being handled."""
        self.console.print_exception()

    def display_worktrees(self, worktrees: List[WorktreeInfo], show_legend: bool = True) -> None:
        """Display a table of worktree information."""
        table = Table(box=None, pad_edge=False)
        table.add_column("")
        table.add_column("Path", style=CLI_COLORS["path"], overflow="fold")
        table.add_column("Branch", style=CLI_COLORS["branch"])
        table.add_column("Commit", style=CLI_COLORS["commit"])
        table.add_column("State")
        table.add_column("Sync")
        table.add_column("Updated", style=CLI_COLORS["muted"])
        table.add_column("Last Commit", style=CLI_COLORS["muted"])

        for wt in worktrees:
            if wt.is_current:
                marker = Text(SYMBOL_CURRENT, style="bold green")
            elif wt.is_prunable:
                marker = Text(SYMBOL_PRUNABLE, style="red")
            else:
                marker = Text("")

            path = Text(wt.path)
            if wt.is_main:
                path.append(" (main)", style="bold")

            state_style = CLI_COLORS["dirty"] if wt.is_dirty else CLI_COLORS["clean"]

            table.add_row(
                marker,
                path,
                Text(wt.branch_name),
                Text(wt.commit_sha),
                Text(format_changes(wt), style=state_style),
                Text(format_sync_status(wt.sync_status), style=SYNC_COLORS[wt.sync_status]),
                Text(wt.last_commit_relative),
                Text(truncate_message(wt.last_commit_message)),
                style="bold" if wt.is_current else None,
            )

        self.console.print(table)

        if show_legend:
            self.console.print()
            self.console.print(LEGEND_TEXT, style=CLI_COLORS["muted"], markup=False, highlight=False)
