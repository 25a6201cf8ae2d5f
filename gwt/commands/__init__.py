"""Command handlers for gwt.

Each handler returns the process exit code and lets GwtError propagate to
the CLI boundary.
"""

from .context import CommandContext, report_error
from .add import add_command
from .delete import delete_command
from .list import list_command
from .prune import prune_command
from .shell_setup import setup_command
from .switch import switch_command
from .sync import sync_command

__all__ = [
    "CommandContext",
    "report_error",
    "add_command",
    "delete_command",
    "list_command",
    "prune_command",
    "setup_command",
    "switch_command",
    "sync_command",
]
