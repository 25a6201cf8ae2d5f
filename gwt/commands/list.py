"""list command: show worktrees and offer switch/delete actions."""

from typing import List, Tuple

from gwt.commands.context import CommandContext
from gwt.commands.delete import delete_command
from gwt.commands.switch import switch_command
from gwt.formatters import format_worktree_choice


def list_command(ctx: CommandContext) -> int:
    """Print the enriched worktree listing to stderr.

    When a user is at the terminal, follow up with a menu of
    "switch to" / "delete" actions for the other worktrees.
    """
    worktrees = ctx.manager.list_worktrees()

    if not worktrees:
        ctx.display.warn("No worktrees found")
        return 0

    ctx.display.highlight("Git Worktrees")
    ctx.display.plain()
    ctx.display.display_worktrees(worktrees)
    ctx.display.plain()

    if not ctx.prompt.is_interactive():
        return 0

    choices: List[Tuple[str, str]] = []
    for wt in worktrees:
        # The current worktree can be neither switched to nor deleted
        if wt.is_current:
            continue
        label = format_worktree_choice(wt)
        choices.append((f"🔄 Switch to: {label}", f"switch:{wt.path}"))
        if not wt.is_main:
            choices.append((f"🗑️  Delete:    {label}", f"delete:{wt.path}"))

    if not choices:
        ctx.display.info("No other worktrees to manage")
        return 0

    selection = ctx.prompt.select("Select action:", choices)
    if selection is None:
        ctx.display.info("Cancelled")
        return 0

    action, _, worktree_path = selection.partition(":")
    if action == "switch":
        return switch_command(ctx, worktree_path)
    return delete_command(ctx, worktree_path, force=False)
