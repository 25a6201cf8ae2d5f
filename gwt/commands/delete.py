"""delete command: remove a worktree."""

from typing import Optional

from gwt.commands.context import CommandContext
from gwt.exceptions import WorktreeError
from gwt.formatters import format_worktree_choice


def delete_command(ctx: CommandContext, target: Optional[str] = None, force: bool = False) -> int:
    """Delete a worktree given by path or branch, or chosen interactively.

    The main worktree is refused before anything is removed, even with force.
    """
    worktrees = ctx.git_ops.list_worktrees()

    if target:
        worktree = ctx.manager.find_worktree(target, worktrees)
        if worktree is None:
            raise WorktreeError(f"No worktree found for: {target}", target)
        if worktree.is_main:
            raise WorktreeError("Cannot delete main worktree", worktree.path)
        target_path = worktree.path
    else:
        if not worktrees:
            ctx.display.warn("No worktrees found")
            return 0

        deletable = [wt for wt in worktrees if not wt.is_current and not wt.is_main]
        if not deletable:
            ctx.display.warn("No other worktrees to delete (main worktree cannot be deleted)")
            return 0

        selected = ctx.prompt.select(
            "Select worktree to delete:",
            [(format_worktree_choice(wt), wt.path) for wt in deletable],
        )
        if selected is None:
            ctx.display.info("Deletion cancelled")
            return 0
        target_path = selected

    if not force and not ctx.prompt.confirm(
        f"Are you sure you want to delete worktree: {target_path}?", default=False
    ):
        ctx.display.info("Deletion cancelled")
        return 0

    ctx.manager.delete_worktree(target_path, force)
    return 0
