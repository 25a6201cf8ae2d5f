"""switch command: print the path of another worktree."""

import os
from typing import Optional

from gwt.commands.context import CommandContext
from gwt.exceptions import WorktreeError
from gwt.formatters import format_worktree_choice


def switch_command(ctx: CommandContext, target: Optional[str] = None) -> int:
    """Resolve a worktree by path or branch and print its path on stdout.

    A subprocess cannot change its parent shell's directory; the shell
    function installed by ``gwt setup`` captures the path and cds into it.
    """
    worktrees = ctx.git_ops.list_worktrees()

    if not target:
        if not worktrees:
            ctx.display.warn("No worktrees found")
            return 0

        others = [wt for wt in worktrees if not wt.is_current]
        if not others:
            ctx.display.warn("No other worktrees to switch to")
            return 0

        selected = ctx.prompt.select(
            "Select worktree to switch to:",
            [(format_worktree_choice(wt), wt.path) for wt in others],
        )
        if selected is None:
            ctx.display.info("Cancelled")
            return 0
        target_path = selected
    else:
        worktree = ctx.manager.find_worktree(target, worktrees)
        if worktree is not None:
            target_path = worktree.path
            if worktree.branch_name == target and worktree.path != target:
                ctx.display.info(f"Found worktree for branch '{worktree.branch_name}': {target_path}")
        elif os.path.isabs(target) and os.path.isdir(target):
            target_path = target
        else:
            raise WorktreeError(f"No worktree found for branch: {target}", target)

    print(target_path)
    return 0
