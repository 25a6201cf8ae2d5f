"""add command: create a worktree."""

from typing import Optional

from gwt.commands.context import CommandContext
from gwt.models.worktree import WorktreeOptions


def add_command(
    ctx: CommandContext,
    branch_name: Optional[str] = None,
    rebase: bool = True,
    env: bool = True,
    base: Optional[str] = None,
    path: Optional[str] = None,
    from_ref: Optional[str] = None,
) -> int:
    """Create a worktree and print its path on stdout."""
    ctx.display.highlight("Creating Git Worktree")

    options = WorktreeOptions(
        branch_name=branch_name,
        auto_rebase=rebase,
        copy_env=env,
        base_branch=base,
        custom_path=path,
        from_ref=from_ref,
    )
    worktree_path = ctx.manager.create_worktree(options)

    ctx.display.separator()
    ctx.display.success("Worktree is ready!")
    ctx.display.plain(f"📂 Path: {worktree_path}")
    ctx.display.plain(f"🌿 Branch: {branch_name or '(current branch)'}")
    ctx.display.separator()
    ctx.display.info("To switch to the worktree, run:")
    ctx.display.plain(f"  cd {worktree_path}")

    # The only stdout output: shell integration cds into it
    print(worktree_path)
    return 0
