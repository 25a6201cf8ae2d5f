"""sync command: rebase the current branch onto the base branch."""

from typing import Optional

from gwt.commands.context import CommandContext, report_error
from gwt.exceptions import GwtError


def sync_command(ctx: CommandContext, base: Optional[str] = None) -> int:
    """Rebase the current worktree onto the latest remote base branch."""
    ctx.display.highlight("Syncing Worktree")

    try:
        current_branch = ctx.git_ops.get_current_branch()
        ctx.display.info(f"Current branch: {current_branch}")

        base_branch = base or ctx.git_ops.get_base_branch()
        ctx.display.info(f"Base branch: {base_branch}")

        ctx.display.step("Rebasing to latest base branch...")
        ctx.git_ops.rebase_to_base(base_branch)
    except GwtError as e:
        report_error(ctx.display, e, ctx.config.debug)
        ctx.display.warn("You may need to resolve conflicts manually")
        return 1

    ctx.display.success("Sync completed!")
    ctx.display.info(f"Branch {current_branch} is now up to date with {base_branch}")
    return 0
