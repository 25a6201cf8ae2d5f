"""prune command: drop metadata of worktrees deleted outside gwt."""

from gwt.commands.context import CommandContext


def prune_command(ctx: CommandContext) -> int:
    ctx.display.step("Pruning worktrees...")

    output = ctx.git_ops.prune_worktrees()
    if output.strip():
        ctx.display.success("Pruned worktrees:")
        ctx.display.plain(output)
    else:
        ctx.display.info("No worktrees to prune")
    return 0
