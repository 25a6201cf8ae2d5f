"""Command-line interface for gwt"""

import argparse
import sys
from typing import Optional, Sequence

from gwt.cli.args import parse_args
from gwt.commands import (
    CommandContext,
    add_command,
    delete_command,
    list_command,
    prune_command,
    report_error,
    setup_command,
    switch_command,
    sync_command,
)
from gwt.config import Config
from gwt.exceptions import GwtError
from gwt.logging_config import get_logger, setup_logging
from gwt.services.display_service import DisplayService

logger = get_logger(__name__)


def run_command(args: argparse.Namespace, ctx: CommandContext) -> int:
    """Dispatch parsed arguments to their command handler."""
    command = args.command
    if command == "add":
        return add_command(
            ctx,
            args.branch,
            rebase=args.rebase,
            env=args.env,
            base=args.base,
            path=args.path,
            from_ref=args.from_ref,
        )
    if command == "list":
        return list_command(ctx)
    if command == "delete":
        return delete_command(ctx, args.target, force=args.force)
    if command == "switch":
        return switch_command(ctx, args.target)
    if command == "sync":
        return sync_command(ctx, base=args.base)
    if command == "prune":
        return prune_command(ctx)
    if command == "setup":
        return setup_command(ctx)
    raise ValueError(f"Unknown command: {command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application.

    Domain errors become one line on stderr and exit code 1. Anything else
    is a bug and is left to propagate.
    """
    args = parse_args(argv)
    display = DisplayService()

    try:
        config = Config.from_env(verbose=args.verbose, debug=args.debug)
        setup_logging(verbose=config.verbose, debug=config.debug)
        display.debug_mode = config.debug
        logger.debug(f"Configuration: {config.to_dict()}")

        ctx = CommandContext.create(config, display)
        return run_command(args, ctx)
    except KeyboardInterrupt:
        display.plain()
        display.warn("Operation cancelled by user")
        return 130
    except GwtError as e:
        report_error(display, e, display.debug_mode)
        return 1


if __name__ == "__main__":
    sys.exit(main())
