"""Command-line argument parsing for gwt."""

import argparse
import sys
from typing import List, Optional, Sequence

from gwt.__version__ import __version__

COMMANDS = ["add", "list", "delete", "switch", "sync", "prune", "setup"]
ALIASES = {"ls": "list", "rm": "delete", "sw": "switch"}

# Options accepted before the command name
_GLOBAL_FLAGS = {"-v", "--verbose", "--debug"}
_EXIT_FLAGS = {"-h", "--help", "--version"}


def build_parser() -> argparse.ArgumentParser:
    """Build the gwt argument parser."""
    parser = argparse.ArgumentParser(
        prog="gwt",
        description="Git worktree management CLI",
        epilog="Run 'gwt setup' once so that 'gwt add' and 'gwt switch' can change "
        "your shell's directory. Set DEBUG=1 for tracebacks.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"gwt {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    add = subparsers.add_parser(
        "add", help="Create a worktree (default command)", description="Create a worktree"
    )
    add.add_argument(
        "branch", nargs="?", help="Branch name for worktree (uses current branch if omitted)"
    )
    add.add_argument(
        "--no-rebase", dest="rebase", action="store_false", help="Skip automatic rebase"
    )
    add.add_argument("--no-env", dest="env", action="store_false", help="Skip .env file copying")
    add.add_argument("--base", metavar="BRANCH", help="Override base branch")
    add.add_argument("--path", metavar="PATH", help="Custom worktree path")
    add.add_argument(
        "--from",
        dest="from_ref",
        metavar="REF",
        help="Start point for a new branch (default: origin/<base branch>)",
    )

    subparsers.add_parser("list", aliases=["ls"], help="List all worktrees")

    delete = subparsers.add_parser("delete", aliases=["rm"], help="Delete a worktree")
    delete.add_argument("target", nargs="?", metavar="path-or-branch", help="Worktree to delete")
    delete.add_argument(
        "-f", "--force", action="store_true", help="Force deletion without confirmation"
    )

    switch = subparsers.add_parser("switch", aliases=["sw"], help="Switch to a worktree")
    switch.add_argument(
        "target", nargs="?", metavar="path-or-branch", help="Worktree to switch to"
    )

    sync = subparsers.add_parser("sync", help="Rebase current branch to base branch")
    sync.add_argument("--base", metavar="BRANCH", help="Override base branch")

    subparsers.add_parser("prune", help="Clean up removed worktrees")
    subparsers.add_parser("setup", help="Install shell integration")

    return parser


def with_default_command(argv: Sequence[str]) -> List[str]:
    """Insert "add" when no command is named, so `gwt feature/x` creates a worktree."""
    args = list(argv)
    index = 0
    while index < len(args) and args[index] in _GLOBAL_FLAGS | _EXIT_FLAGS:
        if args[index] in _EXIT_FLAGS:
            return args
        index += 1

    if index == len(args) or (args[index] not in COMMANDS and args[index] not in ALIASES):
        args.insert(index, "add")
    return args


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Aliases are normalized, so ``args.command`` is always one of COMMANDS.
    """
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(with_default_command(argv))
    args.command = ALIASES.get(args.command, args.command)
    return args
