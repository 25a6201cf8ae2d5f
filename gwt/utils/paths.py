"""Filesystem helpers."""

import os
from contextlib import contextmanager
from typing import Iterator

from gwt.logging_config import get_logger

logger = get_logger(__name__)


@contextmanager
def working_directory(path: str) -> Iterator[str]:
    """Temporarily change the process working directory.

    The previous directory is restored on every exit path, including
    exceptions raised inside the block.

    Example:
        with working_directory("/path/to/worktree"):
            git_ops.rebase_to_base()
    """
    previous = os.getcwd()
    os.chdir(path)
    logger.debug(f"Entered {path}")
    try:
        yield path
    finally:
        os.chdir(previous)
        logger.debug(f"Restored working directory {previous}")


def is_non_empty_path(path: str) -> bool:
    """True if path is a file or a directory with at least one entry."""
    if os.path.isdir(path):
        with os.scandir(path) as entries:
            return any(True for _ in entries)
    return os.path.exists(path)
