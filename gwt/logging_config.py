"""Logging configuration for gwt"""
import logging
import sys
from pathlib import Path
from typing import Optional

DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '[%(name)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Loggers of third-party libraries that are chatty below WARNING
NOISY_LOGGERS = ('git',)


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when stderr is a terminal."""

    LEVEL_COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelname)
        if color and sys.stderr.isatty():
            # Copy so that other handlers see the plain level name
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def get_log_file() -> Path:
    """Location of the debug log file."""
    return Path.home() / '.gwt' / 'gwt.log'


def _file_handler(log_path: Path) -> Optional[logging.Handler]:
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, mode='w')  # One run per file
    except OSError as e:
        # An unwritable home directory must not stop the command
        sys.stderr.write(f"Could not open log file {log_path}: {e}\n")
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=DEBUG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _console_handler(level: int, debug: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if debug:
        handler.setFormatter(ColoredFormatter(fmt=DEBUG_FORMAT, datefmt=DATE_FORMAT))
    else:
        handler.setFormatter(ColoredFormatter(fmt=CONSOLE_FORMAT))
    return handler


def setup_logging(verbose: bool = False, debug: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure logging for a gwt run.

    Console logging goes to stderr because stdout is reserved for the path
    printed by ``add`` and ``switch``. Debug runs also log to a file,
    ``~/.gwt/gwt.log`` unless log_file says otherwise.

    Args:
        verbose: Show INFO level messages
        debug: Show DEBUG level messages and write the log file
        log_file: Override the debug log file location
    """
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if debug:
        file_handler = _file_handler(log_file or get_log_file())
        if file_handler is not None:
            root_logger.addHandler(file_handler)

    root_logger.addHandler(_console_handler(level, debug))

    # GitPython logs every command it runs
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a gwt module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger named without the ``gwt.`` prefix
    """
    if name.startswith('gwt.'):
        name = name[len('gwt.'):]
    return logging.getLogger(name)
