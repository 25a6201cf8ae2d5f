"""Version information for gwt."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gwt-worktree")
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    __version__ = "0.0.0+unknown"
