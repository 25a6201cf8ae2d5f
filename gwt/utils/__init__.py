"""Utility functions for gwt."""

from .paths import working_directory, is_non_empty_path

__all__ = ["working_directory", "is_non_empty_path"]
