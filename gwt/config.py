"""Configuration handling for gwt"""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from gwt.constants import BASE_BRANCH_CANDIDATES, DEFAULT_REMOTE, ENV_FILES
from gwt.exceptions import ValidationError

_FALSY = {"", "0", "false", "no", "off"}


def is_truthy(value: Optional[str]) -> bool:
    """Interpret an environment variable value as a flag."""
    if value is None:
        return False
    return value.strip().lower() not in _FALSY


@dataclass
class Config:
    """Configuration for gwt with validation."""

    remote_name: str = DEFAULT_REMOTE
    base_branch_candidates: List[str] = field(default_factory=lambda: list(BASE_BRANCH_CANDIDATES))
    env_files: List[str] = field(default_factory=lambda: list(ENV_FILES))

    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_remote_name()
        self._validate_base_branch_candidates()
        self._validate_env_files()

    def _validate_remote_name(self):
        """Validate remote_name is not empty."""
        if not self.remote_name or not self.remote_name.strip():
            raise ValidationError("remote_name cannot be empty", "remote_name")
        self.remote_name = self.remote_name.strip()

    def _validate_base_branch_candidates(self):
        """Validate there is at least one base branch candidate."""
        if not isinstance(self.base_branch_candidates, list):
            raise ValidationError("base_branch_candidates must be a list", "base_branch_candidates")
        if not self.base_branch_candidates:
            raise ValidationError(
                "base_branch_candidates must name at least one branch", "base_branch_candidates"
            )

    def _validate_env_files(self):
        """Env files are copied by name, so they must not contain path separators."""
        if not isinstance(self.env_files, list):
            raise ValidationError("env_files must be a list", "env_files")
        for name in self.env_files:
            if not name or "/" in name or "\\" in name:
                raise ValidationError(f"Invalid env file name: '{name}'", "env_files")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "remote_name": self.remote_name,
            "base_branch_candidates": self.base_branch_candidates,
            "env_files": self.env_files,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "remote_name",
            "base_branch_candidates",
            "env_files",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Config":
        """Create Config from environment variables (DEBUG, GWT_REMOTE).

        Keyword overrides win over the environment, except that a truthy
        ``DEBUG`` variable can only switch debug on.
        """
        environ = os.environ if environ is None else environ
        values = {"debug": is_truthy(environ.get("DEBUG"))}
        if environ.get("GWT_REMOTE"):
            values["remote_name"] = environ["GWT_REMOTE"]

        for key, value in overrides.items():
            if key == "debug":
                values["debug"] = values["debug"] or bool(value)
            elif value is not None:
                values[key] = value

        return cls.from_dict(values)
