"""Configuration error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration values are absent or blank."""


class PolicyFileError(ConfigurationError):
    """Raised when a policy file cannot be read or does not validate."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid policy file {path}: {reason}")
        self.path = path
        self.reason = reason
