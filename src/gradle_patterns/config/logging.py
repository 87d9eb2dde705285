"""Shared logging helpers for gradle-patterns."""

from __future__ import annotations

import logging
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR: Final[str] = "GRADLE_PATTERNS_LOG_LEVEL"


def resolve_log_level(value: str | int | None = None) -> int:
    """Turn ``value`` (or ``$GRADLE_PATTERNS_LOG_LEVEL``) into a logging level.

    Accepts level names in any case or numeric levels; defaults to INFO.
    """

    if value is None:
        value = optional_env_var(LOG_LEVEL_ENV_VAR)
    if value is None:
        return logging.INFO
    if isinstance(value, int):
        return value
    if value.isdigit():
        return int(value)
    level = logging.getLevelNamesMapping().get(value.upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {value}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with a terse CLI format.

    Pass ``force=True`` to reconfigure from tests or alternative entry points.
    """

    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
