"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError, PolicyFileError
from .logging import LOG_LEVEL_ENV_VAR, configure_logging, resolve_log_level
from .settings import POLICY_ENV_VAR, PolicySource, get_policy_source

__all__ = [
    "LOG_LEVEL_ENV_VAR",
    "POLICY_ENV_VAR",
    "ConfigurationError",
    "MissingConfigurationError",
    "PolicyFileError",
    "PolicySource",
    "configure_logging",
    "get_policy_source",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
    "resolve_log_level",
]
