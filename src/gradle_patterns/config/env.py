"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def _lookup(name: str, environ: Mapping[str, str] | None) -> str | None:
    value = os.environ.get(name) if environ is None else environ.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def optional_env_var(name: str, *, environ: Mapping[str, str] | None = None) -> str | None:
    """Return a stripped environment value, treating blank values as unset."""

    return _lookup(name, environ)


def require_env_vars(
    names: Sequence[str],
    *,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return the named variables or raise listing every missing/blank one."""

    values = {name: _lookup(name, environ) for name in names}
    missing = sorted(name for name, value in values.items() if value is None)
    if missing:
        raise MissingConfigurationError(f"Missing configuration for: {', '.join(missing)}")
    return {name: value for name, value in values.items() if value is not None}


def require_env_var(name: str, *, environ: Mapping[str, str] | None = None) -> str:
    return require_env_vars([name], environ=environ)[name]
