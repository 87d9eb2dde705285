"""Runtime settings for the command line entry point."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import require_env_var

POLICY_ENV_VAR: Final[str] = "GRADLE_PATTERNS_POLICY"


@dataclass(frozen=True, slots=True)
class PolicySource:
    path: Path

    def resolve_path(self) -> Path:
        return self.path.expanduser().resolve()


def get_policy_source(path: str | Path | None = None) -> PolicySource:
    """Return the policy location, falling back to ``GRADLE_PATTERNS_POLICY``."""

    if path is not None:
        return PolicySource(path=Path(path))
    return PolicySource(path=Path(require_env_var(POLICY_ENV_VAR)))
