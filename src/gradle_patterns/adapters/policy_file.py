"""Load convention policies from TOML or JSON documents.

Example ``policy.toml``::

    apply-to-all = ["kotlin-convention", "test-convention"]
    exclude = [":legacy-module", ":experimental"]

    [overrides]
    ":user-service" = ["kotlin-convention", "spring-convention"]

The same keys may instead live under a ``[gradle-patterns]`` table so a policy
can share a file with other settings.
"""

from __future__ import annotations

import json
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Final, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from gradle_patterns.config.errors import PolicyFileError
from gradle_patterns.domain.policy import ConventionPolicy

if TYPE_CHECKING:
    from collections.abc import Callable

POLICY_TABLE: Final[str] = "gradle-patterns"
DEFAULTS_KEY: Final[str] = "apply-to-all"
DEFAULTS_SPELLINGS: Final[frozenset[str]] = frozenset({"apply-to-all", "default-conventions"})
POLICY_KEYS: Final[frozenset[str]] = DEFAULTS_SPELLINGS | {"include", "exclude", "overrides"}


def _canonical_key(key: object) -> object:
    return key.replace("_", "-") if isinstance(key, str) else key


def _strip_entries(values: object) -> object:
    if isinstance(values, list | tuple):
        return [value.strip() if isinstance(value, str) else value for value in values]
    return values


def _require_non_blank(values: list[str]) -> list[str]:
    if any(not value for value in values):
        raise ValueError("entries must be non-blank strings")
    return values


class PolicyDocument(BaseModel):
    """Schema of a policy file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    default_conventions: list[str] = Field(default_factory=list, alias="apply-to-all")
    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    overrides: dict[str, list[str]] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, value: object) -> object:
        if not isinstance(value, Mapping):
            return value
        data = cast(Mapping[str, object], value)
        normalized: dict[str, object] = {}
        for key, item in data.items():
            target = DEFAULTS_KEY if _canonical_key(key) in DEFAULTS_SPELLINGS else key
            if target in normalized:
                raise ValueError(f"{key!r} conflicts with another spelling of {target!r}")
            normalized[target] = item
        return normalized

    _strip_lists = field_validator("default_conventions", "include", "exclude", mode="before")(
        _strip_entries
    )
    _check_lists = field_validator("default_conventions", "include", "exclude")(
        _require_non_blank
    )

    @field_validator("overrides", mode="before")
    @classmethod
    def _strip_overrides(cls, value: object) -> object:
        if not isinstance(value, Mapping):
            return value
        data = cast(Mapping[object, object], value)
        stripped: dict[object, object] = {}
        for key, item in data.items():
            unit = key.strip() if isinstance(key, str) else key
            if unit in stripped:
                raise ValueError(f"override unit {unit!r} is given more than once")
            stripped[unit] = _strip_entries(item)
        return stripped

    @field_validator("overrides")
    @classmethod
    def _check_overrides(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        for unit, conventions in value.items():
            if not unit:
                raise ValueError("override unit paths must be non-blank")
            _require_non_blank(conventions)
        return value

    def to_policy(self) -> ConventionPolicy:
        return ConventionPolicy(
            default_conventions=tuple(self.default_conventions),
            included_units=frozenset(self.include),
            excluded_units=frozenset(self.exclude),
            overrides={unit: tuple(conventions) for unit, conventions in self.overrides.items()},
        )


def _decode_toml(text: str) -> object:
    return tomllib.loads(text)


def _decode_json(text: str) -> object:
    return json.loads(text)


_DECODERS: Final[dict[str, Callable[[str], object]]] = {
    ".toml": _decode_toml,
    ".json": _decode_json,
}


def parse_policy(data: object) -> ConventionPolicy:
    """Validate a decoded policy document and return the policy it describes.

    Raises ``ValueError`` (``pydantic.ValidationError`` included) for invalid
    documents.
    """

    if isinstance(data, Mapping) and POLICY_TABLE in data:
        document = cast(Mapping[str, object], data)
        stray = sorted(str(key) for key in document if _canonical_key(key) in POLICY_KEYS)
        if stray:
            raise ValueError(
                f"policy keys outside the [{POLICY_TABLE}] table: {', '.join(stray)}"
            )
        data = document[POLICY_TABLE]
    return PolicyDocument.model_validate(data).to_policy()


def load_policy(path: str | Path) -> ConventionPolicy:
    """Read, decode and validate the policy stored at ``path``."""

    policy_path = Path(path)
    decoder = _DECODERS.get(policy_path.suffix.lower())
    if decoder is None:
        supported = ", ".join(sorted(_DECODERS))
        raise PolicyFileError(
            policy_path, f"unsupported format {policy_path.suffix!r} (expected {supported})"
        )

    try:
        text = policy_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise PolicyFileError(policy_path, "file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise PolicyFileError(policy_path, str(exc)) from exc

    try:
        data = decoder(text)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise PolicyFileError(policy_path, f"could not decode: {exc}") from exc

    try:
        return parse_policy(data)
    except ValueError as exc:
        raise PolicyFileError(policy_path, str(exc)) from exc
