"""Convention policy value and the builder DSL that produces it.

A policy is built once per resolution run and never mutated afterwards. The
builder exists for callers that want to accumulate configuration step by step
(``apply_to_all`` / ``exclude`` / ``include`` / ``for_unit``); it hands out a
fresh immutable ``ConventionPolicy`` on every ``build()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

type ConventionId = str
type UnitPath = str


class PolicyMode(StrEnum):
    """Which filter decides unit eligibility."""

    ALL = "all"
    INCLUDE = "include"
    EXCLUDE = "exclude"


def _empty_overrides() -> Mapping[UnitPath, tuple[ConventionId, ...]]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True, kw_only=True)
class ConventionPolicy:
    """Declarative input of the convention resolver."""

    default_conventions: tuple[ConventionId, ...] = ()
    included_units: frozenset[UnitPath] = frozenset()
    excluded_units: frozenset[UnitPath] = frozenset()
    overrides: Mapping[UnitPath, tuple[ConventionId, ...]] = field(
        default_factory=_empty_overrides
    )

    def __post_init__(self) -> None:
        _reject_bare_string("default_conventions", self.default_conventions)
        _reject_bare_string("included_units", self.included_units)
        _reject_bare_string("excluded_units", self.excluded_units)
        for unit, conventions in self.overrides.items():
            _reject_bare_string(f"overrides[{unit!r}]", conventions)

        # Copy caller-owned containers so later mutation cannot leak in.
        object.__setattr__(self, "default_conventions", tuple(self.default_conventions))
        object.__setattr__(self, "included_units", frozenset(self.included_units))
        object.__setattr__(self, "excluded_units", frozenset(self.excluded_units))
        object.__setattr__(
            self,
            "overrides",
            MappingProxyType(
                {unit: tuple(conventions) for unit, conventions in self.overrides.items()}
            ),
        )


def _reject_bare_string(name: str, value: object) -> None:
    # A str is iterable and would be split into single characters.
    if isinstance(value, str):
        raise TypeError(f"{name} must be a collection of strings, not a str: {value!r}")


class PolicyBuilder:
    """Accumulate policy settings and build an immutable ``ConventionPolicy``.

    Mirrors the build-script DSL::

        policy = (
            PolicyBuilder()
            .apply_to_all("kotlin-convention", "test-convention")
            .exclude(":legacy-module", ":experimental")
            .for_unit(":spring-app", "kotlin-convention", "spring-convention")
            .build()
        )
    """

    def __init__(self) -> None:
        self._conventions: list[ConventionId] = []
        self._included: set[UnitPath] = set()
        self._excluded: set[UnitPath] = set()
        self._overrides: dict[UnitPath, tuple[ConventionId, ...]] = {}

    def apply_to_all(self, *conventions: ConventionId) -> Self:
        """Append conventions to the default list, keeping call order."""

        self._conventions.extend(conventions)
        return self

    def exclude(self, *units: UnitPath) -> Self:
        self._excluded.update(units)
        return self

    def include(self, *units: UnitPath) -> Self:
        """Restrict application to the given units (include mode)."""

        self._included.update(units)
        return self

    def for_unit(self, unit: UnitPath, *conventions: ConventionId) -> Self:
        """Replace the conventions applied to ``unit``.

        Calling it without conventions records an explicit empty override.
        """

        self._overrides[unit] = tuple(conventions)
        return self

    def for_units(self, overrides: Mapping[UnitPath, Iterable[ConventionId]]) -> Self:
        for unit, conventions in overrides.items():
            self.for_unit(unit, *conventions)
        return self

    def build(self) -> ConventionPolicy:
        return ConventionPolicy(
            default_conventions=tuple(self._conventions),
            included_units=frozenset(self._included),
            excluded_units=frozenset(self._excluded),
            overrides=dict(self._overrides),
        )
