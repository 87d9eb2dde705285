"""Per-unit decisions produced by the convention resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from .policy import ConventionId, UnitPath


class DecisionStatus(StrEnum):
    """Outcome of resolving one build unit."""

    SKIP = "skip"
    UNCONFIGURED = "unconfigured"
    APPLY = "apply"


@dataclass(frozen=True, slots=True, kw_only=True)
class SkipDecision:
    """Unit is filtered out by the include/exclude lists."""

    status: Literal[DecisionStatus.SKIP] = field(default=DecisionStatus.SKIP, init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class UnconfiguredDecision:
    """Unit is eligible but neither an override nor defaults name a convention."""

    status: Literal[DecisionStatus.UNCONFIGURED] = field(
        default=DecisionStatus.UNCONFIGURED, init=False
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplyDecision:
    """Unit receives these conventions, in this order."""

    conventions: tuple[ConventionId, ...]
    status: Literal[DecisionStatus.APPLY] = field(default=DecisionStatus.APPLY, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "conventions", tuple(self.conventions))
        if not self.conventions:
            raise ValueError("Apply decision must include at least one convention")


type Decision = SkipDecision | UnconfiguredDecision | ApplyDecision
type DecisionsByUnit = dict[UnitPath, Decision]

SKIP = SkipDecision()
UNCONFIGURED = UnconfiguredDecision()
