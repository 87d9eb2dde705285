"""Convention resolution.

Responsibilities of this stage:
- decide per unit whether the include/exclude filters let it through
- pick the override list for the unit or fall back to the defaults
- classify each unit as SKIP/UNCONFIGURED/APPLY

Everything here is a pure function over an immutable ``ConventionPolicy``.
Applying conventions to real units is the host's job, behind the
``ConventionApplier`` port in ``gradle_patterns.domain.ports``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .decisions import SKIP, UNCONFIGURED, ApplyDecision
from .policy import PolicyMode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .decisions import Decision, DecisionsByUnit
    from .policy import ConventionId, ConventionPolicy, UnitPath


@dataclass(frozen=True, slots=True, kw_only=True)
class PolicySummary:
    """Shape of a policy, for diagnostics only."""

    default_conventions: tuple[ConventionId, ...]
    mode: PolicyMode
    included_count: int
    excluded_count: int
    override_count: int


def policy_mode(policy: ConventionPolicy) -> PolicyMode:
    """Return the filter mode, using the same precedence as ``is_eligible``."""

    if policy.included_units:
        return PolicyMode.INCLUDE
    if policy.excluded_units:
        return PolicyMode.EXCLUDE
    return PolicyMode.ALL


def is_eligible(policy: ConventionPolicy, unit: UnitPath) -> bool:
    # A non-empty include list is the sole arbiter; the exclude list is ignored.
    if policy.included_units:
        return unit in policy.included_units
    return unit not in policy.excluded_units


def conventions_for(policy: ConventionPolicy, unit: UnitPath) -> tuple[ConventionId, ...]:
    """Return the override for ``unit`` verbatim, or the default conventions.

    Eligibility is not consulted; an empty override is returned as-is.
    """

    if unit in policy.overrides:
        return policy.overrides[unit]
    return policy.default_conventions


def decide(policy: ConventionPolicy, unit: UnitPath) -> Decision:
    if not is_eligible(policy, unit):
        return SKIP
    conventions = conventions_for(policy, unit)
    if not conventions:
        return UNCONFIGURED
    return ApplyDecision(conventions=conventions)


def resolve(policy: ConventionPolicy, units: Iterable[UnitPath]) -> DecisionsByUnit:
    """Resolve one decision per unit, keyed in first-seen input order."""

    decisions: DecisionsByUnit = {}
    for unit in units:
        if unit in decisions:
            continue
        decisions[unit] = decide(policy, unit)
    return decisions


def summarize(policy: ConventionPolicy) -> PolicySummary:
    return PolicySummary(
        default_conventions=policy.default_conventions,
        mode=policy_mode(policy),
        included_count=len(policy.included_units),
        excluded_count=len(policy.excluded_units),
        override_count=len(policy.overrides),
    )
