"""Convention selection core.

Flow:
1) build an immutable ``ConventionPolicy`` (directly or via ``PolicyBuilder``)
2) ``resolve`` it against the known build units
3) hand the decisions to a host-owned ``ConventionApplier``
"""

from __future__ import annotations

from .decisions import (
    ApplyDecision,
    Decision,
    DecisionsByUnit,
    DecisionStatus,
    SkipDecision,
    UnconfiguredDecision,
)
from .policy import ConventionId, ConventionPolicy, PolicyBuilder, PolicyMode, UnitPath
from .ports import ConventionApplier
from .resolve import (
    PolicySummary,
    conventions_for,
    decide,
    is_eligible,
    policy_mode,
    resolve,
    summarize,
)

__all__ = [
    "ApplyDecision",
    "ConventionApplier",
    "ConventionId",
    "ConventionPolicy",
    "Decision",
    "DecisionStatus",
    "DecisionsByUnit",
    "PolicyBuilder",
    "PolicyMode",
    "PolicySummary",
    "SkipDecision",
    "UnconfiguredDecision",
    "UnitPath",
    "conventions_for",
    "decide",
    "is_eligible",
    "policy_mode",
    "resolve",
    "summarize",
]
