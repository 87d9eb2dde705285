"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from gradle_patterns.domain.decisions import ApplyDecision, SkipDecision, UnconfiguredDecision
from gradle_patterns.domain.policy import PolicyMode
from gradle_patterns.domain.resolve import resolve, summarize
from gradle_patterns.reporting import render_summary

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gradle_patterns.domain.decisions import DecisionsByUnit
    from gradle_patterns.domain.policy import ConventionId, ConventionPolicy, UnitPath
    from gradle_patterns.domain.ports import ConventionApplier
    from gradle_patterns.domain.resolve import PolicySummary


log = getLogger(__name__)


class ConventionApplicationError(RuntimeError):
    """Raised in fail-fast mode when a convention cannot be applied to a unit."""

    def __init__(self, unit: UnitPath, convention: ConventionId, cause: Exception) -> None:
        super().__init__(f"Failed to apply convention '{convention}' to {unit}: {cause}")
        self.unit = unit
        self.convention = convention


@dataclass(frozen=True, slots=True)
class ConventionFailure:
    """One unit/convention pair the applier rejected."""

    unit: UnitPath
    convention: ConventionId
    error: Exception


@dataclass(slots=True)
class ApplyReport:
    """Outcome of applying a policy to a set of units."""

    decisions: DecisionsByUnit
    summary: PolicySummary
    applied: dict[UnitPath, tuple[ConventionId, ...]] = field(default_factory=dict)
    failures: list[ConventionFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def failed_units(self) -> tuple[UnitPath, ...]:
        return tuple(dict.fromkeys(failure.unit for failure in self.failures))


def apply_conventions(
    policy: ConventionPolicy,
    units: Iterable[UnitPath],
    *,
    applier: ConventionApplier,
    fail_fast: bool = False,
) -> ApplyReport:
    """Resolve ``policy`` against ``units`` and apply each decision via ``applier``.

    A failing convention stops the remaining conventions of that unit only;
    other units are still processed. With ``fail_fast`` the first failure is
    raised as ``ConventionApplicationError`` instead.
    """

    decisions = resolve(policy, units)
    report = ApplyReport(decisions=decisions, summary=summarize(policy))

    for unit, decision in decisions.items():
        match decision:
            case SkipDecision():
                reason = "not included" if report.summary.mode is PolicyMode.INCLUDE else "excluded"
                log.info("Skipping conventions for %s (%s)", unit, reason)
            case UnconfiguredDecision():
                log.warning("No conventions configured for %s", unit)
            case ApplyDecision(conventions=conventions):
                log.info("Applying conventions to %s: %s", unit, ", ".join(conventions))
                _apply_unit(unit, conventions, applier=applier, report=report, fail_fast=fail_fast)

    for line in render_summary(report.summary):
        log.info(line)

    return report


def _apply_unit(
    unit: UnitPath,
    conventions: tuple[ConventionId, ...],
    *,
    applier: ConventionApplier,
    report: ApplyReport,
    fail_fast: bool,
) -> None:
    applied: list[ConventionId] = []
    for convention in conventions:
        try:
            applier(unit, convention)
        except Exception as exc:
            log.error("Failed to apply convention '%s' to %s: %s", convention, unit, exc)  # noqa: TRY400
            if fail_fast:
                raise ConventionApplicationError(unit, convention, exc) from exc
            report.failures.append(ConventionFailure(unit=unit, convention=convention, error=exc))
            break
        applied.append(convention)
    report.applied[unit] = tuple(applied)
