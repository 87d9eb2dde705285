"""Human-readable rendering of decisions and policy summaries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from gradle_patterns.domain.decisions import ApplyDecision
from gradle_patterns.domain.policy import PolicyMode

if TYPE_CHECKING:
    from collections.abc import Mapping

    from gradle_patterns.domain.decisions import Decision
    from gradle_patterns.domain.resolve import PolicySummary

BOX_WIDTH: Final[int] = 59
SUMMARY_TITLE: Final[str] = "GRADLE PATTERNS - CONFIGURATION SUMMARY"

_MODE_LABELS: Final[dict[PolicyMode, str]] = {
    PolicyMode.INCLUDE: "INCLUDE only",
    PolicyMode.EXCLUDE: "EXCLUDE specific",
    PolicyMode.ALL: "APPLY TO ALL",
}


def _row(text: str) -> str:
    return f"║ {text.ljust(BOX_WIDTH - 2)} ║"


def render_summary(summary: PolicySummary) -> list[str]:
    """Render the boxed configuration summary, one string per line."""

    lines = [
        "╔" + "═" * BOX_WIDTH + "╗",
        "║" + SUMMARY_TITLE.center(BOX_WIDTH) + "║",
        "╠" + "═" * BOX_WIDTH + "╣",
        _row(f"Default Conventions: {', '.join(summary.default_conventions)}"),
        _row(f"Mode: {_MODE_LABELS[summary.mode]}"),
    ]
    if summary.mode is PolicyMode.INCLUDE:
        lines.append(_row(f"Included Units: {summary.included_count}"))
    elif summary.mode is PolicyMode.EXCLUDE:
        lines.append(_row(f"Excluded Units: {summary.excluded_count}"))
    if summary.override_count:
        lines.append(_row(f"Unit-Specific Overrides: {summary.override_count}"))
    lines.append("╚" + "═" * BOX_WIDTH + "╝")
    return lines


def render_decision(unit: str, decision: Decision) -> str:
    if isinstance(decision, ApplyDecision):
        return f"{unit}: {decision.status} {', '.join(decision.conventions)}"
    return f"{unit}: {decision.status}"


def decision_to_dict(decision: Decision) -> dict[str, object]:
    payload: dict[str, object] = {"status": str(decision.status)}
    if isinstance(decision, ApplyDecision):
        payload["conventions"] = list(decision.conventions)
    return payload


def decisions_to_dict(decisions: Mapping[str, Decision]) -> dict[str, dict[str, object]]:
    return {unit: decision_to_dict(decision) for unit, decision in decisions.items()}


def summary_to_dict(summary: PolicySummary) -> dict[str, object]:
    return {
        "default_conventions": list(summary.default_conventions),
        "mode": summary.mode.name,
        "included_count": summary.included_count,
        "excluded_count": summary.excluded_count,
        "override_count": summary.override_count,
    }
