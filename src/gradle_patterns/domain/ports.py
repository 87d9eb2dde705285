"""Ports implemented by the host build tool."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConventionApplier(Protocol):
    """Callable port that applies one convention to one build unit.

    Implementations signal failure by raising; the application service records
    the failure against the unit and moves on.
    """

    def __call__(self, unit: str, convention: str) -> None:
        ...


__all__ = ["ConventionApplier"]
