"""In-memory convention registry usable as a ``ConventionApplier``."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from gradle_patterns.domain.policy import ConventionId, UnitPath

type ConventionAction = Callable[[UnitPath], None]

log = getLogger(__name__)


class UnknownConventionError(LookupError):
    """Raised when a unit asks for a convention nobody registered."""

    def __init__(self, convention: ConventionId) -> None:
        super().__init__(f"Convention '{convention}' is not registered")
        self.convention = convention


class ConventionRegistry:
    """Map convention ids to the callables that apply them to a unit."""

    def __init__(self, actions: Mapping[ConventionId, ConventionAction] | None = None) -> None:
        self._actions: dict[ConventionId, ConventionAction] = {}
        for convention, action in (actions or {}).items():
            self.register(convention, action)

    def register(self, convention: ConventionId, action: ConventionAction) -> None:
        if convention in self._actions:
            raise ValueError(f"Convention '{convention}' is already registered")
        self._actions[convention] = action

    def known(self) -> tuple[ConventionId, ...]:
        return tuple(self._actions)

    def __contains__(self, convention: object) -> bool:
        return convention in self._actions

    def __call__(self, unit: UnitPath, convention: ConventionId) -> None:
        action = self._actions.get(convention)
        if action is None:
            raise UnknownConventionError(convention)
        log.debug("Running convention %s on %s", convention, unit)
        action(unit)
