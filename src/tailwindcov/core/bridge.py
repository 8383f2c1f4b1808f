"""Entry point the instrumented program calls back into."""

from __future__ import annotations

from typing import Optional

from tailwindcov.core.errors import InternalInvariantError
from tailwindcov.core.logging import get_logger
from tailwindcov.core.registry import UnitRegistry

LOGGER = get_logger(__name__)


class ExecutionBridge:
    """Counts unit executions for one run's registry.

    ``track`` must always return a falsy value: expression-form probes are
    spliced in as ``probe(id) || expr`` and a truthy result would skip the
    original expression.
    """

    def __init__(self, registry: UnitRegistry) -> None:
        self._registry = registry
        self._violation: Optional[InternalInvariantError] = None

    @property
    def registry(self) -> UnitRegistry:
        return self._registry

    @property
    def violation(self) -> Optional[InternalInvariantError]:
        """First unknown-id error since the last take_violation() call."""
        return self._violation

    def take_violation(self) -> Optional[InternalInvariantError]:
        """Return the pending unknown-id error and clear it.

        Sandboxes rewrap errors raised by host callables, so the run asks the
        bridge which violation, if any, belongs to the code it just executed.
        """
        violation, self._violation = self._violation, None
        return violation

    def track(self, unit_id) -> None:
        """Record one execution of the unit with the given id.

        Raises:
            InternalInvariantError: If the id is not in the registry.
        """
        # JavaScript engines may hand integral numbers over as floats
        if isinstance(unit_id, float) and unit_id.is_integer():
            unit_id = int(unit_id)
        try:
            unit = self._registry.get(unit_id)
        except InternalInvariantError as e:
            if self._violation is None:
                self._violation = e
            LOGGER.error(str(e))
            raise
        unit.count_execution()
        return None
