"""Per-run registry of coverable units."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from tailwindcov.core.errors import InternalInvariantError
from tailwindcov.core.models import CoverableUnit, SyntaxKind, UnitKind


class UnitRegistry:
    """Owns every coverable unit discovered for one coverage run.

    Ids are dense and assigned in registration (discovery) order starting
    at zero, so each run has its own id namespace.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._units: List[CoverableUnit] = []

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[CoverableUnit]:
        return iter(self._units)

    @property
    def source(self) -> str:
        return self._source

    def register(
        self,
        node_range: Tuple[int, int],
        kind: UnitKind,
        syntax: SyntaxKind,
        is_expression: bool = False,
    ) -> CoverableUnit:
        """Create a unit for node_range and assign it the next id."""
        start, end = node_range
        unit = CoverableUnit(
            id=len(self._units),
            range_start=start,
            range_end=end,
            kind=kind,
            syntax=syntax,
            is_expression=is_expression,
            source_slice=self._source[start:end],
        )
        self._units.append(unit)
        return unit

    def get(self, unit_id: int) -> CoverableUnit:
        """Return the unit with the given id.

        Raises:
            InternalInvariantError: If no unit has that id.
        """
        if not isinstance(unit_id, int) or isinstance(unit_id, bool) \
                or not 0 <= unit_id < len(self._units):
            raise InternalInvariantError(
                f"Unknown coverable unit id {unit_id!r} "
                f"(registry holds {len(self._units)} units)"
            )
        return self._units[unit_id]
