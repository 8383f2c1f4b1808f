"""Probe injection into JavaScript source text.

Every original character is kept in order; the only change is a probe
inserted where each unit's body begins:

- expression-form units get ``PROBE(id) || `` so the probe's falsy result
  falls through to the original expression,
- statement-form units get ``PROBE(id);``,
- block statements get their probe after the opening brace.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Sequence

from tailwindcov.core.errors import InstrumentationError
from tailwindcov.core.logging import get_logger
from tailwindcov.core.models import CoverableUnit

LOGGER = get_logger(__name__)

DEFAULT_PROBE_NAME = "__tailwindcov_track__"

# Plain ASCII identifiers only; the name is spliced verbatim into source
PROBE_NAME_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


@dataclass(frozen=True)
class Insertion:
    """One probe spliced into the instrumented text."""

    unit_id: int
    original_offset: int
    instrumented_offset: int
    probe: str


@dataclass
class InstrumentedSource:
    """Instrumented text together with the insertions that produced it."""

    original: str
    text: str
    insertions: List[Insertion] = field(default_factory=list)

    def strip(self) -> str:
        """Remove every probe, giving back the original text."""
        pieces: List[str] = []
        cursor = 0
        for insertion in self.insertions:
            pieces.append(self.text[cursor:insertion.instrumented_offset])
            cursor = insertion.instrumented_offset + len(insertion.probe)
        pieces.append(self.text[cursor:])
        return "".join(pieces)


def is_valid_probe_name(name: str) -> bool:
    return bool(PROBE_NAME_PATTERN.match(name))


def probe_for(unit: CoverableUnit, probe_name: str = DEFAULT_PROBE_NAME) -> str:
    """Tracking call text for a unit."""
    if unit.is_expression:
        return f"{probe_name}({unit.id}) || "
    return f"{probe_name}({unit.id});"


def instrument(
    source: str,
    units: Sequence[CoverableUnit],
    probe_name: str = DEFAULT_PROBE_NAME,
) -> InstrumentedSource:
    """Splice a probe in front of every unit's body.

    Args:
        source: Original source text the unit ranges refer to.
        units: Units sorted by range_start (as returned by discovery).
        probe_name: Global function name the probes call.

    Returns:
        InstrumentedSource holding the executable text.

    Raises:
        InstrumentationError: If units are not in ascending start order.
        ValueError: If probe_name is not a valid identifier.
    """
    if not is_valid_probe_name(probe_name):
        raise ValueError(f"Invalid probe name {probe_name!r}")

    pieces: List[str] = []
    insertions: List[Insertion] = []
    cursor = 0
    offset = 0
    previous_start = -1

    for unit in units:
        if unit.range_start < previous_start:
            raise InstrumentationError(
                f"Unit {unit.id} starts at {unit.range_start}, before the previous "
                f"unit's start {previous_start}; units must be sorted by start offset"
            )
        previous_start = unit.range_start

        point = unit.range_start + 1 if unit.opens_with_delimiter else unit.range_start
        if point < cursor or point > len(source):
            raise InstrumentationError(
                f"Insertion point {point} for unit {unit.id} is out of order"
            )

        probe = probe_for(unit, probe_name)
        pieces.append(source[cursor:point])
        pieces.append(probe)
        insertions.append(Insertion(unit.id, point, point + offset, probe))
        cursor = point
        offset += len(probe)

    pieces.append(source[cursor:])
    LOGGER.debug(f"Inserted {len(insertions)} probes ({offset} characters)")
    return InstrumentedSource(original=source, text="".join(pieces), insertions=insertions)
