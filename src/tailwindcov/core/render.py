"""Annotated rendering of the original source.

Every unit's span is wrapped in a hit or miss marker and every line gets a
right-aligned line number. Markers at a shared position are ordered so
they always nest:

- closes come before opens,
- closes go innermost (latest opened) first,
- opens go outermost (furthest reaching) first, then in discovery order.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Tuple

from tailwindcov.core.models import CoverableUnit

# Every line terminator ends exactly one line; blank lines are kept
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

_CLOSE = 0
_OPEN = 1


@dataclass(frozen=True)
class MarkerStyle:
    """Marker texts and line-number layout for one output format."""

    hit_open: str
    miss_open: str
    hit_close: str
    miss_close: str
    line_number_template: str = "{number} | "
    pad_char: str = " "
    escape: Callable[[str], str] = lambda text: text

    def open_marker(self, unit: CoverableUnit) -> str:
        return self.hit_open if unit.executed else self.miss_open

    def close_marker(self, unit: CoverableUnit) -> str:
        return self.hit_close if unit.executed else self.miss_close

    def line_prefix(self, number: int, width: int) -> str:
        digits = str(number)
        padded = self.pad_char * (width - len(digits)) + digits
        return self.line_number_template.format(number=padded)


# Plain ASCII markers may also occur in the source itself (a[-1]); judge
# coverage from the units, not by searching the rendered text
TEXT_STYLE = MarkerStyle(
    hit_open="[+",
    miss_open="[-",
    hit_close="+]",
    miss_close="-]",
)

HTML_STYLE = MarkerStyle(
    hit_open='<span class="tailwind-covered">',
    miss_open='<span class="tailwind-missed">',
    hit_close="</span>",
    miss_close="</span>",
    line_number_template='<span class="tailwind-lineno">{number}</span>',
    pad_char="&nbsp;",
    escape=lambda text: html.escape(text, quote=False),
)


def marker_events(units: Iterable[CoverableUnit]) -> List[Tuple[int, int, CoverableUnit]]:
    """Return (position, event, unit) triples in insertion order."""
    keyed = []
    for order, unit in enumerate(units):
        keyed.append(((unit.range_start, _OPEN, -unit.range_end, order), unit))
        keyed.append(((unit.range_end, _CLOSE, -unit.range_start, -order), unit))
    keyed.sort(key=lambda item: item[0])
    return [(key[0], key[1], unit) for key, unit in keyed]


def apply_markers(source: str, units: Iterable[CoverableUnit], style: MarkerStyle = TEXT_STYLE) -> str:
    """Insert hit/miss markers into source, escaping the text in between."""
    pieces: List[str] = []
    cursor = 0
    for position, event, unit in marker_events(units):
        if position > cursor:
            pieces.append(style.escape(source[cursor:position]))
            cursor = position
        if event == _OPEN:
            pieces.append(style.open_marker(unit))
        else:
            pieces.append(style.close_marker(unit))
    pieces.append(style.escape(source[cursor:]))
    return "".join(pieces)


def number_lines(text: str, style: MarkerStyle = TEXT_STYLE) -> str:
    """Prefix every line with its padded line number."""
    lines = _LINE_BREAK.split(text)
    width = len(str(len(lines)))
    return "\n".join(
        style.line_prefix(number, width) + line
        for number, line in enumerate(lines, start=1)
    )


def render(run, style: MarkerStyle = TEXT_STYLE) -> str:
    """Render the run's original source with coverage markers and line numbers.

    Args:
        run: An executed (or partially executed) CoverageRun.
        style: Marker and line-number style.

    Returns:
        The annotated source.
    """
    return number_lines(apply_markers(run.source, run.units, style), style)
