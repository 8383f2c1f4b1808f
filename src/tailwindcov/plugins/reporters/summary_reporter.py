"""Summary reporter plugin for tailwindcov."""

from __future__ import annotations

from collections import Counter
from typing import IO, List

from tailwindcov.core.models import UnitKind
from tailwindcov.core.run import CoverageRun, summarize
from tailwindcov.plugins.reporters.base import ReporterPlugin


class SummaryReporter(ReporterPlugin):
    """Reporter plugin that outputs a brief coverage summary.

    Produces a concise summary with:
    - Total and executed unit counts
    - Breakdown of executed units by kind
    """

    @property
    def name(self) -> str:
        return "summary"

    def report(self, run: CoverageRun, output: IO[str]) -> None:
        lines = self._format_summary(run)
        output.write("\n".join(lines))
        output.write("\n")

    def _format_summary(self, run: CoverageRun) -> List[str]:
        summary = summarize(run)
        lines: List[str] = [
            f"Total units: {summary.total_units}",
            f"Executed units: {summary.executed_units}",
            f"Coverage: {summary.percentage:.1f}%",
        ]

        if run.units:
            totals = Counter(unit.kind for unit in run.units)
            executed = Counter(unit.kind for unit in run.units if unit.executed)
            lines.append("\nBy kind:")
            for kind in UnitKind:
                if totals[kind]:
                    lines.append(f"  {kind.value}: {executed[kind]}/{totals[kind]}")

        return lines
