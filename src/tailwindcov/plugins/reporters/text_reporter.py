"""Plain text reporter plugin for tailwindcov."""

from __future__ import annotations

from typing import IO

from tailwindcov.core.render import TEXT_STYLE, render
from tailwindcov.core.run import CoverageRun, summarize
from tailwindcov.plugins.reporters.base import ReporterPlugin


class TextReporter(ReporterPlugin):
    """Reporter plugin that prints the annotated source.

    Executed units are wrapped in ``[+ ... +]``, missed ones in
    ``[- ... -]``; a summary line follows the listing. The same brackets
    can occur in the script itself, so tools should read the json report
    rather than search this output for misses.
    """

    @property
    def name(self) -> str:
        return "text"

    def report(self, run: CoverageRun, output: IO[str]) -> None:
        summary = summarize(run)
        output.write(render(run, TEXT_STYLE))
        output.write("\n\n")
        output.write(
            f"Units executed: {summary.executed_units}/{summary.total_units} "
            f"({summary.percentage:.1f}%)\n"
        )
