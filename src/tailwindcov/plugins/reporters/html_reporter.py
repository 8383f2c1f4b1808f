"""HTML reporter plugin for tailwindcov."""

from __future__ import annotations

from typing import IO

from tailwindcov.core.render import HTML_STYLE, render
from tailwindcov.core.run import CoverageRun
from tailwindcov.plugins.reporters.base import ReporterPlugin


class HTMLReporter(ReporterPlugin):
    """Reporter plugin that outputs the annotated source as an HTML fragment.

    Covered spans use the ``tailwind-covered`` class, missed spans
    ``tailwind-missed`` and line numbers ``tailwind-lineno``. Styling is
    left to the page embedding the fragment.
    """

    @property
    def name(self) -> str:
        return "html"

    def report(self, run: CoverageRun, output: IO[str]) -> None:
        output.write(render(run, HTML_STYLE))
        output.write("\n")
