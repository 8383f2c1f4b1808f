"""JSON reporter plugin for tailwindcov."""

from __future__ import annotations

import json
from typing import Any, Dict, IO

from tailwindcov.core.run import CoverageRun, summarize
from tailwindcov.plugins.reporters.base import ReporterPlugin

SCHEMA_VERSION = "1.0"


class JSONReporter(ReporterPlugin):
    """Reporter plugin that outputs a coverage run as JSON.

    Produces machine-readable JSON output containing:
    - Schema version
    - Summary statistics
    - Every unit with its range, kind and execution count
    """

    @property
    def name(self) -> str:
        return "json"

    def report(self, run: CoverageRun, output: IO[str]) -> None:
        """Format the coverage run as JSON and write to output.

        Args:
            run: The coverage run to format.
            output: Output stream to write to.
        """
        json.dump(self._format_run(run), output, indent=2)
        output.write("\n")

    def _format_run(self, run: CoverageRun) -> Dict[str, Any]:
        return {
            "schema_version": SCHEMA_VERSION,
            "summary": summarize(run).to_dict(),
            "units": [unit.to_dict() for unit in run.units],
        }
