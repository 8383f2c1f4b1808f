"""Run command implementation."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from tailwindcov.config.models import TailwindConfig

from tailwindcov.cli.commands import Command
from tailwindcov.cli.exit_codes import (
    EXIT_COVERAGE_BELOW_THRESHOLD,
    EXIT_INVALID_USAGE,
    EXIT_MISSING_DEPENDENCY,
    EXIT_PROGRAM_ERROR,
    EXIT_RETRIEVAL_FAILURE,
    EXIT_SUCCESS,
)
from tailwindcov.config import get_default_config
from tailwindcov.core.errors import MissingDependencyError, RetrievalError
from tailwindcov.core.logging import get_logger
from tailwindcov.core.run import CoverageRun, instrument_source, summarize
from tailwindcov.plugins.reporters import ReporterPlugin, get_reporter_plugin
from tailwindcov.plugins.sandboxes import get_sandbox_plugin

LOGGER = get_logger(__name__)


class RunCommand(Command):
    """Instruments a local script, runs it and writes a coverage report."""

    def __init__(self, version: str):
        self._version = version

    @property
    def name(self) -> str:
        return "run"

    def execute(self, args: Namespace, config: "TailwindConfig | None" = None) -> int:
        """Execute the run command.

        An execution failure still produces a report of the units that ran
        before the script threw.

        Args:
            args: Parsed command-line arguments.
            config: Effective configuration.

        Returns:
            Exit code.
        """
        config = config or get_default_config()

        reporter = get_reporter_plugin(config.output.format)
        if reporter is None:
            LOGGER.error(f"Unknown output format '{config.output.format}'")
            return EXIT_INVALID_USAGE

        try:
            source = self._load_source(args, config)
        except RetrievalError as e:
            LOGGER.error(str(e))
            return EXIT_RETRIEVAL_FAILURE
        except OSError as e:
            LOGGER.error(f"Cannot read script: {e}")
            return EXIT_INVALID_USAGE

        label = self._describe(args)
        try:
            run = instrument_source(source, config.instrumentation.probe_name)
        except MissingDependencyError as e:
            LOGGER.error(str(e))
            return EXIT_MISSING_DEPENDENCY
        except Exception as e:
            LOGGER.error(f"Failed to parse {label}: {e}")
            return EXIT_PROGRAM_ERROR

        try:
            sandbox = get_sandbox_plugin(config.execution.sandbox, **config.execution.options)
        except MissingDependencyError as e:
            LOGGER.error(str(e))
            return EXIT_MISSING_DEPENDENCY
        if sandbox is None:
            LOGGER.error(f"Unknown sandbox '{config.execution.sandbox}'")
            return EXIT_INVALID_USAGE

        exit_code = EXIT_SUCCESS
        try:
            run.execute(sandbox)
        except sandbox.execution_errors as e:
            LOGGER.error(f"{label} raised during execution: {e}")
            exit_code = EXIT_PROGRAM_ERROR

        self._write_report(reporter, run, getattr(args, "output", None))

        summary = summarize(run)
        LOGGER.info(
            f"{label}: {summary.executed_units}/{summary.total_units} units executed"
        )
        if exit_code == EXIT_SUCCESS and not summary.passed(config.coverage.threshold):
            LOGGER.error(
                f"Coverage {summary.percentage:.1f}% is below the threshold "
                f"of {config.coverage.threshold:.1f}%"
            )
            exit_code = EXIT_COVERAGE_BELOW_THRESHOLD

        return exit_code

    def _load_source(self, args: Namespace, config: "TailwindConfig") -> str:
        return Path(args.path).read_text(encoding="utf-8")

    def _describe(self, args: Namespace) -> str:
        return str(args.path)

    def _write_report(
        self,
        reporter: ReporterPlugin,
        run: CoverageRun,
        output_path: Optional[Path],
    ) -> None:
        if output_path is None:
            reporter.report(run, sys.stdout)
            return
        with open(output_path, "w", encoding="utf-8") as f:
            reporter.report(run, f)
        LOGGER.info(f"Report written to {output_path}")
