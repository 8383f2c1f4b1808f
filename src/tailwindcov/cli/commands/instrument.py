"""Instrument command implementation."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tailwindcov.config.models import TailwindConfig

from tailwindcov.cli.commands import Command
from tailwindcov.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_MISSING_DEPENDENCY,
    EXIT_PROGRAM_ERROR,
    EXIT_SUCCESS,
)
from tailwindcov.config import get_default_config
from tailwindcov.core.errors import MissingDependencyError
from tailwindcov.core.logging import get_logger
from tailwindcov.core.run import instrument_source

LOGGER = get_logger(__name__)


class InstrumentCommand(Command):
    """Prints the probe-injected script without executing it."""

    @property
    def name(self) -> str:
        return "instrument"

    def execute(self, args: Namespace, config: "TailwindConfig | None" = None) -> int:
        config = config or get_default_config()

        try:
            source = Path(args.path).read_text(encoding="utf-8")
        except OSError as e:
            LOGGER.error(f"Cannot read script: {e}")
            return EXIT_INVALID_USAGE

        try:
            run = instrument_source(source, config.instrumentation.probe_name)
        except MissingDependencyError as e:
            LOGGER.error(str(e))
            return EXIT_MISSING_DEPENDENCY
        except Exception as e:
            LOGGER.error(f"Failed to parse {args.path}: {e}")
            return EXIT_PROGRAM_ERROR

        LOGGER.info(f"{args.path}: {len(run.units)} probes inserted")
        output_path = getattr(args, "output", None)
        if output_path is None:
            sys.stdout.write(run.instrumented.text)
            if not run.instrumented.text.endswith("\n"):
                sys.stdout.write("\n")
        else:
            Path(output_path).write_text(run.instrumented.text, encoding="utf-8")
        return EXIT_SUCCESS
