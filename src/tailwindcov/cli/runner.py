"""CLI runner orchestration.

This module handles command dispatch and execution for the tailwindcov CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from importlib.metadata import version, PackageNotFoundError

from tailwindcov.cli.arguments import build_parser
from tailwindcov.cli.config_bridge import ConfigBridge
from tailwindcov.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_PROGRAM_ERROR,
    EXIT_SUCCESS,
)
from tailwindcov.cli.commands.fetch import FetchCommand
from tailwindcov.cli.commands.instrument import InstrumentCommand
from tailwindcov.cli.commands.run import RunCommand
from tailwindcov.cli.commands.status import StatusCommand
from tailwindcov.config import load_config
from tailwindcov.config.loader import ConfigError
from tailwindcov.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Get tailwindcov version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("tailwindcov")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from tailwindcov import __version__
        return __version__


class CLIRunner:
    """Orchestrates CLI execution with subcommand dispatch."""

    def __init__(self) -> None:
        """Initialize CLIRunner with parser and commands."""
        self.parser = build_parser()
        self._version = get_version()
        self.run_cmd = RunCommand(version=self._version)
        self.fetch_cmd = FetchCommand(version=self._version)
        self.instrument_cmd = InstrumentCommand()
        self.status_cmd = StatusCommand(version=self._version)

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        # Handle --help specially to return 0
        if argv is not None:
            argv_list = list(argv)
            if argv_list in (["--help"], ["-h"]):
                self.parser.print_help()
                return EXIT_SUCCESS
        else:
            argv_list = None

        args = self.parser.parse_args(argv_list)

        # Configure logging as early as possible
        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        commands = {
            "run": self.run_cmd,
            "fetch": self.fetch_cmd,
            "instrument": self.instrument_cmd,
            "status": self.status_cmd,
        }
        command = commands.get(getattr(args, "command", None))
        if command is None:
            # No command specified - show help
            self.parser.print_help()
            return EXIT_SUCCESS

        try:
            config = load_config(
                project_root=Path.cwd(),
                cli_config_path=getattr(args, "config", None),
                cli_overrides=ConfigBridge.args_to_overrides(args),
            )
        except ConfigError as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        try:
            return command.execute(args, config)
        except Exception as e:
            if args.debug:
                import traceback
                traceback.print_exc()
            LOGGER.error(f"{command.name} failed: {e}")
            return EXIT_PROGRAM_ERROR
