"""Argument parser construction for tailwindcov CLI.

This module builds the argument parser with subcommands:
- tailwindcov run        - Instrument and run a local script
- tailwindcov fetch      - Download, instrument and run a remote script
- tailwindcov instrument - Print the instrumented script
- tailwindcov status     - Show version, plugins and configuration
"""

from __future__ import annotations

import argparse
from pathlib import Path


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add global options available to all commands."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show tailwindcov version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Path to config file (default: .tailwindcov.yml in the current directory).",
    )


def _add_coverage_options(parser: argparse.ArgumentParser) -> None:
    """Options shared by the commands that execute a script."""
    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--format",
        choices=["text", "html", "json", "summary"],
        default=None,
        help="Report format (default: text, or as specified in config file).",
    )
    output_group.add_argument(
        "--output", "-o",
        metavar="FILE",
        type=Path,
        help="Write the report to FILE instead of stdout.",
    )

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument(
        "--fail-under",
        metavar="PERCENT",
        type=float,
        default=None,
        help="Exit with code 1 if fewer than PERCENT of the units executed.",
    )
    config_group.add_argument(
        "--sandbox",
        metavar="NAME",
        default=None,
        help="Sandbox plugin that executes the script (default: quickjs).",
    )
    config_group.add_argument(
        "--probe-name",
        metavar="IDENTIFIER",
        default=None,
        help="Global function name the injected probes call.",
    )
    _add_config_option(parser)


def _build_run_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'run' subcommand parser."""
    run_parser = subparsers.add_parser(
        "run",
        help="Instrument and run a JavaScript file, then report coverage.",
        description=(
            "Inject tracking probes into a script, execute it in a sandbox "
            "and report which statements ran."
        ),
    )
    run_parser.add_argument(
        "path",
        type=Path,
        help="JavaScript file to run.",
    )
    _add_coverage_options(run_parser)


def _build_fetch_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'fetch' subcommand parser."""
    fetch_parser = subparsers.add_parser(
        "fetch",
        help="Download a JavaScript file, run it and report coverage.",
        description="Retrieve a remote script over HTTP(S) and run it like 'run'.",
    )
    fetch_parser.add_argument(
        "url",
        help="URL of the script.",
    )
    fetch_parser.add_argument(
        "--timeout",
        metavar="SECONDS",
        type=float,
        default=None,
        help="Network timeout in seconds (default: 30).",
    )
    _add_coverage_options(fetch_parser)


def _build_instrument_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'instrument' subcommand parser."""
    instrument_parser = subparsers.add_parser(
        "instrument",
        help="Print the instrumented version of a JavaScript file.",
        description="Show the executable text produced by probe injection, without running it.",
    )
    instrument_parser.add_argument(
        "path",
        type=Path,
        help="JavaScript file to instrument.",
    )
    instrument_parser.add_argument(
        "--output", "-o",
        metavar="FILE",
        type=Path,
        help="Write the instrumented script to FILE instead of stdout.",
    )
    instrument_parser.add_argument(
        "--probe-name",
        metavar="IDENTIFIER",
        default=None,
        help="Global function name the injected probes call.",
    )
    _add_config_option(instrument_parser)


def _build_status_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'status' subcommand parser."""
    status_parser = subparsers.add_parser(
        "status",
        help="Show version, available plugins and configuration.",
        description=(
            "Display tailwindcov version, installed sandbox and reporter "
            "plugins, and the effective configuration."
        ),
    )
    _add_config_option(status_parser)


def build_parser() -> argparse.ArgumentParser:
    """Build the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="tailwindcov",
        description="tailwindcov - statement coverage for JavaScript by source instrumentation.",
    )
    _add_global_options(parser)

    subparsers = parser.add_subparsers(dest="command", title="commands")
    _build_run_parser(subparsers)
    _build_fetch_parser(subparsers)
    _build_instrument_parser(subparsers)
    _build_status_parser(subparsers)

    return parser
