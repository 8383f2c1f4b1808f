"""Logging setup shared by the library and the CLI."""

from __future__ import annotations

import logging
from typing import Optional

PACKAGE_LOGGER_NAME = "tailwindcov"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def level_for_flags(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI verbosity flags to a logging level.

    quiet wins over debug, debug over verbose; WARNING when none is set.
    """
    if quiet:
        return logging.ERROR
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def configure_logging(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> None:
    """Configure the root handler and the tailwindcov logger level from CLI flags."""
    level = level_for_flags(debug=debug, verbose=verbose, quiet=quiet)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op once a handler exists; the package level still follows the flags
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger under the tailwindcov namespace."""
    return logging.getLogger(name if name is not None else PACKAGE_LOGGER_NAME)
