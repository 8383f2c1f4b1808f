"""CLI commands package.

This module provides the base Command class and exports all command implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tailwindcov.config.models import TailwindConfig


class Command(ABC):
    """Base class for CLI commands.

    All CLI commands should inherit from this class and implement
    the execute method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Command identifier."""

    @abstractmethod
    def execute(self, args: Namespace, config: "TailwindConfig | None" = None) -> int:
        """Execute the command.

        Args:
            args: Parsed command-line arguments.
            config: Effective tailwindcov configuration.

        Returns:
            Exit code (0 for success, non-zero for error).
        """


# Import command implementations for convenience
# ruff: noqa: E402
from tailwindcov.cli.commands.run import RunCommand
from tailwindcov.cli.commands.fetch import FetchCommand
from tailwindcov.cli.commands.instrument import InstrumentCommand
from tailwindcov.cli.commands.status import StatusCommand

__all__ = [
    "Command",
    "RunCommand",
    "FetchCommand",
    "InstrumentCommand",
    "StatusCommand",
]
