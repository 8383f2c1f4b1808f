"""Base class for reporter plugins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, TYPE_CHECKING

if TYPE_CHECKING:
    from tailwindcov.core.run import CoverageRun


class ReporterPlugin(ABC):
    """Base class for all reporter plugins.

    Reporter plugins format and output coverage runs in various formats.
    Each reporter implements a specific output format (text, HTML, JSON, ...)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Reporter identifier (e.g., 'text', 'html', 'json')."""

    @abstractmethod
    def report(self, run: "CoverageRun", output: IO[str]) -> None:
        """Format and write the coverage run.

        Args:
            run: The coverage run to format.
            output: Output stream to write the formatted result.
        """
