"""Exception hierarchy for tailwindcov.

Parse failures raised by the parser and execution failures raised by a
sandbox are not wrapped: they reach the caller unchanged.
"""

from __future__ import annotations


class TailwindError(Exception):
    """Base class for errors raised by tailwindcov itself."""

    pass


class MissingDependencyError(TailwindError):
    """A required collaborator (parser or JavaScript engine) is not installed."""

    pass


class InstrumentationError(TailwindError):
    """Units handed to the instrumenter are not in source order."""

    pass


class InternalInvariantError(TailwindError):
    """A probe referenced a unit id the active registry does not know.

    Indicates a mismatch between discovery and instrumentation; it is a
    defect, not a recoverable condition.
    """

    pass


class RetrievalError(TailwindError):
    """Remote source could not be retrieved."""

    def __init__(self, message: str, url: str, status: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status
