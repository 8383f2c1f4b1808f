"""tailwindcov: statement coverage for JavaScript by source instrumentation."""

__version__ = "0.3.0"

# ruff: noqa: E402
from tailwindcov.core.errors import (
    InstrumentationError,
    InternalInvariantError,
    MissingDependencyError,
    RetrievalError,
    TailwindError,
)
from tailwindcov.core.fetch import fetch_and_run, fetch_source
from tailwindcov.core.models import CoverableUnit, CoverageSummary, UnitKind
from tailwindcov.core.render import HTML_STYLE, TEXT_STYLE, MarkerStyle, render
from tailwindcov.core.run import CoverageRun, instrument_and_run, instrument_source, summarize

__all__ = [
    "__version__",
    "CoverableUnit",
    "CoverageRun",
    "CoverageSummary",
    "UnitKind",
    "MarkerStyle",
    "TEXT_STYLE",
    "HTML_STYLE",
    "TailwindError",
    "MissingDependencyError",
    "InstrumentationError",
    "InternalInvariantError",
    "RetrievalError",
    "instrument_source",
    "instrument_and_run",
    "fetch_source",
    "fetch_and_run",
    "summarize",
    "render",
]
