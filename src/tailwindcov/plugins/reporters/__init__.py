"""Reporter plugins for tailwindcov output formatting.

Plugins are discovered via Python entry points (tailwindcov.reporters group).
"""

from __future__ import annotations

from typing import Dict, Type

from tailwindcov.plugins.reporters.base import ReporterPlugin
from tailwindcov.plugins.reporters.html_reporter import HTMLReporter
from tailwindcov.plugins.reporters.json_reporter import JSONReporter
from tailwindcov.plugins.reporters.summary_reporter import SummaryReporter
from tailwindcov.plugins.reporters.text_reporter import TextReporter
from tailwindcov.plugins import REPORTER_ENTRY_POINT_GROUP
from tailwindcov.plugins.discovery import (
    discover_plugins,
    get_plugin,
    list_available_plugins as _list_plugins,
)

BUILTIN_REPORTERS: Dict[str, Type[ReporterPlugin]] = {
    "text": TextReporter,
    "html": HTMLReporter,
    "json": JSONReporter,
    "summary": SummaryReporter,
}


def discover_reporter_plugins() -> Dict[str, Type[ReporterPlugin]]:
    """Discover all installed reporter plugins via entry points."""
    return discover_plugins(REPORTER_ENTRY_POINT_GROUP, ReporterPlugin, BUILTIN_REPORTERS)


def get_reporter_plugin(name: str) -> ReporterPlugin | None:
    """Get an instantiated reporter plugin by name."""
    return get_plugin(REPORTER_ENTRY_POINT_GROUP, name, ReporterPlugin, BUILTIN_REPORTERS)


def list_available_reporters() -> list[str]:
    """List names of all available reporter plugins."""
    return _list_plugins(REPORTER_ENTRY_POINT_GROUP, BUILTIN_REPORTERS)


__all__ = [
    "ReporterPlugin",
    "TextReporter",
    "HTMLReporter",
    "JSONReporter",
    "SummaryReporter",
    "discover_reporter_plugins",
    "get_reporter_plugin",
    "list_available_reporters",
]
