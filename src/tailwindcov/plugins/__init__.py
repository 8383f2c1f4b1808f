"""Plugin infrastructure for tailwindcov.

This package provides the plugin discovery infrastructure for:
- Sandbox plugins (tailwindcov.sandboxes) - JavaScript execution
- Reporter plugins (tailwindcov.reporters) - Output formatting

Plugins are discovered via Python entry points.
"""

from tailwindcov.plugins.discovery import (
    discover_plugins,
    get_plugin,
    list_available_plugins,
    SANDBOX_ENTRY_POINT_GROUP,
    REPORTER_ENTRY_POINT_GROUP,
)

__all__ = [
    "discover_plugins",
    "get_plugin",
    "list_available_plugins",
    "SANDBOX_ENTRY_POINT_GROUP",
    "REPORTER_ENTRY_POINT_GROUP",
]
