"""Sandbox plugins that execute instrumented JavaScript.

Plugins are discovered via Python entry points (tailwindcov.sandboxes group).
"""

from __future__ import annotations

from typing import Dict, Type

from tailwindcov.plugins.sandboxes.base import SandboxPlugin
from tailwindcov.plugins.sandboxes.quickjs_sandbox import QuickJSSandbox
from tailwindcov.plugins.discovery import (
    SANDBOX_ENTRY_POINT_GROUP,
    discover_plugins,
    get_plugin,
    list_available_plugins as _list_plugins,
)

DEFAULT_SANDBOX = "quickjs"

BUILTIN_SANDBOXES: Dict[str, Type[SandboxPlugin]] = {
    "quickjs": QuickJSSandbox,
}


def discover_sandbox_plugins() -> Dict[str, Type[SandboxPlugin]]:
    """Discover all installed sandbox plugins via entry points."""
    return discover_plugins(SANDBOX_ENTRY_POINT_GROUP, SandboxPlugin, BUILTIN_SANDBOXES)


def get_sandbox_plugin(name: str = DEFAULT_SANDBOX, **kwargs) -> SandboxPlugin | None:
    """Get a fresh sandbox instance by name."""
    return get_plugin(SANDBOX_ENTRY_POINT_GROUP, name, SandboxPlugin, BUILTIN_SANDBOXES, **kwargs)


def list_available_sandboxes() -> list[str]:
    """List names of all available sandbox plugins."""
    return _list_plugins(SANDBOX_ENTRY_POINT_GROUP, BUILTIN_SANDBOXES)


__all__ = [
    "DEFAULT_SANDBOX",
    "SandboxPlugin",
    "QuickJSSandbox",
    "discover_sandbox_plugins",
    "get_sandbox_plugin",
    "list_available_sandboxes",
]
