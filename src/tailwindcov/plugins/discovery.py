"""Plugin discovery via Python entry points.

Supports discovering different plugin types:
- Sandbox plugins: tailwindcov.sandboxes
- Reporter plugins: tailwindcov.reporters

Built-in plugins are always available, even when the package metadata
(and with it the entry points) has not been installed.
"""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import Dict, List, Mapping, Optional, Type, TypeVar

from tailwindcov.core.logging import get_logger

LOGGER = get_logger(__name__)

# Entry point group names for different plugin types
SANDBOX_ENTRY_POINT_GROUP = "tailwindcov.sandboxes"
REPORTER_ENTRY_POINT_GROUP = "tailwindcov.reporters"

T = TypeVar("T")


def discover_plugins(
    group: str,
    base_class: Type[T] | None = None,
    builtins: Optional[Mapping[str, Type[T]]] = None,
) -> Dict[str, Type[T]]:
    """Discover all installed plugins for a given entry point group.

    Plugins register themselves in their pyproject.toml:

        [project.entry-points."tailwindcov.sandboxes"]
        quickjs = "tailwindcov.plugins.sandboxes.quickjs_sandbox:QuickJSSandbox"

    Args:
        group: Entry point group name (e.g., 'tailwindcov.sandboxes').
        base_class: Optional base class to validate plugins against.
        builtins: Plugins shipped with tailwindcov; entry points override them.

    Returns:
        Dictionary mapping plugin names to plugin classes.
    """
    plugins: Dict[str, Type[T]] = dict(builtins or {})

    try:
        eps = entry_points(group=group)
    except TypeError:
        # Python 3.9 compatibility
        all_eps = entry_points()
        eps = all_eps.get(group, [])  # type: ignore[assignment]

    for ep in eps:
        try:
            plugin_class = ep.load()
            if base_class is not None and not issubclass(plugin_class, base_class):
                LOGGER.warning(
                    f"Plugin '{ep.name}' does not inherit from {base_class.__name__}, skipping"
                )
                continue
            plugins[ep.name] = plugin_class
            LOGGER.debug(f"Discovered plugin: {ep.name} (group: {group})")
        except Exception as e:
            LOGGER.warning(f"Failed to load plugin '{ep.name}': {e}")

    return plugins


def get_plugin(
    group: str,
    name: str,
    base_class: Type[T] | None = None,
    builtins: Optional[Mapping[str, Type[T]]] = None,
    **kwargs,
) -> T | None:
    """Get an instantiated plugin by name.

    Args:
        group: Entry point group name.
        name: Plugin name (e.g., 'quickjs').
        base_class: Optional base class to validate against.
        builtins: Plugins shipped with tailwindcov.
        **kwargs: Additional arguments to pass to the plugin constructor.

    Returns:
        Instantiated plugin or None if not found.
    """
    plugins = discover_plugins(group, base_class, builtins)
    plugin_class = plugins.get(name)
    if plugin_class:
        return plugin_class(**kwargs)
    return None


def list_available_plugins(
    group: str,
    builtins: Optional[Mapping[str, type]] = None,
) -> List[str]:
    """List names of all available plugins in a group, sorted.

    Args:
        group: Entry point group name.
        builtins: Plugins shipped with tailwindcov.

    Returns:
        List of plugin names.
    """
    return sorted(discover_plugins(group, builtins=builtins).keys())
