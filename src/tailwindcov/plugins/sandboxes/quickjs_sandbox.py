"""QuickJS sandbox plugin.

Runs programs in a private ``quickjs.Context``. Each plugin instance owns
its own context (and so its own global namespace).
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple, Type

from tailwindcov.core.errors import MissingDependencyError
from tailwindcov.core.logging import get_logger
from tailwindcov.plugins.sandboxes.base import SandboxPlugin

LOGGER = get_logger(__name__)


def _load_quickjs() -> Any:
    try:
        import quickjs
    except ImportError as e:
        raise MissingDependencyError(
            "quickjs must be installed to execute JavaScript (pip install quickjs)"
        ) from e
    return quickjs


class QuickJSSandbox(SandboxPlugin):
    """Sandbox plugin backed by the QuickJS engine."""

    def __init__(self, memory_limit: Optional[int] = None, **kwargs) -> None:
        """Initialize the sandbox.

        Args:
            memory_limit: Optional heap limit in bytes for the JS runtime.
            **kwargs: Ignored; accepted for plugin construction compatibility.
        """
        self._quickjs = _load_quickjs()
        self._context = self._quickjs.Context()
        if memory_limit is not None:
            self._context.set_memory_limit(memory_limit)

    @property
    def name(self) -> str:
        return "quickjs"

    @property
    def execution_errors(self) -> Tuple[Type[BaseException], ...]:
        return (self._quickjs.JSException,)

    def expose(self, name: str, func: Callable[..., Any]) -> None:
        LOGGER.debug(f"Exposing host callable as global '{name}'")
        self._context.add_callable(name, func)

    def execute(self, code: str) -> Any:
        return self._context.eval(code)
