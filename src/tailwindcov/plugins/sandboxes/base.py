"""Base class for execution sandbox plugins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Tuple, Type


class SandboxPlugin(ABC):
    """Base class for all sandbox plugins.

    A sandbox runs arbitrary JavaScript text as a program and lets the host
    publish callables into the program's global namespace. Instrumented
    code reaches the execution bridge through such a callable. One sandbox
    instance holds one global namespace; coverage runs never share one.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Sandbox identifier (e.g., 'quickjs')."""

    @property
    @abstractmethod
    def execution_errors(self) -> Tuple[Type[BaseException], ...]:
        """Exception types the sandbox raises when the program throws."""

    @abstractmethod
    def expose(self, name: str, func: Callable[..., Any]) -> None:
        """Make a host callable available as a global function.

        Args:
            name: Global name the program calls.
            func: Host callable. Its return value is handed back to the program.
        """

    @abstractmethod
    def execute(self, code: str) -> Any:
        """Run code as a program in this sandbox's global namespace.

        Args:
            code: JavaScript program text.

        Returns:
            The completion value of the program, converted to Python.
        """
