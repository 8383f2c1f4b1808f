"""Shared pytest fixtures for tailwindcov tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Tuple, Type

import pytest

from tailwindcov.core.instrumenter import DEFAULT_PROBE_NAME
from tailwindcov.plugins.sandboxes.base import SandboxPlugin


class ScriptError(Exception):
    """Raised by RecordingSandbox when told to fail."""


class RecordingSandbox(SandboxPlugin):
    """Sandbox double that records calls instead of running JavaScript."""

    def __init__(
        self,
        result: Any = None,
        fail: bool = False,
        calls: Iterable[Tuple[str, Tuple[Any, ...]]] = (),
    ) -> None:
        self.exposed: Dict[str, Callable[..., Any]] = {}
        self.executed: List[str] = []
        self._result = result
        self._fail = fail
        self._calls = list(calls)

    @property
    def name(self) -> str:
        return "recording"

    @property
    def execution_errors(self) -> Tuple[Type[BaseException], ...]:
        return (ScriptError,)

    def expose(self, name: str, func: Callable[..., Any]) -> None:
        self.exposed[name] = func

    def execute(self, code: str) -> Any:
        self.executed.append(code)
        for name, args in self._calls:
            # Host errors come back rewrapped, as in a real engine
            try:
                self.exposed[name](*args)
            except Exception as e:
                raise ScriptError(f"host call {name} failed") from e
        if self._fail:
            raise ScriptError("script failed")
        return self._result


@pytest.fixture
def recording_sandbox() -> RecordingSandbox:
    return RecordingSandbox()


@pytest.fixture
def failing_sandbox() -> RecordingSandbox:
    """Sandbox double whose execute() raises ScriptError."""
    return RecordingSandbox(fail=True)


@pytest.fixture
def violating_sandbox() -> RecordingSandbox:
    """Sandbox double whose program calls the default probe with an unknown id."""
    return RecordingSandbox(calls=[(DEFAULT_PROBE_NAME, (42,))])


@pytest.fixture
def quickjs_sandbox():
    """A fresh QuickJS sandbox (one global namespace per test)."""
    from tailwindcov.plugins.sandboxes.quickjs_sandbox import QuickJSSandbox

    return QuickJSSandbox()


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point TAILWINDCOV_HOME at an empty directory so no global config leaks in."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("TAILWINDCOV_HOME", str(home))
    return home
