"""Coverage runs: discover, instrument and execute one source text."""

from __future__ import annotations

from typing import Any, List, Optional

from tailwindcov.core import syntax
from tailwindcov.core.bridge import ExecutionBridge
from tailwindcov.core.discovery import discover_units
from tailwindcov.core.instrumenter import DEFAULT_PROBE_NAME, InstrumentedSource, instrument
from tailwindcov.core.logging import get_logger
from tailwindcov.core.models import CoverableUnit, CoverageSummary
from tailwindcov.core.registry import UnitRegistry
from tailwindcov.plugins.sandboxes import DEFAULT_SANDBOX, SandboxPlugin, get_sandbox_plugin

LOGGER = get_logger(__name__)


class CoverageRun:
    """One discover-instrument-execute cycle over a fixed source text.

    The run owns its registry, so unit ids start at zero for every run and
    never collide with those of another run. Coverage data stays readable
    after an execution failure.
    """

    def __init__(
        self,
        source: str,
        registry: UnitRegistry,
        units: List[CoverableUnit],
        instrumented: InstrumentedSource,
        probe_name: str = DEFAULT_PROBE_NAME,
    ) -> None:
        self.source = source
        self.units = units
        self.instrumented = instrumented
        self.probe_name = probe_name
        self._registry = registry
        self._bridge = ExecutionBridge(registry)
        self._sandbox: Optional[SandboxPlugin] = None

    @property
    def registry(self) -> UnitRegistry:
        return self._registry

    @property
    def bridge(self) -> ExecutionBridge:
        return self._bridge

    @property
    def sandbox(self) -> Optional[SandboxPlugin]:
        """Sandbox the run executed in, None before execute()."""
        return self._sandbox

    @property
    def executed(self) -> bool:
        return self._sandbox is not None

    def execute(self, sandbox: Optional[SandboxPlugin] = None) -> Any:
        """Run the instrumented program.

        Args:
            sandbox: Sandbox to run in; a fresh default sandbox when omitted.
                It must not be shared with another run.

        Returns:
            Completion value of the program.

        Raises:
            RuntimeError: If the run was already executed.
            InternalInvariantError: If a probe referenced an unknown unit.
            Exception: Whatever the sandbox raises when the program throws.
        """
        if self._sandbox is not None:
            raise RuntimeError("Coverage run has already been executed")
        if sandbox is None:
            sandbox = get_sandbox_plugin(DEFAULT_SANDBOX)
        self._sandbox = sandbox
        sandbox.expose(self.probe_name, self._bridge.track)
        LOGGER.debug(f"Executing {len(self.units)} instrumented units in '{sandbox.name}'")
        return self._run(self.instrumented.text)

    def evaluate(self, code: str) -> Any:
        """Run further, uninstrumented code in the run's sandbox.

        Functions the instrumented program defined keep counting into this
        run's registry.
        """
        if self._sandbox is None:
            raise RuntimeError("Coverage run has not been executed yet")
        return self._run(code)

    def _run(self, code: str) -> Any:
        # Violations left over from earlier code (or caught by the script) are not ours
        self._bridge.take_violation()
        try:
            return self._sandbox.execute(code)
        except self._sandbox.execution_errors:
            violation = self._bridge.take_violation()
            if violation is not None:
                raise violation
            raise

    def summarize(self) -> CoverageSummary:
        return summarize(self)


def instrument_source(source: str, probe_name: str = DEFAULT_PROBE_NAME) -> CoverageRun:
    """Parse, discover and instrument source without executing it.

    Raises:
        MissingDependencyError: If the parser is not installed.
        esprima.error_handler.Error: If the source does not parse.
    """
    tree = syntax.parse(source)
    registry = UnitRegistry(source)
    units = discover_units(tree, registry)
    instrumented = instrument(source, units, probe_name)
    return CoverageRun(source, registry, units, instrumented, probe_name)


def instrument_and_run(
    source: str,
    sandbox: Optional[SandboxPlugin] = None,
    probe_name: str = DEFAULT_PROBE_NAME,
) -> CoverageRun:
    """Instrument source, execute it and return the run.

    Parse and execution failures propagate unchanged.
    """
    run = instrument_source(source, probe_name)
    run.execute(sandbox)
    return run


def summarize(run: CoverageRun) -> CoverageSummary:
    """Count total and executed units of a run."""
    return CoverageSummary(
        total_units=len(run.units),
        executed_units=sum(1 for unit in run.units if unit.executed),
    )
