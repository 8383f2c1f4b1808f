"""Typed configuration models for tailwindcov."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from tailwindcov.core.fetch import DEFAULT_FETCH_TIMEOUT
from tailwindcov.core.instrumenter import DEFAULT_PROBE_NAME
from tailwindcov.plugins.sandboxes import DEFAULT_SANDBOX

DEFAULT_OUTPUT_FORMAT = "text"


@dataclass
class InstrumentationConfig:
    """Probe settings."""

    probe_name: str = DEFAULT_PROBE_NAME


@dataclass
class ExecutionConfig:
    """Sandbox selection and sandbox-specific options."""

    sandbox: str = DEFAULT_SANDBOX
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass
class OutputConfig:
    format: str = DEFAULT_OUTPUT_FORMAT


@dataclass
class CoverageConfig:
    """Minimum unit coverage percentage the CLI accepts."""

    threshold: float = 0.0


@dataclass
class FetchConfig:
    timeout: float = DEFAULT_FETCH_TIMEOUT


@dataclass
class TailwindConfig:
    """Effective configuration after merging all sources."""

    instrumentation: InstrumentationConfig = field(default_factory=InstrumentationConfig)
    execution: ExecutionConfig = field(default_factory=ExecutionConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    coverage: CoverageConfig = field(default_factory=CoverageConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)
    _config_sources: List[str] = field(default_factory=list, repr=False)

    @property
    def sources(self) -> List[str]:
        """Where the merged values came from, lowest precedence first."""
        return list(self._config_sources)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "instrumentation": {"probe_name": self.instrumentation.probe_name},
            "execution": {"sandbox": self.execution.sandbox, **self.execution.options},
            "output": {"format": self.output.format},
            "coverage": {"threshold": self.coverage.threshold},
            "fetch": {"timeout": self.fetch.timeout},
        }
