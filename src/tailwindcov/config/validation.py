"""Configuration validation for tailwindcov.

Validates core configuration keys and warns on unknown keys.
Sandbox-specific options under ``execution`` are passed through without
validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Dict, List, Optional, Set

from tailwindcov.core.instrumenter import is_valid_probe_name
from tailwindcov.core.logging import get_logger

LOGGER = get_logger(__name__)


@dataclass
class ConfigValidationWarning:
    """A validation warning for configuration."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


# Valid top-level keys (core config)
VALID_TOP_LEVEL_KEYS: Set[str] = {
    "version",
    "instrumentation",
    "execution",
    "output",
    "coverage",
    "fetch",
}

VALID_SECTION_KEYS: Dict[str, Set[str]] = {
    "instrumentation": {"probe_name"},
    "output": {"format"},
    "coverage": {"threshold"},
    "fetch": {"timeout"},
}

VALID_OUTPUT_FORMATS: Set[str] = {"text", "html", "json", "summary"}


def validate_config(
    data: Dict[str, Any],
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate configuration dictionary.

    Warns on unknown core keys but allows sandbox options to pass through.
    Does not raise exceptions - returns warnings instead.

    Args:
        data: Config dictionary to validate.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ConfigValidationWarning] = []

    if not isinstance(data, dict):  # type: ignore[unreachable]
        warnings.append(ConfigValidationWarning(
            message=f"Config must be a mapping, got {type(data).__name__}",
            source=source,
        ))
        return warnings  # type: ignore[unreachable]

    for key in data.keys():
        if key not in VALID_TOP_LEVEL_KEYS:
            _add(warnings, ConfigValidationWarning(
                message=f"Unknown top-level key '{key}'",
                source=source,
                key=key,
                suggestion=_suggest_key(key, VALID_TOP_LEVEL_KEYS),
            ))

    for section in ("instrumentation", "execution", "output", "coverage", "fetch"):
        value = data.get(section)
        if value is not None and not isinstance(value, dict):
            _add(warnings, ConfigValidationWarning(
                message=f"'{section}' must be a mapping, got {type(value).__name__}",
                source=source,
                key=section,
            ))
            continue
        if value is None or section not in VALID_SECTION_KEYS:
            continue
        valid_keys = VALID_SECTION_KEYS[section]
        for key in value.keys():
            if key not in valid_keys:
                _add(warnings, ConfigValidationWarning(
                    message=f"Unknown key '{section}.{key}'",
                    source=source,
                    key=f"{section}.{key}",
                    suggestion=_suggest_key(key, valid_keys),
                ))

    probe_name = _get(data, "instrumentation", "probe_name")
    if probe_name is not None:
        if not isinstance(probe_name, str) or not is_valid_probe_name(probe_name):
            _add(warnings, ConfigValidationWarning(
                message=f"'instrumentation.probe_name' must be a JavaScript identifier, got {probe_name!r}",
                source=source,
                key="instrumentation.probe_name",
            ))

    sandbox = _get(data, "execution", "sandbox")
    if sandbox is not None and not isinstance(sandbox, str):
        _add(warnings, ConfigValidationWarning(
            message="'execution.sandbox' must be a string",
            source=source,
            key="execution.sandbox",
        ))

    output_format = _get(data, "output", "format")
    if output_format is not None and output_format not in VALID_OUTPUT_FORMATS:
        _add(warnings, ConfigValidationWarning(
            message=f"Unknown output format '{output_format}'",
            source=source,
            key="output.format",
            suggestion=_suggest_key(str(output_format), VALID_OUTPUT_FORMATS),
        ))

    threshold = _get(data, "coverage", "threshold")
    if threshold is not None:
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            _add(warnings, ConfigValidationWarning(
                message="'coverage.threshold' must be a number",
                source=source,
                key="coverage.threshold",
            ))
        elif not 0 <= threshold <= 100:
            _add(warnings, ConfigValidationWarning(
                message=f"'coverage.threshold' must be between 0 and 100, got {threshold}",
                source=source,
                key="coverage.threshold",
            ))

    timeout = _get(data, "fetch", "timeout")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            _add(warnings, ConfigValidationWarning(
                message="'fetch.timeout' must be a positive number",
                source=source,
                key="fetch.timeout",
            ))

    return warnings


def _get(data: Dict[str, Any], section: str, key: str) -> Any:
    value = data.get(section)
    if isinstance(value, dict):
        return value.get(key)
    return None


def _add(warnings: List[ConfigValidationWarning], warning: ConfigValidationWarning) -> None:
    warnings.append(warning)
    _log_warning(warning)


def _suggest_key(key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest the closest valid key for a typo."""
    matches = get_close_matches(key, list(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(warning: ConfigValidationWarning) -> None:
    message = f"{warning.source}: {warning.message}"
    if warning.suggestion:
        message += f" (did you mean '{warning.suggestion}'?)"
    LOGGER.warning(message)
