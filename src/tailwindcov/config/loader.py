"""Configuration file loading and merging.

Handles loading configuration from YAML files with:
- Project-level config (.tailwindcov.yml)
- Global config ($TAILWINDCOV_HOME/config.yml, default ~/.tailwindcov)
- Environment variable expansion (${VAR})
- Config merging with proper precedence
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from tailwindcov.config.models import (
    CoverageConfig,
    ExecutionConfig,
    FetchConfig,
    InstrumentationConfig,
    OutputConfig,
    TailwindConfig,
)
from tailwindcov.config.validation import validate_config
from tailwindcov.core.instrumenter import DEFAULT_PROBE_NAME, is_valid_probe_name
from tailwindcov.core.logging import get_logger

LOGGER = get_logger(__name__)

# Config file names
PROJECT_CONFIG_NAMES = [".tailwindcov.yml", ".tailwindcov.yaml", "tailwindcov.yml", "tailwindcov.yaml"]
GLOBAL_CONFIG_NAME = "config.yml"

# Default directory name under user home
DEFAULT_HOME_DIR_NAME = ".tailwindcov"

# Environment variable to override home directory
TAILWINDCOV_HOME_ENV = "TAILWINDCOV_HOME"

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


class ConfigError(Exception):
    """Configuration loading or parsing error."""

    pass


def get_tailwindcov_home() -> Path:
    """Get the tailwindcov home directory path.

    Resolution order:
    1. TAILWINDCOV_HOME environment variable (if set)
    2. ~/.tailwindcov (default)
    """
    env_home = os.environ.get(TAILWINDCOV_HOME_ENV)
    if env_home:
        return Path(env_home)
    return Path.home() / DEFAULT_HOME_DIR_NAME


def load_config(
    project_root: Path,
    cli_config_path: Optional[Path] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> TailwindConfig:
    """Load configuration with proper precedence.

    Precedence (highest to lowest):
    1. CLI flags (cli_overrides)
    2. Custom config file (cli_config_path) OR project config (.tailwindcov.yml)
    3. Global config ($TAILWINDCOV_HOME/config.yml)
    4. Built-in defaults

    Args:
        project_root: Project root directory for finding .tailwindcov.yml.
        cli_config_path: Optional path to custom config file (--config flag).
        cli_overrides: Dict of CLI flag overrides.

    Returns:
        Merged TailwindConfig instance.

    Raises:
        ConfigError: If a specified config file doesn't exist, has parse
            errors, or the merged probe name is not a valid identifier.
    """
    sources: List[str] = []
    merged: Dict[str, Any] = {}

    # Layer 1: Global config
    global_path = find_global_config()
    if global_path and global_path.exists():
        try:
            global_dict = load_yaml_file(global_path)
            validate_config(global_dict, source=str(global_path))
            merged = merge_configs(merged, global_dict)
            sources.append(f"global:{global_path}")
            LOGGER.debug(f"Loaded global config from {global_path}")
        except Exception as e:
            LOGGER.warning(f"Failed to load global config: {e}")

    # Layer 2: Project or custom config
    if cli_config_path:
        if not cli_config_path.exists():
            raise ConfigError(f"Config file not found: {cli_config_path}")
        try:
            project_dict = load_yaml_file(cli_config_path)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {cli_config_path}: {e}") from e
        validate_config(project_dict, source=str(cli_config_path))
        merged = merge_configs(merged, project_dict)
        sources.append(f"custom:{cli_config_path}")
        LOGGER.debug(f"Loaded custom config from {cli_config_path}")
    else:
        project_path = find_project_config(project_root)
        if project_path and project_path.exists():
            try:
                project_dict = load_yaml_file(project_path)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {project_path}: {e}") from e
            validate_config(project_dict, source=str(project_path))
            merged = merge_configs(merged, project_dict)
            sources.append(f"project:{project_path}")
            LOGGER.debug(f"Loaded project config from {project_path}")

    # Layer 3: CLI overrides
    if cli_overrides:
        merged = merge_configs(merged, cli_overrides)
        sources.append("cli")
        LOGGER.debug("Applied CLI overrides")

    config = dict_to_config(merged)
    config._config_sources = sources

    LOGGER.debug(f"Config loaded from sources: {sources}")
    return config


def find_project_config(project_root: Path) -> Optional[Path]:
    """Find config file in project root.

    Searches for .tailwindcov.yml, .tailwindcov.yaml, tailwindcov.yml and
    tailwindcov.yaml in the project root directory.
    """
    for name in PROJECT_CONFIG_NAMES:
        config_path = project_root / name
        if config_path.exists():
            return config_path
    return None


def find_global_config() -> Optional[Path]:
    """Find global config at $TAILWINDCOV_HOME/config.yml."""
    config_path = get_tailwindcov_home() / GLOBAL_CONFIG_NAME
    if config_path.exists():
        return config_path
    return None


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and parse a YAML config file.

    Performs environment variable expansion on string values.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        ConfigError: If the document is not a mapping.
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    data = yaml.safe_load(content)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")

    return expand_env_vars(data)


def expand_env_vars(data: Any) -> Any:
    """Recursively expand ${VAR} and ${VAR:-default} in config values."""
    if isinstance(data, dict):
        return {k: expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_env_var_replacer, data)
    else:
        return data


def _env_var_replacer(match: re.Match[str]) -> str:
    """Replace environment variable reference with its value."""
    var_name = match.group(1)
    default_value = match.group(2)

    value = os.environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""


def merge_configs(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two config dicts, with overlay taking precedence.

    Rules:
    - Scalar values: overlay replaces base
    - Lists: overlay replaces base (no merging)
    - Dicts: recursive merge
    """
    result = base.copy()

    for key, overlay_value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(overlay_value, dict):
            result[key] = merge_configs(result[key], overlay_value)
        else:
            result[key] = overlay_value

    return result


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name)
    return value if isinstance(value, dict) else {}


def dict_to_config(data: Dict[str, Any]) -> TailwindConfig:
    """Convert a merged config dict to a typed TailwindConfig.

    Raises:
        ConfigError: If the probe name is not a valid JavaScript identifier
            or a numeric setting is not a number.
    """
    instrumentation_data = _section(data, "instrumentation")
    probe_name = instrumentation_data.get("probe_name", DEFAULT_PROBE_NAME)
    if not isinstance(probe_name, str) or not is_valid_probe_name(probe_name):
        raise ConfigError(f"Invalid probe name {probe_name!r}: must be a JavaScript identifier")

    execution_data = _section(data, "execution")
    execution = ExecutionConfig(
        sandbox=execution_data.get("sandbox", ExecutionConfig().sandbox),
        # Everything else is sandbox-specific options
        options={k: v for k, v in execution_data.items() if k != "sandbox"},
    )

    output = OutputConfig(
        format=_section(data, "output").get("format", OutputConfig().format),
    )

    try:
        coverage = CoverageConfig(
            threshold=float(_section(data, "coverage").get("threshold", CoverageConfig().threshold)),
        )
        fetch = FetchConfig(
            timeout=float(_section(data, "fetch").get("timeout", FetchConfig().timeout)),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid numeric config value: {e}") from e

    return TailwindConfig(
        instrumentation=InstrumentationConfig(probe_name=probe_name),
        execution=execution,
        output=output,
        coverage=coverage,
        fetch=fetch,
    )


def get_default_config() -> TailwindConfig:
    """Get default configuration."""
    return TailwindConfig()
