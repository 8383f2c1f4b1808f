"""Configuration loading for tailwindcov."""

from tailwindcov.config.loader import ConfigError, get_default_config, load_config
from tailwindcov.config.models import TailwindConfig

__all__ = [
    "ConfigError",
    "TailwindConfig",
    "get_default_config",
    "load_config",
]
