"""Status command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

import yaml

if TYPE_CHECKING:
    from tailwindcov.config.models import TailwindConfig

from tailwindcov.cli.commands import Command
from tailwindcov.cli.exit_codes import EXIT_SUCCESS
from tailwindcov.config import get_default_config
from tailwindcov.config.loader import get_tailwindcov_home
from tailwindcov.plugins.reporters import list_available_reporters
from tailwindcov.plugins.sandboxes import discover_sandbox_plugins


class StatusCommand(Command):
    """Shows version, plugin availability and effective configuration."""

    def __init__(self, version: str):
        """Initialize StatusCommand.

        Args:
            version: Current tailwindcov version string.
        """
        self._version = version

    @property
    def name(self) -> str:
        """Command identifier."""
        return "status"

    def execute(self, args: Namespace, config: "TailwindConfig | None" = None) -> int:
        """Execute the status command.

        Returns:
            Exit code (always 0 for status).
        """
        config = config or get_default_config()

        print(f"tailwindcov version: {self._version}")
        print(f"Home directory: {get_tailwindcov_home()}")
        print()

        print("Sandbox plugins:")
        for name, plugin_class in sorted(discover_sandbox_plugins().items()):
            try:
                plugin_class()
                print(f"  {name}: available")
            except Exception as e:
                print(f"  {name}: unavailable ({e})")

        print()
        print("Reporter plugins:")
        for name in list_available_reporters():
            print(f"  {name}")

        print()
        sources = ", ".join(config.sources) if config.sources else "defaults"
        print(f"Configuration ({sources}):")
        for line in yaml.safe_dump(config.to_dict(), sort_keys=False).splitlines():
            print(f"  {line}")

        return EXIT_SUCCESS
