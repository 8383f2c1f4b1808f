"""Bridge between CLI arguments and configuration models."""

from __future__ import annotations

import argparse
from typing import Any, Dict


class ConfigBridge:
    """Translates CLI arguments to configuration overrides."""

    @staticmethod
    def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
        """Convert CLI arguments to config override dict.

        Only options given explicitly on the command line are included, so
        config file values survive when a flag is omitted.

        Args:
            args: Parsed CLI arguments.

        Returns:
            Dictionary of config overrides.
        """
        overrides: Dict[str, Any] = {}

        # Use getattr with defaults for subcommand compatibility
        probe_name = getattr(args, "probe_name", None)
        if probe_name is not None:
            overrides["instrumentation"] = {"probe_name": probe_name}

        sandbox = getattr(args, "sandbox", None)
        if sandbox is not None:
            overrides["execution"] = {"sandbox": sandbox}

        output_format = getattr(args, "format", None)
        if output_format is not None:
            overrides["output"] = {"format": output_format}

        fail_under = getattr(args, "fail_under", None)
        if fail_under is not None:
            overrides["coverage"] = {"threshold": fail_under}

        timeout = getattr(args, "timeout", None)
        if timeout is not None:
            overrides["fetch"] = {"timeout": timeout}

        return overrides
