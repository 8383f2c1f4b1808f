"""Fetch command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tailwindcov.config.models import TailwindConfig

from tailwindcov.cli.commands.run import RunCommand
from tailwindcov.core.fetch import fetch_source


class FetchCommand(RunCommand):
    """Downloads a remote script, then behaves like the run command."""

    @property
    def name(self) -> str:
        return "fetch"

    def _load_source(self, args: Namespace, config: "TailwindConfig") -> str:
        return fetch_source(args.url, timeout=config.fetch.timeout)

    def _describe(self, args: Namespace) -> str:
        return args.url
