"""Command-line interface for tailwindcov."""

from __future__ import annotations

from typing import Iterable, Optional


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI entrypoint.

    Returns an exit code suitable for use as a console script.
    """
    from tailwindcov.cli.runner import CLIRunner

    return CLIRunner().run(argv)


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    raise SystemExit(main())
