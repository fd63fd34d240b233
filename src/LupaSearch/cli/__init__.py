"""CLI package for LupaSearch command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from LupaSearch.cli.runner import CommandRunner
from LupaSearch.cli.ui import cli


def main() -> None:
    """Run LupaSearch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
