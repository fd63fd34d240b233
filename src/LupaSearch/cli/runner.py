"""Command runner for coordinating CLI execution.

Manages logging configuration and error handling for command execution.
"""

from __future__ import annotations

from typing import Any, Mapping

import click

from LupaSearch.cli.commands import OperationsCommand, SearchCommand
from LupaSearch.config import AppConfig
from LupaSearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, command creation and error handling for
    CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_search(self, action: str, extra_attributes: Mapping[str, Any] | None = None) -> None:
        """Execute the search command and echo its rendered results.

        Args:
            action: The CLI command name (e.g., 'search').
            extra_attributes: Attributes given on the command line.

        Raises:
            click.Abort: When the search fails.
        """
        self._configure_logging(action)
        try:
            command = SearchCommand(config=self.config, extra_attributes=dict(extra_attributes or {}))
            output = command.execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e
        click.echo(output)

    def run_operations(self, action: str) -> None:
        """List the operations of the configured search class.

        Raises:
            click.Abort: When the search class cannot be loaded.
        """
        self._configure_logging(action)
        try:
            output = OperationsCommand(config=self.config).execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Listing operations failed: %s", e)
            raise click.Abort from e
        click.echo(output)

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
