"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click
import yaml
from dotenv import load_dotenv

from LupaSearch.cli.runner import CommandRunner
from LupaSearch.config import DEFAULT_CONFIG_PATH, load_config


@click.group(help="LupaSearch: run search objects over a scope.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    load_dotenv()

    cfg = load_config(config_path)
    ctx.obj = cfg


@cli.command("search")
@click.option(
    "--attr",
    "attrs",
    multiple=True,
    metavar="KEY=VALUE",
    help="Extra search attribute; VALUE is parsed as YAML. Repeatable.",
)
@click.pass_context
def search_cmd(ctx: click.Context, attrs: tuple[str, ...]) -> None:
    """Run the configured search and print its results.

    Args:
        ctx: Click context.
        attrs: Extra attributes as KEY=VALUE pairs.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_search(action=ctx.command.name, extra_attributes=parse_attribute_options(attrs))


@cli.command("operations")
@click.pass_context
def operations_cmd(ctx: click.Context) -> None:
    """List the operations the configured search class supports."""
    runner = CommandRunner(ctx.obj)
    runner.run_operations(action=ctx.command.name)


def parse_attribute_options(pairs: tuple[str, ...]) -> dict[str, Any]:
    """Parse ``KEY=VALUE`` options into an attribute mapping.

    Raises:
        click.BadParameter: If a pair has no ``=`` or an empty key.
    """
    attributes: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw_value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--attr")
        try:
            attributes[key] = yaml.safe_load(raw_value) if raw_value.strip() else raw_value
        except yaml.YAMLError as error:
            raise click.BadParameter(f"invalid value for {key}: {error}", param_hint="--attr") from error
    return attributes
