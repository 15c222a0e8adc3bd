# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import load_config
from .constants import PASSWORD_PARAM
from .core import ConnectionParser, get_name
from .logging_config import setup_logging
from .models import Fault

console = Console()

EXIT_INTERNAL_FAULT = 1
EXIT_CLIENT_FAULT = 2


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_file",
    default=None,
    help="Path to a YAML settings file.",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--log-level",
    "log_level",
    default=None,
    help="Override the configured logging level (e.g. DEBUG).",
    type=str,
)
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None, log_level: str | None):
    """
    QuickConnect: turn connection URIs into connection configurations.
    """
    settings = load_config(config_file)
    setup_logging(log_level or settings.log_level, settings.mask_sensitive_data)
    ctx.obj = ConnectionParser(settings)


def _parse_or_exit(parser: ConnectionParser, uri: str):
    outcome = parser.parse(uri)
    if not outcome.ok:
        label = "Invalid input" if outcome.fault is Fault.CLIENT else "Internal error"
        console.print(f"[bold red]{label}:[/bold red] {escape(outcome.message)}")
        sys.exit(EXIT_CLIENT_FAULT if outcome.fault is Fault.CLIENT else EXIT_INTERNAL_FAULT)
    return outcome.configuration


@cli.command()
@click.argument("uri")
@click.option("--json", "as_json", is_flag=True, help="Print the configuration as JSON.")
@click.option(
    "--show-password",
    "show_password",
    is_flag=True,
    help="Print the password instead of masking it.",
)
@click.pass_obj
def parse(parser: ConnectionParser, uri: str, as_json: bool, show_password: bool):
    """Parse URI and print the resulting configuration."""
    config = _parse_or_exit(parser, uri)
    data = config.to_dict()
    parameters = data["parameters"]
    if not show_password and PASSWORD_PARAM in parameters:
        parameters[PASSWORD_PARAM] = "********"
    name = get_name(config)

    if as_json:
        click.echo(json.dumps({**data, "name": name}, indent=2))
        return

    console.print(f"[bold]Protocol:[/bold] {escape(config.protocol)}")
    table = Table(title="Parameters")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")
    for key, value in parameters.items():
        table.add_row(escape(key), escape(value))
    console.print(table)
    console.print(f"[bold]Name:[/bold] {escape(name)}")


@cli.command()
@click.argument("uri")
@click.pass_obj
def name(parser: ConnectionParser, uri: str):
    """Print the display name generated for URI."""
    config = _parse_or_exit(parser, uri)
    click.echo(get_name(config))


def main():
    cli()


if __name__ == "__main__":
    main()
