"""
Entry point.

Usage:
    notion-cli --help
    notion-cli test
    notion-cli -v get-page <id>
"""

import asyncio
import os
from typing import Optional, Tuple

import click

from . import VERSION
from .dispatcher import USAGE, dispatch
from .log import setup_logging


class UsageCommand(click.Command):
    """Shows the hand-written usage text instead of click's generated help."""

    def get_help(self, ctx: click.Context) -> str:
        return USAGE


@click.command(
    cls=UsageCommand,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
@click.option("--verbose", "-v", is_flag=True, help="Debug logging on stderr.")
@click.version_option(VERSION, "--version", prog_name="notion-cli")
@click.argument("command", required=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx: click.Context, verbose: bool, command: Optional[str], args: Tuple[str, ...]) -> None:
    if not command:
        click.echo(USAGE)
        return

    level = "DEBUG" if verbose else os.getenv("NOTION_LOG_LEVEL", "WARNING")
    try:
        setup_logging(level)
    except ValueError as e:
        raise click.ClickException(f"Invalid NOTION_LOG_LEVEL: {e}") from e
    ctx.exit(asyncio.run(dispatch(command, args)))

