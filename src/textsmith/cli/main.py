"""textsmith CLI entry point: Click group with subcommands."""

import click

from textsmith import __version__
from textsmith.config import TextsmithConfig


@click.group()
@click.version_option(version=__version__, prog_name="textsmith")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """textsmith - validate, auto-correct and minify CSS; format JSON."""
    config = TextsmithConfig(log_level=log_level.upper())
    config.configure_logging()
    ctx.obj = config


# Import and register subcommands
from textsmith.cli.check import check  # noqa: E402
from textsmith.cli.json_cmd import json_group  # noqa: E402
from textsmith.cli.minify import minify  # noqa: E402
from textsmith.cli.serve import serve  # noqa: E402

cli.add_command(minify)
cli.add_command(check)
cli.add_command(json_group)
cli.add_command(serve)
