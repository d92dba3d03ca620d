"""CLI commands: textsmith json format / validate."""

from __future__ import annotations

import sys

import click

from textsmith.config import MAX_JSON_INDENT, TextsmithConfig
from textsmith.jsonfmt import format_text, validate_text
from textsmith.sink import FileSink, StreamSink, TextSink, deliver


@click.group("json")
def json_group() -> None:
    """Format and validate JSON."""


@json_group.command("format")
@click.argument("jsonfile", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--indent",
    type=click.IntRange(min=0, max=MAX_JSON_INDENT),
    default=None,
    help="Indent width",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write formatted JSON to this file instead of stdout",
)
@click.pass_obj
def format_cmd(
    config: TextsmithConfig | None, jsonfile, indent: int | None, output: str | None
) -> None:
    """Pretty-print a JSON file (or stdin)."""
    if indent is None:
        indent = (config or TextsmithConfig()).json_indent

    report = format_text(jsonfile.read(), indent=indent)
    if not report.ok:
        click.echo(report.message, err=True)
        sys.exit(1)

    sink: TextSink = FileSink(output) if output else StreamSink()
    delivery = deliver(report.output, sink, label="formatted JSON")
    click.echo(report.message, err=True)
    if output or not delivery.ok:
        click.echo(delivery.message, err=True)
    sys.exit(0 if delivery.ok else 1)


@json_group.command("validate")
@click.argument("jsonfile", type=click.File("r", encoding="utf-8"), default="-")
def validate_cmd(jsonfile) -> None:
    """Check that a JSON file (or stdin) parses."""
    report = validate_text(jsonfile.read())
    click.echo(report.message, err=not report.ok)
    sys.exit(0 if report.ok else 1)
