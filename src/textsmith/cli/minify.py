"""CLI command: textsmith minify -- validate, auto-correct and minify CSS."""

from __future__ import annotations

import sys

import click

from textsmith.css import run_pipeline
from textsmith.sink import FileSink, StreamSink, TextSink, deliver


@click.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write minified CSS to this file instead of stdout",
)
def minify(cssfile, output: str | None) -> None:
    """Minify a CSS file (or stdin).

    Invalid CSS gets one auto-correction attempt. Fixes and warnings go to
    stderr; exits with code 1 if the CSS is empty or still invalid.
    """
    outcome = run_pipeline(cssfile.read())

    for fix in outcome.fix_log:
        click.echo(f"  fixed: {fix}", err=True)
    for warning in outcome.warnings:
        click.echo(f"  WARNING: {warning}", err=True)

    if not outcome.succeeded:
        click.echo(f"Error: {outcome.status}", err=True)
        for error in outcome.errors:
            click.echo(f"  ERROR: {error}", err=True)
        sys.exit(1)

    sink: TextSink = FileSink(output) if output else StreamSink()
    delivery = deliver(outcome.output, sink)
    click.echo(outcome.status, err=True)
    if output or not delivery.ok:
        click.echo(delivery.message, err=True)
    sys.exit(0 if delivery.ok else 1)
