"""CLI command: textsmith check -- validate a CSS file without changing it."""

from __future__ import annotations

import sys

import click

from textsmith.css import strip_comments, validate
from textsmith.model.diagnostic import Severity


@click.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"), default="-")
def check(cssfile) -> None:
    """Validate a CSS file (or stdin) and print every diagnostic.

    Exits with code 0 if no errors are found, or code 1 if there are errors.
    No auto-correction is attempted.
    """
    source = cssfile.read()
    if not source.strip():
        click.echo("Error: CSS input is empty", err=True)
        sys.exit(1)

    result = validate(strip_comments(source))
    name = getattr(cssfile, "name", "<stdin>")

    if not result.diagnostics:
        click.echo(f"OK: {name} is valid (0 diagnostics)")
        sys.exit(0)

    for diag in result.diagnostics:
        click.echo(str(diag))

    errors = [d for d in result.diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in result.diagnostics if d.severity is Severity.WARNING]
    click.echo()
    click.echo(f"Summary: {len(errors)} error(s), {len(warnings)} warning(s)")

    sys.exit(1 if errors else 0)
