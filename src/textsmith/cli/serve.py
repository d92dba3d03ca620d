"""CLI command: textsmith serve -- run the JSON API."""

from __future__ import annotations

import click

from textsmith.config import MAX_JSON_INDENT, TextsmithConfig


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option(
    "--indent",
    default=2,
    type=click.IntRange(min=0, max=MAX_JSON_INDENT),
    help="Default JSON indent",
)
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
@click.pass_obj
def serve(
    config: TextsmithConfig | None, host: str, port: int, indent: int, debug: bool
) -> None:
    """Start the textsmith web server."""
    from textsmith.web.app import create_app

    log_level = config.log_level if config else "WARNING"
    app_config = TextsmithConfig(json_indent=indent, host=host, port=port, log_level=log_level)
    app = create_app(config=app_config)
    click.echo(f"Starting textsmith on {host}:{port}")
    app.run(host=host, port=port, debug=debug)
