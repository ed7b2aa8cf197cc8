"""CLI command: gcsst serve -- run the transmutation HTTP service."""

from __future__ import annotations

import click

from gcsst.config import GcsstConfig


@click.command()
@click.option("--host", default=GcsstConfig.host, help="Host to bind to")
@click.option("--port", default=GcsstConfig.port, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, debug: bool) -> None:
    """Start the gcsst web server."""
    from gcsst.web.app import create_app

    config = GcsstConfig(host=host, port=port)
    app = create_app()
    click.echo(f"Starting gcsst on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=debug)
