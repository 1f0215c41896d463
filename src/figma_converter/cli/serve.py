"""CLI command: figma-converter serve -- run the HTTP API."""

from __future__ import annotations

import click

from figma_converter.config import ConverterConfig


@click.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--db", default=None, help="Database path")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str | None, port: int | None, db: str | None, debug: bool) -> None:
    """Start the Figma Converter web server."""
    from dataclasses import replace

    from figma_converter.store.db import Database
    from figma_converter.store.migrations import run_migrations
    from figma_converter.web.app import create_app

    config = ConverterConfig.from_env()
    config = replace(
        config,
        host=host or config.host,
        port=port or config.port,
        db_path=db or config.db_path,
    )
    database = Database(config.db_path).connect()
    run_migrations(database)

    app = create_app(db=database, config=config)
    click.echo(f"Starting Figma Converter on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=debug)
