"""CLI command: figma-converter fetch -- look up a Figma design file."""

from __future__ import annotations

import json
import os
import sys

import click

from figma_converter.config import ConverterConfig
from figma_converter.errors import ConverterError
from figma_converter.figma_client import FigmaClient
from figma_converter.validation import extract_file_id, validate_figma_token, validate_figma_url


@click.command()
@click.argument("url")
@click.option(
    "--token",
    default=lambda: os.environ.get("FIGMA_TOKEN", ""),
    help="Figma personal access token (defaults to $FIGMA_TOKEN)",
)
@click.option("--raw", is_flag=True, help="Print the full file JSON")
def fetch(url: str, token: str, raw: bool) -> None:
    """Fetch a Figma file by URL and list its pages."""
    if not validate_figma_url(url):
        click.echo(f"Not a Figma file URL: {url}", err=True)
        sys.exit(1)
    if not validate_figma_token(token):
        click.echo("A Figma token starting with 'figd_' is required", err=True)
        sys.exit(1)

    file_id = extract_file_id(url)
    config = ConverterConfig.from_env()
    try:
        with FigmaClient(token, base_url=config.figma_api_base, timeout=config.figma_timeout) as client:
            document = client.get_file(file_id)
    except ConverterError as exc:
        click.echo(f"Error [{exc.code}]: {exc}", err=True)
        click.echo(exc.user_action, err=True)
        sys.exit(1)

    if raw:
        click.echo(json.dumps(document, indent=2))
        return

    click.echo(f"File: {document.get('name', file_id)}")
    pages = document.get("document", {}).get("children", [])
    click.echo(f"Pages ({len(pages)}):")
    for page in pages:
        click.echo(f"  {page.get('name', '?')} ({len(page.get('children', []))} frames)")
