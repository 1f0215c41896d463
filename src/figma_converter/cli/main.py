"""figma-converter CLI entry point: Click group with subcommands."""

import logging

import click

from figma_converter import __version__


@click.group()
@click.version_option(version=__version__, prog_name="figma-converter")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Figma Converter - turn Figma CSS exports into React components."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from figma_converter.cli.convert import convert  # noqa: E402
from figma_converter.cli.fetch import fetch  # noqa: E402
from figma_converter.cli.inspect import inspect  # noqa: E402
from figma_converter.cli.serve import serve  # noqa: E402

cli.add_command(convert)
cli.add_command(fetch)
cli.add_command(inspect)
cli.add_command(serve)
