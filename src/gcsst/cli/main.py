"""gcsst CLI entry point: Click group with subcommands."""

import logging

import click

from gcsst import __version__


@click.group()
@click.version_option(version=__version__, prog_name="gcsst")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """gcsst - Convert CSS to Grimoire CSS spells."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from gcsst.cli.serve import serve  # noqa: E402
from gcsst.cli.transmute import transmute  # noqa: E402

cli.add_command(transmute)
cli.add_command(serve)
