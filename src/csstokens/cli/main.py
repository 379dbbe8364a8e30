"""csstokens CLI entry point: Click group with subcommands."""

import logging

import click

from csstokens import __version__


@click.group()
@click.version_option(version=__version__, prog_name="csstokens")
@click.option("-v", "--verbose", is_flag=True, help="Log extraction progress to stderr.")
def cli(verbose: bool) -> None:
    """csstokens - extract documented design tokens from CSS files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from csstokens.cli.extract import extract  # noqa: E402
from csstokens.cli.inspect import inspect  # noqa: E402

cli.add_command(extract)
cli.add_command(inspect)
