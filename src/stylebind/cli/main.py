"""stylebind CLI entry point: Click group with subcommands."""

import logging

import click

from stylebind import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylebind")
@click.option("--verbose", "-v", is_flag=True, help="Log rule registrations to stderr.")
def cli(verbose: bool) -> None:
    """stylebind - declarative stylesheets with generated class names."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from stylebind.cli.render import render  # noqa: E402
from stylebind.cli.inspect import inspect  # noqa: E402

cli.add_command(render)
cli.add_command(inspect)
