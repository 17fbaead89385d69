"""grid-inner CLI entry point: Click group with subcommands."""

import logging

import click

from grid_inner import __version__


@click.group()
@click.version_option(version=__version__, prog_name="grid-inner")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """grid-inner - single-weight borders between CSS grid cells."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from grid_inner.cli.build import build, utilities  # noqa: E402
from grid_inner.cli.preview import preview  # noqa: E402
from grid_inner.cli.selectors import selectors  # noqa: E402

cli.add_command(build)
cli.add_command(utilities)
cli.add_command(selectors)
cli.add_command(preview)
