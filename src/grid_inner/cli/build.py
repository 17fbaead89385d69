"""CLI commands: grid-inner build / utilities -- print style trees as JSON."""

from __future__ import annotations

import json

import click

from grid_inner.builder import build as build_tree
from grid_inner.model.options import PluginOptions, Target
from grid_inner.plugin import GridInnerPlugin

TARGET_OPTION = click.option(
    "--target",
    type=click.Choice([t.value for t in Target]),
    default=Target.MODERN.value,
    show_default=True,
    help="Selector grammar to equalize specificity for",
)


@click.command()
@click.argument("value")
@TARGET_OPTION
@click.option("--indent", default=2, type=click.IntRange(min=0), show_default=True, help="JSON indent")
def build(value: str, target: str, indent: int) -> None:
    """Print the style tree for VALUE ("3", "3,4" or "none") as JSON."""
    click.echo(json.dumps(build_tree(value, Target(target)), indent=indent))


@click.command()
@TARGET_OPTION
@click.option("--utility", default="grid-inner", show_default=True, help="Utility class prefix")
def utilities(target: str, utility: str) -> None:
    """Print every default grid-inner utility as JSON."""
    plugin = GridInnerPlugin(PluginOptions(target=Target(target), utility=utility))
    click.echo(json.dumps(plugin.utilities(), indent=2))
