"""CLI command: grid-inner selectors -- show the equalized role selectors."""

from __future__ import annotations

import click

from grid_inner.cli.build import TARGET_OPTION
from grid_inner.equalize import equalize
from grid_inner.model.options import Target
from grid_inner.selectors import derive_selectors


@click.command()
@click.argument("cols", type=click.IntRange(min=1))
@TARGET_OPTION
@click.option("--raw", is_flag=True, help="Show the selectors before equalization")
def selectors(cols: int, target: str, raw: bool) -> None:
    """Show each role's selector and specificity for COLS columns."""
    named = derive_selectors(cols)
    if not raw:
        named = equalize(named, Target(target))

    width = max(len(role.value) for role in named)
    for role, entry in named.items():
        click.echo(f"{role.value:<{width}}  {entry.specificity}  {entry.selector}")

    if not named.is_uniform:
        click.echo()
        click.echo(f"{len(named.specificities())} distinct specificities")
