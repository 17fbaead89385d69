"""CLI command: grid-inner preview -- which edge rules each cell receives."""

from __future__ import annotations

import click

from grid_inner.builder import parse_value
from grid_inner.cli.build import TARGET_OPTION
from grid_inner.css import classify
from grid_inner.equalize import equalize
from grid_inner.model.options import Target
from grid_inner.model.selector import SelectorRole
from grid_inner.selectors import derive_selectors


@click.command()
@click.argument("value")
@click.option("--items", "-n", required=True, type=click.IntRange(min=1), help="Number of grid items")
@TARGET_OPTION
def preview(value: str, items: int, target: str) -> None:
    """Show, for a grid of ITEMS children, the rules matching each cell.

    Rules are listed in the order they are emitted; later rules win.
    """
    parsed = parse_value(value)
    if parsed.reset:
        click.echo("none: grid-inner styling is reset for every item")
        return

    cols = parsed.columns
    named = equalize(derive_selectors(cols), Target(target))
    roles_by_cell = classify(named, items)

    click.echo(f"{cols} column(s), {items} item(s), target={target}")
    click.echo()
    for position, roles in enumerate(roles_by_cell, start=1):
        row, col = divmod(position - 1, cols)
        matched = [r.value for r in SelectorRole if r in roles and r is not SelectorRole.ALL_ITEMS]
        click.echo(f"{position:>4}  row {row + 1}, col {col + 1}: {', '.join(matched) or '-'}")
