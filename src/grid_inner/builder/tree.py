"""Style tree builder: the CSS-in-JS object for one ``grid-inner`` value.

Borders are drawn as halves: every item gets a half-width border on each
side, so two neighbours add up to one full border. Edges on the outside of
the grid are removed, and where a neighbour is missing (an incomplete last
row) an ``::after`` pseudo-element draws the missing half.
"""

from __future__ import annotations

import logging
from typing import Any

from grid_inner.builder.value import normalize_border_width, parse_value
from grid_inner.equalize.strategies import equalize
from grid_inner.model.options import Target
from grid_inner.model.selector import NamedSelectorSet, SelectorRole
from grid_inner.model.value import GridValue
from grid_inner.selectors.deriver import derive_selectors

__all__ = [
    "BORDER_CUSTOM_VAR",
    "BORDER_VAR",
    "DEFAULT_BORDER",
    "StyleTree",
    "build",
    "build_grid",
    "build_reset",
    "item_key",
]

logger = logging.getLogger("grid_inner")

StyleTree = dict[str, Any]

BORDER_CUSTOM_VAR = "--tw-grid-inner-border-custom"
BORDER_VAR = "--tw-grid-inner-border"
DEFAULT_BORDER = "2px"
AFTER = "&::after"

_HALF = f"calc(var({BORDER_VAR}) / 2)"
_NEGATIVE_HALF = f"calc(var({BORDER_VAR}) / -2)"


def item_key(selector: str) -> str:
    """Nested key targeting the wrapper's children matched by *selector*."""
    return f"& > {selector}"


def build_reset(target: Target | str = Target.MODERN) -> StyleTree:
    """Styles for ``none``: cancel whatever an earlier breakpoint applied.

    Display and column tracks are left alone; plain utilities on the
    wrapper can change those.
    """
    selectors = equalize(derive_selectors(1), target)
    return {
        "marginLeft": "0px",
        "marginRight": "0px",
        item_key(selectors.selector(SelectorRole.ALL_ITEMS)): {
            "margin": "0px",
            "borderWidth": "0px",
            "borderColor": "currentcolor",
            "borderStyle": "solid",
            "gridColumn": "auto",
            "position": "static",
            AFTER: {
                "display": "none",
            },
        },
    }


def _wrapper(value: GridValue) -> StyleTree:
    styles: StyleTree = {}
    if value.border_width is not None:
        styles[BORDER_CUSTOM_VAR] = normalize_border_width(value.border_width)
    styles[BORDER_VAR] = f"var({BORDER_CUSTOM_VAR}, {DEFAULT_BORDER})"
    styles.update(
        {
            "display": "grid",
            "gap": "0px",
            "gridTemplateColumns": f"repeat({value.columns},minmax(0,1fr))",
            "marginLeft": f"calc(var({BORDER_VAR})/-2)",
            "marginRight": f"calc(var({BORDER_VAR})/-2)",
        }
    )
    return styles


def _items(selectors: NamedSelectorSet) -> StyleTree:
    # Insertion order is rule order; every key has the same specificity.
    def key(role: SelectorRole) -> str:
        return item_key(selectors.selector(role))

    return {
        # Every item: half-width borders, inherited border color, no margin.
        key(SelectorRole.ALL_ITEMS): {
            "margin": "0px",
            "borderWidth": _HALF,
            "borderColor": "inherit",
            "borderStyle": "inherit",
            "gridColumn": "span 1 / span 1",
            "position": "static",
            AFTER: {
                "display": "none",
            },
        },
        key(SelectorRole.FIRST_ROW): {
            "borderTopWidth": "0px",
        },
        # Last row: its first item, then the rest of it.
        key(SelectorRole.FIRST_IN_LAST_ROW): {
            "borderBottomWidth": "0px",
        },
        key(SelectorRole.OTHERS_IN_LAST_ROW): {
            "borderBottomWidth": "0px",
        },
        key(SelectorRole.FIRST_COL): {
            "borderLeftWidth": "0px",
            "marginLeft": f"calc(var({BORDER_VAR})/2)",
        },
        key(SelectorRole.LAST_COL): {
            "borderRightWidth": "0px",
            "marginRight": f"calc(var({BORDER_VAR})/2)",
        },
        # Last item outside the last column: double its right border.
        key(SelectorRole.LAST_IF_NOT_LAST_COL): {
            "position": "relative",
            AFTER: {
                "content": "''",
                "borderLeftWidth": _HALF,
                "borderLeftStyle": "inherit",
                "borderLeftColor": "inherit",
                "display": "block",
                "position": "absolute",
                "left": f"calc(100% + var({BORDER_VAR}) / 2)",
                "top": _NEGATIVE_HALF,
                "bottom": "0",
            },
        },
        # Second-to-last row, nothing below: double the bottom border.
        key(SelectorRole.PENULTIMATE_ROW_OVERHANGS): {
            "position": "relative",
            AFTER: {
                "content": "''",
                "borderTopWidth": _HALF,
                "borderTopStyle": "inherit",
                "borderTopColor": "inherit",
                "display": "block",
                "position": "absolute",
                "left": _NEGATIVE_HALF,
                "right": _NEGATIVE_HALF,
                "top": f"calc(100% + var({BORDER_VAR}) / 2)",
            },
        },
        key(SelectorRole.PENULTIMATE_ROW_OVERHANG_LAST_COL): {
            AFTER: {
                "right": "0",
            },
        },
    }


def build_grid(value: GridValue, target: Target | str = Target.MODERN) -> StyleTree:
    """Styles for a grid of ``value.columns`` columns."""
    selectors = equalize(derive_selectors(value.columns), target)
    styles = _wrapper(value)
    styles.update(_items(selectors))
    return styles


def build(raw_value: str, target: Target | str = Target.MODERN) -> StyleTree:
    """Build the style tree for a raw utility value such as ``"3"``, ``"3,4"`` or ``"none"``."""
    value = parse_value(raw_value)
    logger.debug(
        "grid-inner %r: columns=%d border=%s reset=%s target=%s",
        raw_value,
        value.columns,
        value.border_width,
        value.reset,
        Target.parse(target).value,
    )
    if value.reset:
        return build_reset(target)
    return build_grid(value, target)
