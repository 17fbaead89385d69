"""Style tree builder."""

from grid_inner.builder.tree import (
    BORDER_CUSTOM_VAR,
    BORDER_VAR,
    DEFAULT_BORDER,
    StyleTree,
    build,
    build_grid,
    build_reset,
    item_key,
)
from grid_inner.builder.value import normalize_border_width, parse_int, parse_value

__all__ = [
    "BORDER_CUSTOM_VAR",
    "BORDER_VAR",
    "DEFAULT_BORDER",
    "StyleTree",
    "build",
    "build_grid",
    "build_reset",
    "item_key",
    "normalize_border_width",
    "parse_int",
    "parse_value",
]
