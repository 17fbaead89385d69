"""Parsing of ``grid-inner`` utility values: ``"<cols>"``, ``"<cols>,<px>"``, ``"none"``."""

from __future__ import annotations

import logging
import math
import re

from grid_inner.model.value import GridValue

__all__ = ["RESET_VALUE", "SEPARATOR", "normalize_border_width", "parse_int", "parse_value"]

logger = logging.getLogger("grid_inner")

RESET_VALUE = "none"
SEPARATOR = ","

# Leading integer, as JavaScript's parseInt reads it ("3px" -> 3).
_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_int(token: str) -> int | None:
    """Return the leading integer of *token*, or None if there is none."""
    match = _INT_RE.match(token)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Longer than the interpreter allows converting.
        return None


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def normalize_border_width(width: int) -> str:
    """Round *width* to the nearest even pixel count and format it.

    Each side of a cell draws half the width, so the full width must be
    even for adjacent halves to add up to it.
    """
    return f"{abs(2 * _round_half_up(width / 2))}px"


def parse_value(raw: str) -> GridValue:
    """Parse a raw utility value; never raises.

    Unparseable or non-positive column counts fall back to 1. A missing,
    unparseable or zero border width leaves the default border in place.
    """
    if raw.strip().lower() == RESET_VALUE:
        return GridValue(reset=True)

    cols_token, _, rest = raw.partition(SEPARATOR)
    width_token = rest.split(SEPARATOR, 1)[0]

    columns = parse_int(cols_token)
    if columns is None or columns < 1:
        logger.debug("Column count %r is not a positive integer; using 1", cols_token)
        columns = 1

    border_width = parse_int(width_token) if width_token.strip() else None
    if border_width is None and width_token.strip():
        logger.debug("Ignoring unparseable border width %r", width_token)
    if border_width == 0:
        border_width = None

    return GridValue(columns=columns, border_width=border_width)
