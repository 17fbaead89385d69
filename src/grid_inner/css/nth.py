"""An+B arithmetic used by the ``nth-*`` pseudo-classes."""

from __future__ import annotations

import re

from grid_inner.errors import SelectorSyntaxError

_NTH_RE = re.compile(
    r"""
    ^(?:
        (?P<a>[+-]?\d*)n (?:(?P<sign>[+-])(?P<b>\d+))?   # An+B, An, n, -n+B
      | (?P<only>[+-]?\d+)                               # B
    )$
    """,
    re.VERBOSE,
)


def parse_nth(expr: str) -> tuple[int, int]:
    """Parse an An+B expression (or ``odd``/``even``) into ``(a, b)``."""
    text = re.sub(r"\s+", "", expr).lower()
    if text == "odd":
        return 2, 1
    if text == "even":
        return 2, 0
    match = _NTH_RE.match(text)
    if match is None:
        raise SelectorSyntaxError(f"Invalid An+B expression: {expr!r}")
    if match.group("only") is not None:
        return 0, int(match.group("only"))

    a_text = match.group("a")
    if a_text in ("", "+"):
        a = 1
    elif a_text == "-":
        a = -1
    else:
        a = int(a_text)
    b = int(match.group("b") or 0)
    if match.group("sign") == "-":
        b = -b
    return a, b


def nth_matches(a: int, b: int, index: int) -> bool:
    """True if ``index`` (1-based) equals ``a*n + b`` for some integer n >= 0."""
    if a == 0:
        return index == b
    diff = index - b
    return diff % a == 0 and diff // a >= 0
