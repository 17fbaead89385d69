"""Selector deriver: structural selectors for every edge class of grid cell.

Only ``nth-child`` arithmetic is available (the number of items is unknown
when the CSS is written), so the cells that need special borders are
identified by composing a handful of base selectors:

    lastXInGrid                    :nth-last-child(-n + N)
    allItems                       :nth-child(n)
    firstCol                       :nth-child(Nn + 1)
    lastCol                        :nth-child(Nn+N)
    firstRow                       :nth-child(-n + N)
    firstInLastRow                 firstCol AND lastXInGrid
    othersInLastRow                firstInLastRow ~ *
    lastIfNotLastCol               :last-child AND NOT lastCol
    penultimateRowOverhangs        lastXInGrid AND NOT firstInLastRow AND NOT othersInLastRow
    penultimateRowOverhangLastCol  penultimateRowOverhangs AND lastCol

``lastCol`` is spelled without spaces so that, for a single column, its
text differs from ``firstCol`` even though both match every item.
"""

from __future__ import annotations

from functools import lru_cache
from string import Formatter

from grid_inner.css.specificity import calculate
from grid_inner.model.selector import NamedSelector, NamedSelectorSet, SelectorRole

__all__ = ["ALL_ITEMS", "CONSTRUCTION", "dependencies", "derive_selectors", "raw_selectors"]

# Matches every child; doubles as the tautological padding term.
ALL_ITEMS = ":nth-child(n)"

# Ordered construction list. ``{cols}`` is the column count; any other
# placeholder names an entry defined earlier in the list. Concatenating two
# entries is a logical AND on the same element.
CONSTRUCTION: tuple[tuple[str, str], ...] = (
    ("lastXInGrid", ":nth-last-child(-n + {cols})"),
    ("allItems", ALL_ITEMS),
    ("firstCol", ":nth-child({cols}n + 1)"),
    ("lastCol", ":nth-child({cols}n+{cols})"),
    ("firstRow", ":nth-child(-n + {cols})"),
    ("firstInLastRow", "{firstCol}{lastXInGrid}"),
    ("othersInLastRow", "{firstInLastRow} ~ *"),
    ("lastIfNotLastCol", ":last-child:not({lastCol})"),
    ("penultimateRowOverhangs", "{lastXInGrid}:not({firstInLastRow}):not({othersInLastRow})"),
    ("penultimateRowOverhangLastCol", "{penultimateRowOverhangs}{lastCol}"),
)


def dependencies(name: str) -> tuple[str, ...]:
    """Return the entries *name* is composed from, in template order."""
    template = dict(CONSTRUCTION)[name]
    fields = (field for _, field, _, _ in Formatter().parse(template) if field)
    return tuple(f for f in fields if f != "cols")


def _check_order() -> None:
    seen: set[str] = set()
    for name, _ in CONSTRUCTION:
        missing = [dep for dep in dependencies(name) if dep not in seen]
        if missing:
            raise RuntimeError(f"Selector {name!r} is built before {', '.join(missing)}")
        seen.add(name)


_check_order()


def raw_selectors(cols: int) -> dict[str, str]:
    """Build every entry of the construction list for *cols* columns."""
    if cols < 1:
        raise ValueError(f"Column count must be >= 1, got {cols}")
    built: dict[str, str] = {}
    for name, template in CONSTRUCTION:
        built[name] = template.format(cols=cols, **built)
    return built


@lru_cache(maxsize=64)
def derive_selectors(cols: int) -> NamedSelectorSet:
    """Derive the nine role selectors for a grid of *cols* columns."""
    built = raw_selectors(cols)
    return NamedSelectorSet(
        NamedSelector(role=role, selector=built[role.value], specificity=calculate(built[role.value]))
        for role in SelectorRole
    )
