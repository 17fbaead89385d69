"""Specificity equalizer: give every role selector the same specificity.

Responsive variants re-apply the grid-inner rules inside a later media
query. A cell that was, say, in the last column at one breakpoint may be in
the first column at the next, so every edge-case rule must be overridable
by any later one. Once all item rules share a single specificity, source
order alone decides which one wins.

Two strategies, selected by ``Target``:

- ``wrap_uniform`` (modern): wrap each selector in ``:where()``, which
  contributes no specificity.
- ``pad_repetition`` (legacy): prepend copies of ``:nth-child(n)``, which
  matches every element, until each selector reaches the highest
  specificity any role selector can have.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import cmp_to_key, lru_cache

from grid_inner.css.specificity import calculate, compare_descending
from grid_inner.model.options import Target
from grid_inner.model.selector import NamedSelector, NamedSelectorSet
from grid_inner.model.specificity import Specificity
from grid_inner.selectors.deriver import ALL_ITEMS, derive_selectors

__all__ = [
    "Equalizer",
    "STRATEGIES",
    "equalize",
    "max_specificity",
    "pad_repetition",
    "padding_needed",
    "wrap_uniform",
]

logger = logging.getLogger("grid_inner")

Equalizer = Callable[[NamedSelectorSet], NamedSelectorSet]


def _rewrite(entry: NamedSelector, selector: str) -> NamedSelector:
    return NamedSelector(role=entry.role, selector=selector, specificity=calculate(selector))


def wrap_uniform(selectors: NamedSelectorSet) -> NamedSelectorSet:
    """Wrap every selector in ``:where()``."""
    return NamedSelectorSet(_rewrite(entry, f":where({entry.selector})") for entry in selectors.values())


@lru_cache(maxsize=1)
def max_specificity() -> Specificity:
    """Highest specificity among the role selectors, for any column count.

    The selector shapes do not depend on the column count, so the
    single-column derivation is representative.
    """
    ceiling = sorted(
        (entry.specificity for entry in derive_selectors(1).values()),
        key=cmp_to_key(compare_descending),
    )[0]
    logger.debug("Legacy padding ceiling: %s", ceiling)
    return ceiling


def padding_needed(specificity: Specificity, ceiling: Specificity) -> int:
    """Number of pseudo-class terms that lift *specificity* to *ceiling*."""
    if specificity.ids != ceiling.ids or specificity.types != ceiling.types:
        raise ValueError(
            f"Cannot pad {specificity} to {ceiling} with pseudo-classes alone"
        )
    if specificity.classes > ceiling.classes:
        raise ValueError(f"Specificity {specificity} already exceeds {ceiling}")
    return ceiling.classes - specificity.classes


def pad_repetition(selectors: NamedSelectorSet) -> NamedSelectorSet:
    """Prepend ``:nth-child(n)`` terms until every selector hits the ceiling."""
    ceiling = max_specificity()
    return NamedSelectorSet(
        _rewrite(entry, ALL_ITEMS * padding_needed(entry.specificity, ceiling) + entry.selector)
        for entry in selectors.values()
    )


STRATEGIES: dict[Target, Equalizer] = {
    Target.MODERN: wrap_uniform,
    Target.LEGACY: pad_repetition,
}


def equalize(selectors: NamedSelectorSet, target: Target | str = Target.MODERN) -> NamedSelectorSet:
    """Rewrite *selectors* with the strategy for *target*."""
    return STRATEGIES[Target.parse(target)](selectors)
