"""Selector deriver."""

from grid_inner.selectors.deriver import ALL_ITEMS, CONSTRUCTION, dependencies, derive_selectors, raw_selectors

__all__ = ["ALL_ITEMS", "CONSTRUCTION", "dependencies", "derive_selectors", "raw_selectors"]
