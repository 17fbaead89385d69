"""Selector parsing, specificity and structural matching."""

from grid_inner.css.ast import (
    Combinator,
    ComplexSelector,
    CompoundSelector,
    SelectorList,
    SimpleKind,
    SimpleSelector,
)
from grid_inner.css.matcher import classify, matches
from grid_inner.css.nth import nth_matches, parse_nth
from grid_inner.css.parser import normalize_selector, parse_selector
from grid_inner.css.specificity import calculate, compare_descending, specificity_of

__all__ = [
    "parse_selector",
    "normalize_selector",
    "calculate",
    "compare_descending",
    "specificity_of",
    "parse_nth",
    "nth_matches",
    "matches",
    "classify",
    "SelectorList",
    "ComplexSelector",
    "CompoundSelector",
    "SimpleSelector",
    "SimpleKind",
    "Combinator",
]
