"""Selector specificity, following the Selectors Level 4 rules.

- ``#id``                                   -> (1, 0, 0)
- ``.class``, ``[attr]``, ``:pseudo-class``  -> (0, 1, 0)
- ``type``, ``::pseudo-element``            -> (0, 0, 1)
- ``*`` and the nesting selector ``&``      -> (0, 0, 0)
- ``:where(...)``                           -> (0, 0, 0)
- ``:is/:not/:matches/:has(...)``           -> the most specific argument
"""

from __future__ import annotations

from grid_inner.css.ast import ComplexSelector, CompoundSelector, SelectorList, SimpleKind, SimpleSelector
from grid_inner.css.parser import parse_selector
from grid_inner.model.specificity import ZERO, Specificity

__all__ = ["calculate", "compare_descending", "specificity_of"]

_ID = Specificity(1, 0, 0)
_CLASS = Specificity(0, 1, 0)
_TYPE = Specificity(0, 0, 1)

# CSS2 pseudo-elements may still be written with a single colon.
_LEGACY_PSEUDO_ELEMENTS = {"before", "after", "first-line", "first-letter"}
_MAX_OF_ARGUMENT = {"is", "not", "matches", "has"}


def _simple(selector: SimpleSelector) -> Specificity:
    kind = selector.kind
    if kind is SimpleKind.ID:
        return _ID
    if kind in (SimpleKind.CLASS, SimpleKind.ATTRIBUTE):
        return _CLASS
    if kind in (SimpleKind.TYPE, SimpleKind.PSEUDO_ELEMENT):
        return _TYPE
    if kind is SimpleKind.PSEUDO_CLASS:
        if selector.name == "where":
            return ZERO
        if selector.name in _MAX_OF_ARGUMENT and selector.selectors is not None:
            return specificity_of(selector.selectors)
        if selector.name in _LEGACY_PSEUDO_ELEMENTS:
            return _TYPE
        return _CLASS
    return ZERO


def specificity_of(node: SelectorList | ComplexSelector | CompoundSelector | SimpleSelector) -> Specificity:
    """Compute the specificity of a parsed selector.

    A selector list yields the specificity of its most specific member.
    """
    if isinstance(node, SelectorList):
        return max((specificity_of(s) for s in node.selectors), default=ZERO)
    if isinstance(node, ComplexSelector):
        return sum((specificity_of(c) for c in node.compounds), ZERO)
    if isinstance(node, CompoundSelector):
        return sum((_simple(p) for p in node.parts), ZERO)
    return _simple(node)


def calculate(selector: str) -> Specificity:
    """Parse *selector* and return its specificity."""
    return specificity_of(parse_selector(selector))


def compare_descending(a: Specificity, b: Specificity) -> int:
    """Comparator that sorts higher specificity first.

    Usable with ``functools.cmp_to_key``.
    """
    if a > b:
        return -1
    if a < b:
        return 1
    return 0
