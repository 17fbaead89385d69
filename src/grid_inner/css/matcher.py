"""Structural matcher: decide selectors from sibling position alone.

Evaluates the tree-structural subset of selectors (``nth-*``, ``first-*``,
``last-*``, ``only-*``, ``:not``, ``:is``, ``:where``, sibling combinators)
for the child at a given 1-based position among ``count`` siblings. All
siblings are treated as one element type, so ``*-of-type`` pseudo-classes
behave like their ``*-child`` counterparts. A leading ``& >`` (or ``&``
followed by a descendant combinator) refers to the grid wrapper and
matches every child.
"""

from __future__ import annotations

from grid_inner.css.ast import (
    Combinator,
    ComplexSelector,
    CompoundSelector,
    SelectorList,
    SimpleKind,
    SimpleSelector,
)
from grid_inner.css.nth import nth_matches, parse_nth
from grid_inner.css.parser import parse_selector
from grid_inner.errors import UnsupportedSelectorError
from grid_inner.model.selector import NamedSelectorSet, SelectorRole

__all__ = ["classify", "matches"]

_FROM_START = {"nth-child", "nth-of-type"}
_FROM_END = {"nth-last-child", "nth-last-of-type"}


def _match_pseudo_class(selector: SimpleSelector, position: int, count: int) -> bool:
    name = selector.name
    if name in ("first-child", "first-of-type"):
        return position == 1
    if name in ("last-child", "last-of-type"):
        return position == count
    if name in ("only-child", "only-of-type"):
        return count == 1
    if name in _FROM_START or name in _FROM_END:
        a, b = parse_nth(selector.argument or "")
        index = position if name in _FROM_START else count - position + 1
        return nth_matches(a, b, index)
    if name in ("is", "matches", "where") and selector.selectors is not None:
        return _match_list(selector.selectors, position, count)
    if name == "not" and selector.selectors is not None:
        return not _match_list(selector.selectors, position, count)
    raise UnsupportedSelectorError(f"Pseudo-class :{name} depends on more than sibling position")


def _match_simple(selector: SimpleSelector, position: int, count: int) -> bool:
    if selector.kind is SimpleKind.UNIVERSAL:
        return True
    if selector.kind is SimpleKind.PSEUDO_CLASS:
        return _match_pseudo_class(selector, position, count)
    raise UnsupportedSelectorError(
        f"{selector.kind.value} selector {selector.name!r} depends on more than sibling position"
    )


def _match_compound(compound: CompoundSelector, position: int, count: int) -> bool:
    return all(_match_simple(part, position, count) for part in compound.parts)


def _match_from(selector: ComplexSelector, index: int, position: int, count: int) -> bool:
    """Match compounds[:index + 1] with compounds[index] as the subject."""
    if not _match_compound(selector.compounds[index], position, count):
        return False
    if index == 0:
        return True
    combinator = selector.combinators[index - 1]
    if combinator is Combinator.NEXT_SIBLING:
        return position > 1 and _match_from(selector, index - 1, position - 1, count)
    if combinator is Combinator.SUBSEQUENT_SIBLING:
        return any(_match_from(selector, index - 1, p, count) for p in range(1, position))
    raise UnsupportedSelectorError(f"Combinator {combinator.value!r} between siblings")


def _is_scope(compound: CompoundSelector) -> bool:
    return len(compound.parts) == 1 and compound.parts[0].kind is SimpleKind.NESTING


def _strip_scope(selector: ComplexSelector) -> ComplexSelector:
    if (
        len(selector.compounds) > 1
        and _is_scope(selector.compounds[0])
        and selector.combinators[0] in (Combinator.CHILD, Combinator.DESCENDANT)
    ):
        return ComplexSelector(
            compounds=selector.compounds[1:],
            combinators=selector.combinators[1:],
        )
    return selector


def _match_list(selectors: SelectorList, position: int, count: int) -> bool:
    for complex_selector in selectors.selectors:
        complex_selector = _strip_scope(complex_selector)
        last = len(complex_selector.compounds) - 1
        if _match_from(complex_selector, last, position, count):
            return True
    return False


def matches(selector: str, position: int, count: int) -> bool:
    """True if *selector* matches child *position* (1-based) of *count* siblings.

    Raises UnsupportedSelectorError for selectors that need more than the
    sibling position (types, classes, ids, attributes, pseudo-elements,
    dynamic pseudo-classes).
    """
    if not 1 <= position <= count:
        raise ValueError(f"position {position} is outside 1..{count}")
    return _match_list(parse_selector(selector), position, count)


def classify(selectors: NamedSelectorSet, count: int) -> list[frozenset[SelectorRole]]:
    """Return, for each of *count* children, the roles whose selector matches it."""
    return [
        frozenset(
            role for role, entry in selectors.items() if matches(entry.selector, position, count)
        )
        for position in range(1, count + 1)
    ]
