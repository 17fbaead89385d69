"""Selector AST produced by the selector parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SimpleKind(Enum):
    NESTING = "nesting"
    UNIVERSAL = "universal"
    TYPE = "type"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"


class Combinator(Enum):
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"
    DESCENDANT = " "


@dataclass(frozen=True)
class SimpleSelector:
    """One simple selector, e.g. ``*``, ``.card`` or ``:nth-child(2n + 1)``.

    ``argument`` holds the raw An+B text of ``nth-*`` pseudo-classes and
    ``selectors`` the argument list of ``:not()``, ``:is()`` and friends.
    """

    kind: SimpleKind
    name: str = ""
    argument: str | None = None
    selectors: SelectorList | None = None


@dataclass(frozen=True)
class CompoundSelector:
    """Simple selectors that must all match the same element."""

    parts: tuple[SimpleSelector, ...]


@dataclass(frozen=True)
class ComplexSelector:
    """Compound selectors joined by combinators, subject last."""

    compounds: tuple[CompoundSelector, ...]
    combinators: tuple[Combinator, ...] = ()

    def __post_init__(self) -> None:
        if len(self.combinators) != len(self.compounds) - 1:
            raise ValueError("ComplexSelector needs one combinator between each compound")


@dataclass(frozen=True)
class SelectorList:
    """A comma-separated list of complex selectors."""

    selectors: tuple[ComplexSelector, ...]
