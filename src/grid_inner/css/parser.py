"""Lark-based selector parser producing the selector AST."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from grid_inner.css.ast import (
    Combinator,
    ComplexSelector,
    CompoundSelector,
    SelectorList,
    SimpleKind,
    SimpleSelector,
)
from grid_inner.errors import SelectorSyntaxError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_WHITESPACE_RE = re.compile(r"\s+")
# Whitespace around these characters is insignificant.
_PUNCTUATION_RE = re.compile(r"\s*([>+~,])\s*")
_OPEN_RE = re.compile(r"\(\s+")
_CLOSE_RE = re.compile(r"\s+\)")


def normalize_selector(text: str) -> str:
    """Collapse insignificant whitespace so only descendant combinators remain."""
    collapsed = _WHITESPACE_RE.sub(" ", text.strip())
    collapsed = _PUNCTUATION_RE.sub(r"\1", collapsed)
    return _CLOSE_RE.sub(")", _OPEN_RE.sub("(", collapsed))


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into selector AST nodes."""

    def start(self, items: list[SelectorList]) -> SelectorList:
        return items[0]

    def selector_list(self, items: list[ComplexSelector]) -> SelectorList:
        return SelectorList(selectors=tuple(items))

    def complex_selector(self, items: list[object]) -> ComplexSelector:
        # Items alternate: compound, combinator, compound, ...
        return ComplexSelector(
            compounds=tuple(items[0::2]),  # type: ignore[arg-type]
            combinators=tuple(items[1::2]),  # type: ignore[arg-type]
        )

    def combinator(self, items: list[Token]) -> Combinator:
        return Combinator(str(items[0]))

    def compound_selector(self, items: list[SimpleSelector]) -> CompoundSelector:
        return CompoundSelector(parts=tuple(items))

    # ---- simple selectors ----

    def nesting(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind=SimpleKind.NESTING, name="&")

    def universal(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind=SimpleKind.UNIVERSAL, name="*")

    def type_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind=SimpleKind.TYPE, name=str(items[0]).lower())

    def id_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind=SimpleKind.ID, name=str(items[0]))

    def class_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind=SimpleKind.CLASS, name=str(items[0]))

    def attribute_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind=SimpleKind.ATTRIBUTE, name=str(items[0]).strip())

    def plain_pseudo_class(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind=SimpleKind.PSEUDO_CLASS, name=str(items[0]).lower())

    def nth_pseudo_class(self, items: list[Token]) -> SimpleSelector:
        # The function token carries its opening parenthesis.
        return SimpleSelector(
            kind=SimpleKind.PSEUDO_CLASS,
            name=str(items[0])[:-1].lower(),
            argument=str(items[1]).strip(),
        )

    def list_pseudo_class(self, items: list[object]) -> SimpleSelector:
        return SimpleSelector(
            kind=SimpleKind.PSEUDO_CLASS,
            name=str(items[0])[:-1].lower(),
            selectors=items[1],  # type: ignore[arg-type]
        )

    def pseudo_element(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind=SimpleKind.PSEUDO_ELEMENT, name=str(items[0]).lower())


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )


@lru_cache(maxsize=1024)
def parse_selector(text: str) -> SelectorList:
    """Parse a selector (or comma-separated selector list) into an AST.

    Raises SelectorSyntaxError when *text* is not a selector this grammar
    understands.
    """
    normalized = normalize_selector(text)
    if not normalized:
        raise SelectorSyntaxError("Empty selector")
    try:
        tree = _parser().parse(normalized)
    except LarkError as e:
        column = getattr(e, "column", None)
        raise SelectorSyntaxError(f"Invalid selector {text!r}: {e}", column=column) from e
    return SelectorTransformer().transform(tree)
