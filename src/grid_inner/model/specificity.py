"""Specificity model: the (ids, classes, types) weight of a selector."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Specificity:
    """Selector specificity, ordered by the highest-weight component first.

    Attributes:
        ids: Number of id selectors.
        classes: Number of class, attribute and pseudo-class selectors.
        types: Number of type selectors and pseudo-elements.
    """

    ids: int = 0
    classes: int = 0
    types: int = 0

    def __add__(self, other: Specificity) -> Specificity:
        if not isinstance(other, Specificity):
            return NotImplemented
        return Specificity(
            self.ids + other.ids,
            self.classes + other.classes,
            self.types + other.types,
        )

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.ids, self.classes, self.types)

    def __str__(self) -> str:
        return f"({self.ids},{self.classes},{self.types})"


ZERO = Specificity()
