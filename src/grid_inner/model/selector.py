"""Selector model: the nine edge-class roles and their selectors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum

from grid_inner.model.specificity import Specificity


class SelectorRole(Enum):
    """Geometric class of grid cell a selector identifies.

    Declaration order is the order rules are emitted in.
    """

    ALL_ITEMS = "allItems"
    FIRST_ROW = "firstRow"
    FIRST_IN_LAST_ROW = "firstInLastRow"
    OTHERS_IN_LAST_ROW = "othersInLastRow"
    FIRST_COL = "firstCol"
    LAST_COL = "lastCol"
    LAST_IF_NOT_LAST_COL = "lastIfNotLastCol"
    PENULTIMATE_ROW_OVERHANGS = "penultimateRowOverhangs"
    PENULTIMATE_ROW_OVERHANG_LAST_COL = "penultimateRowOverhangLastCol"


@dataclass(frozen=True)
class NamedSelector:
    """A selector string bound to the role it plays."""

    role: SelectorRole
    selector: str
    specificity: Specificity


class NamedSelectorSet(Mapping[SelectorRole, NamedSelector]):
    """Immutable role -> selector mapping holding all nine roles.

    Entries are keyed by role, so two roles whose selectors happen to
    coincide (``firstCol`` and ``lastCol`` with one column) stay distinct.
    """

    def __init__(self, entries: Iterable[NamedSelector]):
        by_role: dict[SelectorRole, NamedSelector] = {}
        for entry in entries:
            if entry.role in by_role:
                raise ValueError(f"Duplicate selector role: {entry.role.value}")
            by_role[entry.role] = entry
        missing = [role.value for role in SelectorRole if role not in by_role]
        if missing:
            raise ValueError(f"Missing selector roles: {', '.join(missing)}")
        self._entries = {role: by_role[role] for role in SelectorRole}

    def __getitem__(self, role: SelectorRole) -> NamedSelector:
        return self._entries[role]

    def __iter__(self) -> Iterator[SelectorRole]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        inner = ", ".join(f"{r.value}={e.selector!r}" for r, e in self._entries.items())
        return f"NamedSelectorSet({inner})"

    def selector(self, role: SelectorRole) -> str:
        """Return the selector string for *role*."""
        return self._entries[role].selector

    def specificities(self) -> set[Specificity]:
        """Return the distinct specificities present in the set."""
        return {entry.specificity for entry in self._entries.values()}

    @property
    def is_uniform(self) -> bool:
        """True when every selector shares a single specificity."""
        return len(self.specificities()) == 1
