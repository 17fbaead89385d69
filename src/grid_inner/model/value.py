"""Parsed form of a ``grid-inner`` utility value."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GridValue:
    """A utility value such as ``"3"``, ``"3,4"`` or ``"none"``.

    Attributes:
        columns: Column count, always >= 1.
        border_width: Requested border width in px, or None for the default.
        reset: True for ``"none"``, which cancels earlier grid-inner styling.
    """

    columns: int = 1
    border_width: int | None = None
    reset: bool = False

    def __post_init__(self) -> None:
        if self.columns < 1:
            raise ValueError("GridValue columns must be >= 1")
