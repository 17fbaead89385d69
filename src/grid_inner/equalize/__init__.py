"""Specificity equalizer."""

from grid_inner.equalize.strategies import (
    STRATEGIES,
    Equalizer,
    equalize,
    max_specificity,
    pad_repetition,
    padding_needed,
    wrap_uniform,
)

__all__ = [
    "Equalizer",
    "STRATEGIES",
    "equalize",
    "max_specificity",
    "pad_repetition",
    "padding_needed",
    "wrap_uniform",
]
