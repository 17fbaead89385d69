"""grid_inner model layer -- public type re-exports."""

from grid_inner.model.options import PluginOptions, Target
from grid_inner.model.selector import NamedSelector, NamedSelectorSet, SelectorRole
from grid_inner.model.specificity import Specificity
from grid_inner.model.value import GridValue

__all__ = [
    # selector
    "SelectorRole",
    "NamedSelector",
    "NamedSelectorSet",
    # specificity
    "Specificity",
    # options
    "Target",
    "PluginOptions",
    # value
    "GridValue",
]
