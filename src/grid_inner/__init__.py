"""grid-inner: single-weight borders between CSS grid cells.

Derives structural ``nth-child`` selectors for every edge class of grid cell,
equalizes their specificity, and assembles the style tree for a
``grid-inner-<cols>`` utility.
"""

__version__ = "0.3.0"

from grid_inner.builder import build  # noqa: E402
from grid_inner.equalize import equalize  # noqa: E402
from grid_inner.model import (  # noqa: E402
    GridValue,
    NamedSelector,
    NamedSelectorSet,
    PluginOptions,
    SelectorRole,
    Target,
)
from grid_inner.plugin import DEFAULT_VALUES, GridInnerPlugin  # noqa: E402
from grid_inner.selectors import derive_selectors  # noqa: E402

__all__ = [
    "__version__",
    "build",
    "derive_selectors",
    "equalize",
    "GridInnerPlugin",
    "DEFAULT_VALUES",
    "GridValue",
    "NamedSelector",
    "NamedSelectorSet",
    "PluginOptions",
    "SelectorRole",
    "Target",
]
