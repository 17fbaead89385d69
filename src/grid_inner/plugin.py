"""Host-facing plugin: options, default values and utility generation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from grid_inner.builder.tree import StyleTree, build
from grid_inner.model.options import PluginOptions

__all__ = ["DEFAULT_VALUES", "GridInnerPlugin"]

logger = logging.getLogger("grid_inner")

# The same keys the framework's grid-template-columns utilities offer.
DEFAULT_VALUES: dict[str, str] = {
    **{str(n): str(n) for n in range(1, 13)},
    "none": "none",
}


class GridInnerPlugin:
    """Generates ``grid-inner-*`` utilities for one plugin configuration.

    Usage::

        plugin = GridInnerPlugin.from_mapping({"target": "legacy"})
        plugin("3")            # style tree for grid-inner-3
        plugin.utilities()     # {"grid-inner-1": {...}, ..., "grid-inner-none": {...}}
    """

    def __init__(self, options: PluginOptions | None = None):
        self.options = options or PluginOptions()
        logger.debug("grid-inner plugin configured: target=%s", self.options.target.value)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> GridInnerPlugin:
        return cls(PluginOptions.from_mapping(options))

    def __call__(self, value: str) -> StyleTree:
        return build(value, self.options.target)

    def class_name(self, key: str) -> str:
        return f"{self.options.utility}-{key}"

    def utilities(self, values: Mapping[str, str] | None = None) -> dict[str, StyleTree]:
        """Style trees for every value, keyed by utility class name."""
        values = DEFAULT_VALUES if values is None else values
        return {self.class_name(key): self(value) for key, value in values.items()}
