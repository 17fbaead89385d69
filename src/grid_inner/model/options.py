"""Plugin configuration: equalization target and utility naming."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from grid_inner.errors import OptionsError


class Target(Enum):
    """Selector grammar the generated CSS must run on.

    MODERN browsers support ``:where()``; LEGACY ones do not, so specificity
    is equalized by padding with tautological pseudo-classes instead.
    """

    MODERN = "modern"
    LEGACY = "legacy"

    @classmethod
    def parse(cls, value: Target | str | None) -> Target:
        if value is None:
            return cls.MODERN
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(t.value for t in cls)
            raise OptionsError(
                f"Invalid target {value!r} (expected one of: {choices})"
            ) from None


@dataclass(frozen=True)
class PluginOptions:
    """Options supplied once, when the plugin is configured."""

    target: Target = Target.MODERN
    utility: str = "grid-inner"

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> PluginOptions:
        """Build options from the host's plain option dict.

        Unknown keys are rejected so typos do not silently fall back to
        defaults.
        """
        options = dict(options or {})
        unknown = sorted(set(options) - {"target", "utility"})
        if unknown:
            raise OptionsError(f"Unknown option(s): {', '.join(unknown)}")
        utility = str(options.get("utility", cls.utility)).strip()
        if not utility:
            raise OptionsError("Option 'utility' must be a non-empty string")
        return cls(target=Target.parse(options.get("target")), utility=utility)
