"""Exception types raised by grid_inner."""


class GridInnerError(Exception):
    """Base class for every error raised by this package."""


class SelectorSyntaxError(GridInnerError, ValueError):
    """Raised when a selector string cannot be parsed."""

    def __init__(self, message: str, column: int | None = None):
        self.column = column
        super().__init__(message)


class UnsupportedSelectorError(GridInnerError):
    """Raised when a selector cannot be evaluated from sibling position alone."""


class OptionsError(GridInnerError, ValueError):
    """Raised for invalid plugin options."""
