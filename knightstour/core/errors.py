"""Exception hierarchy shared by the solver, the glue and the CLI."""

from __future__ import annotations

from .model import MIN_BORDER, MIN_SIZE


class KnightsTourError(Exception):
    """Base class for every error raised by the package."""


class InvalidSizeError(KnightsTourError, ValueError):
    def __init__(self, size) -> None:
        super().__init__(f"board size must be an integer >= {MIN_SIZE}, got {size!r}")
        self.size = size


class InvalidBorderError(KnightsTourError, ValueError):
    def __init__(self, border) -> None:
        super().__init__(f"border width must be an integer >= {MIN_BORDER}, got {border!r}")
        self.border = border


class SearchPreconditionError(KnightsTourError, ValueError):
    """The board handed to the search is not in its required starting state."""


class TourValidationError(KnightsTourError):
    """A filled board does not describe a valid open tour."""


class ConfigError(KnightsTourError):
    """A run configuration is malformed."""
