"""Exception types raised by the minefield core."""


class MinefieldError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(MinefieldError, ValueError):
    """The requested game cannot be generated (bad dimensions or too many mines)."""


class InvalidPositionError(MinefieldError, ValueError):
    """A coordinate outside the grid was passed to the core."""

    def __init__(self, x: object, y: object, width: int, height: int) -> None:
        super().__init__(
            f"Cell ({x}, {y}) is outside the {width}x{height} grid."
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class PlacementError(MinefieldError, RuntimeError):
    """Rejection sampling could not find a free position."""
