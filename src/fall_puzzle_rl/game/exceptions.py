from __future__ import annotations


class FallPuzzleError(Exception):
    """Base class for errors raised by the simulation core."""


class LevelError(FallPuzzleError):
    """Raised when level data cannot be turned into a grid."""


class UnknownTileCodeError(LevelError):
    def __init__(self, code: object, x: int | None = None, y: int | None = None) -> None:
        self.code = code
        self.x = x
        self.y = y
        where = f" at ({x}, {y})" if x is not None and y is not None else ""
        super().__init__(f"Unknown tile code {code!r}{where}")


class LevelShapeError(LevelError):
    """Raised for empty levels or rows of differing width."""


class PlayerStartError(LevelError):
    """Raised when a level does not hold exactly one player start."""


class GridBoundsError(FallPuzzleError, IndexError):
    """Raised when a move, drop or push reaches outside the grid."""


class InvalidCommandError(FallPuzzleError, ValueError):
    """Raised when something other than a Direction is queued."""
