"""
Exceptions raised by the Othello engine.
"""


class OthelloError(ValueError):
    """Base class for engine errors."""


class InvalidCoordinate(OthelloError):
    """Raised when a (row, col) pair lies outside the 8x8 board."""

    def __init__(self, row, col):
        self.row = row
        self.col = col
        super().__init__(f"Coordinate ({row!r}, {col!r}) is outside the 8x8 board")
