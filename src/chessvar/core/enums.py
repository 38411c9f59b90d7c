"""Core enumerations for the rules domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def other(self) -> Color:
        """The opposing side."""
        return self.opposite

    def __str__(self) -> str:
        return self.name.lower()


class Shape(IntEnum):
    """Piece kinds. Closed set."""

    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6
