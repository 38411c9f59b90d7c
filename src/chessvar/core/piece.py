"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessvar.core.enums import Color, Shape
from chessvar.core.types import Location

_LETTERS: dict[Shape, str] = {
    Shape.PAWN: "P",
    Shape.ROOK: "R",
    Shape.KNIGHT: "N",
    Shape.BISHOP: "B",
    Shape.QUEEN: "Q",
    Shape.KING: "K",
}

_UNICODE: dict[tuple[Color, Shape], str] = {
    (Color.WHITE, Shape.PAWN): "♙",
    (Color.WHITE, Shape.ROOK): "♖",
    (Color.WHITE, Shape.KNIGHT): "♘",
    (Color.WHITE, Shape.BISHOP): "♗",
    (Color.WHITE, Shape.QUEEN): "♕",
    (Color.WHITE, Shape.KING): "♔",
    (Color.BLACK, Shape.PAWN): "♟",
    (Color.BLACK, Shape.ROOK): "♜",
    (Color.BLACK, Shape.KNIGHT): "♞",
    (Color.BLACK, Shape.BISHOP): "♝",
    (Color.BLACK, Shape.QUEEN): "♛",
    (Color.BLACK, Shape.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a piece of some color and shape on a location.

    Two pieces with the same color and shape are told apart only by where
    they stand, which is why a board holds at most one piece per location.
    """

    color: Color
    shape: Shape
    location: Location

    def moved_to(self, location: Location) -> Piece:
        """Copy of this piece standing on *location*."""
        return replace(self, location=location)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """One-letter code (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.shape]
        return letter if self.color == Color.WHITE else letter.lower()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.shape)]
