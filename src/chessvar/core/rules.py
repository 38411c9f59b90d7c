"""Check detection on top of attacker enumeration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessvar.core.enums import Color

if TYPE_CHECKING:
    from chessvar.core.board import Board, BoardPiece
    from chessvar.core.types import Location


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Whose turn it is, mate and draw detection belong to the layer above.
    """

    @staticmethod
    def is_square_attacked(board: Board, location: Location, by_color: Color) -> bool:
        return board.is_attacked(location, by_color)

    @staticmethod
    def checkers(board: Board, color: Color) -> list[BoardPiece]:
        """Opposing pieces giving check to *color*'s king."""
        return board.find_attackers_of(
            board.king_location(color), False, color.other()
        )

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return board.is_attacked(board.king_location(color), color.other())

    @staticmethod
    def is_legal(piece: BoardPiece, destination: Location) -> bool:
        """Whether *piece* may move to *destination*.

        Besides king safety this rejects landing on a friendly piece, which
        :meth:`BoardPiece.move_sight` reports as seen (it is defended).
        """
        sight = piece.move_sight(destination, True)
        if not sight.is_legal():
            return False
        target = sight.piece_at()
        return target is None or target.color != piece.color
