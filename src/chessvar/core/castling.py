"""Castle-eligibility bookkeeping.

The core never executes castling; it only remembers whether a king or one of
its rooks has left its home square, which a move-application layer records
as it applies moves.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from chessvar.core.enums import Color, Shape
from chessvar.core.piece import Piece
from chessvar.core.types import MAX_FILE, MIN_FILE, back_rank

KING_HOME_FILE = 0
KINGSIDE_ROOK_FILE = MAX_FILE
QUEENSIDE_ROOK_FILE = MIN_FILE


@dataclass(slots=True)
class CastleDataEntry:
    """Per-color flags. Set once, never reset."""

    king_moved: bool = False
    kingside_rook_moved: bool = False
    queenside_rook_moved: bool = False


@dataclass(slots=True)
class CastleData:
    white: CastleDataEntry = field(default_factory=CastleDataEntry)
    black: CastleDataEntry = field(default_factory=CastleDataEntry)

    def for_color(self, color: Color) -> CastleDataEntry:
        """Live entry for *color*; mutations through it are kept."""
        return self.white if color == Color.WHITE else self.black

    def record_departure(self, piece: Piece) -> None:
        """Note that *piece* is about to leave the square it stands on.

        Only a king or rook leaving its home square changes anything.
        """
        location = piece.location
        if location.rank != back_rank(piece.color):
            return
        entry = self.for_color(piece.color)
        if piece.shape == Shape.KING and location.file == KING_HOME_FILE:
            entry.king_moved = True
        elif piece.shape == Shape.ROOK:
            if location.file == KINGSIDE_ROOK_FILE:
                entry.kingside_rook_moved = True
            elif location.file == QUEENSIDE_ROOK_FILE:
                entry.queenside_rook_moved = True

    def copy(self) -> CastleData:
        return CastleData(
            CastleDataEntry(
                self.white.king_moved,
                self.white.kingside_rook_moved,
                self.white.queenside_rook_moved,
            ),
            CastleDataEntry(
                self.black.king_moved,
                self.black.kingside_rook_moved,
                self.black.queenside_rook_moved,
            ),
        )
