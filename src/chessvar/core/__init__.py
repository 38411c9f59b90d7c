"""Rules core — board model, piece geometry and king-safety checks.

Quick start::

    from chessvar.core import Board, Location

    board = Board.new()
    pawn = board.piece_at(Location(0, -3))
    sight = pawn.move_sight(Location(0, -2))
    assert sight.is_legal()
"""

from chessvar.core.board import Board, BoardPiece
from chessvar.core.castling import CastleData, CastleDataEntry
from chessvar.core.enums import Color, Shape
from chessvar.core.piece import Piece
from chessvar.core.rules import Rules
from chessvar.core.sight import (
    CANNOT_SEE,
    ILLEGAL_SEES_EMPTY,
    SEES_EMPTY,
    CannotSee,
    IllegalSees,
    IllegalSeesEmpty,
    Sees,
    SeesEmpty,
    Sight,
)
from chessvar.core.types import Location

__all__ = [
    # Enums
    "Color",
    "Shape",
    # Types
    "Location",
    # Domain objects
    "Board",
    "BoardPiece",
    "CastleData",
    "CastleDataEntry",
    "Piece",
    "Rules",
    # Sight
    "CANNOT_SEE",
    "ILLEGAL_SEES_EMPTY",
    "SEES_EMPTY",
    "CannotSee",
    "IllegalSees",
    "IllegalSeesEmpty",
    "Sees",
    "SeesEmpty",
    "Sight",
]
