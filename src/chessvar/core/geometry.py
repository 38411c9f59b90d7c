"""Per-shape movement geometry and line-of-sight occlusion.

Everything here is pure: a shape, a source and a destination decide whether
the destination is geometrically reachable, and sliding shapes additionally
need every square strictly between the two ends to be empty.  Whether the
move is *legal* (king safety) is decided by :mod:`chessvar.core.board`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessvar.core.enums import Shape
from chessvar.core.types import Location, pawn_direction

if TYPE_CHECKING:
    from chessvar.core.board import Board
    from chessvar.core.piece import Piece


KNIGHT_OFFSETS: frozenset[tuple[int, int]] = frozenset(
    {
        (-2, -1),
        (-2, 1),
        (-1, -2),
        (-1, 2),
        (1, -2),
        (1, 2),
        (2, -1),
        (2, 1),
    }
)

KING_OFFSETS: frozenset[tuple[int, int]] = frozenset(
    {
        (-1, -1),
        (-1, 0),
        (-1, 1),
        (0, -1),
        (0, 1),
        (1, -1),
        (1, 0),
        (1, 1),
    }
)

PAWN_ATTACK_FILES: frozenset[int] = frozenset({-1, 1})


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_orthogonal(df: int, dr: int) -> bool:
    """Same file or same rank, and not the same square."""
    return (df == 0) != (dr == 0)


def is_diagonal(df: int, dr: int) -> bool:
    return df != 0 and abs(df) == abs(dr)


def squares_between(source: Location, destination: Location) -> list[Location]:
    """Squares strictly between two ends of an orthogonal or diagonal line."""
    df, dr = source.delta(destination)
    if not (is_orthogonal(df, dr) or is_diagonal(df, dr)):
        raise ValueError(f"{source} and {destination} are not on a common line")
    step_f, step_r = _sign(df), _sign(dr)
    steps = max(abs(df), abs(dr))
    return [source.offset(step_f * i, step_r * i) for i in range(1, steps)]


def is_line_clear(board: Board, source: Location, destination: Location) -> bool:
    return all(board.is_empty(sq) for sq in squares_between(source, destination))


# -- Per-shape reachability ------------------------------------------------


def _pawn_moves(board: Board, piece: Piece, destination: Location) -> bool:
    df, dr = piece.location.delta(destination)
    return df == 0 and dr == pawn_direction(piece.color)


def _pawn_attacks(board: Board, piece: Piece, destination: Location) -> bool:
    df, dr = piece.location.delta(destination)
    return df in PAWN_ATTACK_FILES and dr == pawn_direction(piece.color)


def _rook(board: Board, piece: Piece, destination: Location) -> bool:
    df, dr = piece.location.delta(destination)
    if not is_orthogonal(df, dr):
        return False
    return is_line_clear(board, piece.location, destination)


def _knight(board: Board, piece: Piece, destination: Location) -> bool:
    return piece.location.delta(destination) in KNIGHT_OFFSETS


def _bishop(board: Board, piece: Piece, destination: Location) -> bool:
    df, dr = piece.location.delta(destination)
    if not is_diagonal(df, dr):
        return False
    return is_line_clear(board, piece.location, destination)


def _queen(board: Board, piece: Piece, destination: Location) -> bool:
    df, dr = piece.location.delta(destination)
    if not (is_orthogonal(df, dr) or is_diagonal(df, dr)):
        return False
    return is_line_clear(board, piece.location, destination)


def _king(board: Board, piece: Piece, destination: Location) -> bool:
    return piece.location.delta(destination) in KING_OFFSETS


_MOVES: dict[Shape, Callable[[Board, Piece, Location], bool]] = {
    Shape.PAWN: _pawn_moves,
    Shape.ROOK: _rook,
    Shape.KNIGHT: _knight,
    Shape.BISHOP: _bishop,
    Shape.QUEEN: _queen,
    Shape.KING: _king,
}

# Only pawns attack differently from how they move.
_ATTACKS: dict[Shape, Callable[[Board, Piece, Location], bool]] = {
    **_MOVES,
    Shape.PAWN: _pawn_attacks,
}


def can_move(board: Board, piece: Piece, destination: Location) -> bool:
    """Whether *piece* can geometrically move to *destination* on *board*."""
    return _MOVES[piece.shape](board, piece, destination)


def can_attack(board: Board, piece: Piece, destination: Location) -> bool:
    """Whether *piece* geometrically threatens *destination* on *board*."""
    return _ATTACKS[piece.shape](board, piece, destination)
