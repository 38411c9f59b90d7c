"""Location value type and board extent constants.

Coordinates are centred on the middle of the board rather than a corner::

    files  -4 -3 -2 -1  0  1  2  3
    ranks  -4 (white back rank) ... 3 (black back rank)

``Location(0, -4)`` is the white king's home square, ``Location(0, 3)`` the
black king's.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessvar.core.enums import Color

MIN_FILE = -4
MAX_FILE = 3
MIN_RANK = -4
MAX_RANK = 3

FILES: tuple[int, ...] = tuple(range(MIN_FILE, MAX_FILE + 1))
RANKS: tuple[int, ...] = tuple(range(MIN_RANK, MAX_RANK + 1))

# [color] -> rank index
BACK_RANK: tuple[int, int] = (MIN_RANK, MAX_RANK)
PAWN_RANK: tuple[int, int] = (MIN_RANK + 1, MAX_RANK - 1)
PAWN_DIRECTION: tuple[int, int] = (1, -1)


@dataclass(frozen=True, slots=True)
class Location:
    """Immutable (file, rank) coordinate pair."""

    file: int
    rank: int

    def offset(self, df: int, dr: int) -> Location:
        return Location(self.file + df, self.rank + dr)

    def delta(self, other: Location) -> tuple[int, int]:
        """``(df, dr)`` leading from *self* to *other*."""
        return other.file - self.file, other.rank - self.rank

    def is_on_board(self) -> bool:
        """Whether the location lies on the standard 8x8 extent."""
        return MIN_FILE <= self.file <= MAX_FILE and MIN_RANK <= self.rank <= MAX_RANK

    def __str__(self) -> str:
        return f"({self.file}, {self.rank})"


def back_rank(color: Color) -> int:
    return BACK_RANK[int(color)]


def pawn_rank(color: Color) -> int:
    return PAWN_RANK[int(color)]


def pawn_direction(color: Color) -> int:
    """Rank step a pawn of *color* advances by."""
    return PAWN_DIRECTION[int(color)]
