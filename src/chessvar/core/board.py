"""Board - piece placement, piece handles and king-safety checks."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from chessvar.core import geometry
from chessvar.core.castling import CastleData
from chessvar.core.enums import Color, Shape
from chessvar.core.piece import Piece
from chessvar.core.sight import CANNOT_SEE, Sight
from chessvar.core.types import (
    FILES,
    MAX_RANK,
    MIN_RANK,
    Location,
    back_rank,
    pawn_rank,
)

_LOGGER = logging.getLogger(__name__)

# (shape, files) on the back rank, in set-up order after the pawns.
_BACK_RANK_LAYOUT: tuple[tuple[Shape, tuple[int, ...]], ...] = (
    (Shape.ROOK, (-4, 3)),
    (Shape.KNIGHT, (-3, 2)),
    (Shape.BISHOP, (-2, 1)),
    (Shape.QUEEN, (-1,)),
    (Shape.KING, (0,)),
)


class Board:
    """Ordered collection of pieces plus castling bookkeeping.

    At most one piece stands on any location.  :meth:`add` enforces this;
    callers that mutate :meth:`raw_board` directly are responsible for it.
    Queries never mutate the board.
    """

    __slots__ = ("_pieces", "castle_data")

    def __init__(
        self,
        pieces: Iterable[Piece] = (),
        castle_data: CastleData | None = None,
    ) -> None:
        self._pieces: list[Piece] = []
        self.castle_data = castle_data if castle_data is not None else CastleData()
        for piece in pieces:
            self.add(piece)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def new(cls) -> Board:
        """Standard starting position, 16 pieces per side."""
        b = cls()
        for color in (Color.WHITE, Color.BLACK):
            for file in FILES:
                location = Location(file, pawn_rank(color))
                b._pieces.append(Piece(color, Shape.PAWN, location))
            rank = back_rank(color)
            for shape, files in _BACK_RANK_LAYOUT:
                for file in files:
                    b._pieces.append(Piece(color, shape, Location(file, rank)))
        return b

    @classmethod
    def new_blank(cls) -> Board:
        """Empty board, for constructed positions."""
        return cls()

    # -- Mutation -----------------------------------------------------------

    def raw_board(self) -> list[Piece]:
        """The underlying piece list, for the move-application layer."""
        return self._pieces

    def add(self, piece: Piece) -> None:
        if self._piece_value_at(piece.location) is not None:
            _LOGGER.error("Refusing second piece at %s: %r", piece.location, piece)
            raise ValueError(f"Location {piece.location} is already occupied")
        self._pieces.append(piece)

    def remove_at(self, location: Location) -> Piece | None:
        """Remove and return the piece on *location*, if any."""
        for idx, piece in enumerate(self._pieces):
            if piece.location == location:
                return self._pieces.pop(idx)
        return None

    def copy(self) -> Board:
        b = Board()
        b._pieces = self._pieces.copy()
        b.castle_data = self.castle_data.copy()
        return b

    # -- Queries ------------------------------------------------------------

    def _piece_value_at(self, location: Location) -> Piece | None:
        for piece in self._pieces:
            if piece.location == location:
                return piece
        return None

    def is_empty(self, location: Location) -> bool:
        return self._piece_value_at(location) is None

    def piece_at(self, location: Location) -> BoardPiece | None:
        piece = self._piece_value_at(location)
        return None if piece is None else BoardPiece(piece, self)

    def pieces(self) -> list[BoardPiece]:
        """Every piece, in storage order."""
        return [BoardPiece(piece, self) for piece in self._pieces]

    def pieces_where(self, predicate: Callable[[Piece], bool]) -> list[BoardPiece]:
        """Pieces whose value satisfies *predicate*, in storage order."""
        return [BoardPiece(piece, self) for piece in self._pieces if predicate(piece)]

    def find_attackers_of(
        self,
        location: Location,
        check_legal: bool,
        color_filter: Color | None = None,
    ) -> list[BoardPiece]:
        """Pieces (of *color_filter*, if given) that legally attack *location*.

        Pass ``check_legal=False`` for check detection; the legality gate
        itself enumerates attackers that way.
        """
        return [
            bp
            for bp in self.pieces()
            if (color_filter is None or bp.color == color_filter)
            and bp.attack_sight(location, check_legal).is_legal()
        ]

    def is_attacked(self, location: Location, by_color: Color) -> bool:
        """Whether any piece of *by_color* attacks *location*, ignoring pins."""
        return any(
            bp.attack_sight(location, False).is_legal()
            for bp in self.pieces()
            if bp.color == by_color
        )

    def king_location(self, color: Color) -> Location:
        """Location of the single king of *color*."""
        kings = [
            p.location
            for p in self._pieces
            if p.shape == Shape.KING and p.color == color
        ]
        if len(kings) != 1:
            _LOGGER.error("Expected one %s king, found %d", color.name, len(kings))
            if not kings:
                raise ValueError(f"No {color.name} king on board")
            raise ValueError(f"Found {len(kings)} {color.name} kings on board")
        return kings[0]

    # -- King safety --------------------------------------------------------

    def _after_move(self, mover: Piece, destination: Location) -> Board:
        """Scratch board with *mover* relocated and any capture removed."""
        scratch = self.copy()
        scratch.remove_at(destination)
        scratch.remove_at(mover.location)
        scratch._pieces.append(mover.moved_to(destination))
        return scratch

    def makes_discovered_attack(
        self, location: Location, blocking_at: Location
    ) -> bool:
        """Whether moving the piece on *location* to *blocking_at* exposes its king.

        The move is played out on a scratch copy: the source is vacated, any
        occupant of *blocking_at* is captured, and the mover's king is then
        tested against every opposing piece.  The live board is untouched.

        Raises:
            ValueError: No piece stands on *location*, or the mover's side
                does not have exactly one king.
        """
        mover = self._piece_value_at(location)
        if mover is None:
            _LOGGER.error("King-safety check from empty location %s", location)
            raise ValueError(f"No piece at {location}")
        king_at = self.king_location(mover.color)
        if king_at == blocking_at:
            # Landing on its own king is a defence relation, not a move.
            return False
        scratch = self._after_move(mover, blocking_at)
        if mover.shape == Shape.KING:
            king_at = blocking_at
        exposed = scratch.is_attacked(king_at, mover.color.other())
        _LOGGER.debug(
            "%r -> %s %s the %s king",
            mover,
            blocking_at,
            "exposes" if exposed else "keeps safe",
            mover.color,
        )
        return exposed

    def _walks_into_attack(self, king: Piece, destination: Location) -> bool:
        """Whether *king* would stand attacked on *destination*.

        The king is lifted off its square first so it cannot shield
        *destination* from a slider on the same line.
        """
        scratch = self._after_move(king, destination)
        return scratch.is_attacked(destination, king.color.other())

    # -- Dunder helpers -----------------------------------------------------

    def __len__(self) -> int:
        return len(self._pieces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces and self.castle_data == other.castle_data

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(MAX_RANK, MIN_RANK - 1, -1):
            row = []
            for file in FILES:
                p = self._piece_value_at(Location(file, rank))
                row.append(f"{str(p) if p else '.':>2}")
            rows.append(f"{rank:>2} {' '.join(row)}")
        rows.append("   " + " ".join(f"{file:>2}" for file in FILES))
        return "\n".join(rows)


class BoardPiece:
    """Read-only handle on a piece in the context of its board.

    Holds a copy of the :class:`Piece` and a reference to the owning board.
    Any mutation of that board invalidates the handle.
    """

    __slots__ = ("_piece", "_board")

    def __init__(self, piece: Piece, board: Board) -> None:
        self._piece = piece
        self._board = board

    @property
    def piece(self) -> Piece:
        return self._piece

    @property
    def color(self) -> Color:
        return self._piece.color

    @property
    def shape(self) -> Shape:
        return self._piece.shape

    @property
    def location(self) -> Location:
        return self._piece.location

    @property
    def parent_board(self) -> Board:
        return self._board

    # -- Sight --------------------------------------------------------------

    def move_sight(self, destination: Location, check_legal: bool = True) -> Sight:
        """Can this piece move to *destination*, and is doing so legal?"""
        if not geometry.can_move(self._board, self._piece, destination):
            return CANNOT_SEE
        return self._resolve(destination, check_legal)

    def attack_sight(self, destination: Location, check_legal: bool = True) -> Sight:
        """Does this piece threaten *destination*?

        Identical to :meth:`move_sight` except for pawns, which threaten the
        two forward diagonals and never the square straight ahead.
        """
        if not geometry.can_attack(self._board, self._piece, destination):
            return CANNOT_SEE
        return self._resolve(destination, check_legal)

    def _resolve(self, destination: Location, check_legal: bool) -> Sight:
        illegal = False
        if check_legal:
            if self.shape == Shape.KING:
                illegal = self._board._walks_into_attack(self._piece, destination)
            else:
                illegal = self._board.makes_discovered_attack(
                    self.location, destination
                )
        return Sight.of(self._board.piece_at(destination), illegal)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardPiece):
            return NotImplemented
        return self._piece == other._piece and self._board is other._board

    def __hash__(self) -> int:
        return hash((self._piece, id(self._board)))

    def __repr__(self) -> str:
        return (
            f"BoardPiece({self.color}, {self.shape.name.lower()}, {self.location})"
        )
