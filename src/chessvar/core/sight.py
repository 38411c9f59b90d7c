"""Sight — the closed result of a reachability / legality query.

Five variants, no others::

    CannotSee           geometry forbids it, or the line is blocked
    SeesEmpty           reachable, legal, destination empty
    Sees(piece)         reachable, legal, destination occupied
    IllegalSeesEmpty    reachable, would expose own king, destination empty
    IllegalSees(piece)  reachable, would expose own king, destination occupied

Payload-less variants are exposed as the singletons :data:`CANNOT_SEE`,
:data:`SEES_EMPTY` and :data:`ILLEGAL_SEES_EMPTY`. The variants are plain
dataclasses so they work with ``match``::

    match piece.move_sight(dest):
        case Sees(target):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessvar.core.board import BoardPiece


class Sight:
    """Base of the five sight variants. Not instantiated directly."""

    __slots__ = ()

    def is_legal(self) -> bool:
        """True only for :class:`SeesEmpty` and :class:`Sees`."""
        return False

    def sees(self) -> bool:
        """True for every variant except :class:`CannotSee`."""
        return True

    def piece_at(self) -> BoardPiece | None:
        """Occupant for :class:`Sees` / :class:`IllegalSees`, else ``None``."""
        return None

    @staticmethod
    def of(occupant: BoardPiece | None, illegal: bool) -> Sight:
        """Final variant for a destination that geometry already allows."""
        if occupant is None:
            return ILLEGAL_SEES_EMPTY if illegal else SEES_EMPTY
        return IllegalSees(occupant) if illegal else Sees(occupant)


@dataclass(frozen=True, slots=True)
class CannotSee(Sight):
    def sees(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class SeesEmpty(Sight):
    def is_legal(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Sees(Sight):
    piece: BoardPiece

    def is_legal(self) -> bool:
        return True

    def piece_at(self) -> BoardPiece | None:
        return self.piece


@dataclass(frozen=True, slots=True)
class IllegalSeesEmpty(Sight):
    pass


@dataclass(frozen=True, slots=True)
class IllegalSees(Sight):
    piece: BoardPiece

    def piece_at(self) -> BoardPiece | None:
        return self.piece


CANNOT_SEE = CannotSee()
SEES_EMPTY = SeesEmpty()
ILLEGAL_SEES_EMPTY = IllegalSeesEmpty()
