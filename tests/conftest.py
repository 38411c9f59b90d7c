"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessvar.core.board import Board, BoardPiece
from chessvar.core.enums import Color, Shape
from chessvar.core.piece import Piece
from chessvar.core.types import Location

Place = Callable[[Color, Shape, int, int], BoardPiece]


@pytest.fixture
def board() -> Board:
    """An empty board to build positions on."""
    return Board.new_blank()


@pytest.fixture
def place(board: Board) -> Place:
    """Put a piece on the ``board`` fixture and return its handle."""

    def _place(color: Color, shape: Shape, file: int, rank: int) -> BoardPiece:
        board.add(Piece(color, shape, Location(file, rank)))
        bp = board.piece_at(Location(file, rank))
        assert bp is not None
        return bp

    return _place
