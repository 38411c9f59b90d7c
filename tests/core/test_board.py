"""Tests for Board."""

import pytest

from chessvar.core.board import Board
from chessvar.core.enums import Color, Shape
from chessvar.core.piece import Piece
from chessvar.core.types import Location

W, B = Color.WHITE, Color.BLACK


class TestBoardNew:
    def test_piece_counts(self) -> None:
        board = Board.new()
        assert len(board.pieces()) == 32
        assert len(board.pieces_where(lambda p: p.color == W)) == 16
        assert len(board.pieces_where(lambda p: p.color == B)) == 16

    def test_locations_unique(self) -> None:
        board = Board.new()
        locations = [bp.location for bp in board.pieces()]
        assert len(set(locations)) == len(locations)

    def test_kings(self) -> None:
        board = Board.new()
        assert board.king_location(W) == Location(0, -4)
        assert board.king_location(B) == Location(0, 3)

    def test_white_back_rank(self) -> None:
        board = Board.new()
        expected = [
            (-4, Shape.ROOK), (-3, Shape.KNIGHT), (-2, Shape.BISHOP),
            (-1, Shape.QUEEN), (0, Shape.KING), (1, Shape.BISHOP),
            (2, Shape.KNIGHT), (3, Shape.ROOK),
        ]
        for file, shape in expected:
            bp = board.piece_at(Location(file, -4))
            assert bp is not None, f"Nothing at file {file}"
            assert bp.piece == Piece(W, shape, Location(file, -4))

    def test_black_back_rank_mirrors_white(self) -> None:
        board = Board.new()
        for file in range(-4, 4):
            white = board.piece_at(Location(file, -4))
            black = board.piece_at(Location(file, 3))
            assert white is not None and black is not None
            assert black.color == B
            assert black.shape == white.shape

    def test_pawns(self) -> None:
        board = Board.new()
        white = board.pieces_where(lambda p: p.shape == Shape.PAWN and p.color == W)
        black = board.pieces_where(lambda p: p.shape == Shape.PAWN and p.color == B)
        assert sorted(bp.location.file for bp in white) == list(range(-4, 4))
        assert all(bp.location.rank == -3 for bp in white)
        assert sorted(bp.location.file for bp in black) == list(range(-4, 4))
        assert all(bp.location.rank == 2 for bp in black)

    def test_empty_middle(self) -> None:
        board = Board.new()
        for file in range(-4, 4):
            for rank in range(-2, 2):
                assert board.piece_at(Location(file, rank)) is None

    def test_storage_order(self) -> None:
        pieces = Board.new().pieces()
        assert pieces[0].piece == Piece(W, Shape.PAWN, Location(-4, -3))
        assert all(bp.color == W for bp in pieces[:16])
        assert all(bp.color == B for bp in pieces[16:])

    def test_blank(self) -> None:
        board = Board.new_blank()
        assert board.pieces() == []
        assert board == Board()


class TestBoardOperations:
    def test_insert_then_lookup(self, board: Board) -> None:
        piece = Piece(W, Shape.KNIGHT, Location(1, 1))
        board.add(piece)
        bp = board.piece_at(Location(1, 1))
        assert bp is not None
        assert bp.piece == piece
        assert board.piece_at(Location(1, 2)) is None

    def test_remove(self, board: Board) -> None:
        piece = Piece(W, Shape.KNIGHT, Location(1, 1))
        board.add(piece)
        assert board.remove_at(Location(1, 1)) == piece
        assert board.piece_at(Location(1, 1)) is None
        assert board.remove_at(Location(1, 1)) is None

    def test_add_to_occupied_location_raises(self, board: Board) -> None:
        board.add(Piece(W, Shape.ROOK, Location(0, 0)))
        with pytest.raises(ValueError, match="already occupied"):
            board.add(Piece(B, Shape.ROOK, Location(0, 0)))
        assert len(board) == 1

    def test_constructor_guards_duplicates(self) -> None:
        pieces = [
            Piece(W, Shape.ROOK, Location(0, 0)),
            Piece(W, Shape.PAWN, Location(0, 0)),
        ]
        with pytest.raises(ValueError):
            Board(pieces)

    def test_raw_board_mutation_is_visible(self, board: Board) -> None:
        board.raw_board().append(Piece(B, Shape.QUEEN, Location(2, 2)))
        bp = board.piece_at(Location(2, 2))
        assert bp is not None and bp.shape == Shape.QUEEN

    def test_copy_independence(self) -> None:
        board = Board.new()
        copy = board.copy()
        assert board == copy
        copy.remove_at(Location(0, -4))
        assert board != copy
        assert board.king_location(W) == Location(0, -4)

    def test_king_location_missing_raises(self, board: Board) -> None:
        with pytest.raises(ValueError, match="No WHITE king"):
            board.king_location(W)

    def test_king_location_duplicate_raises(self, board: Board) -> None:
        board.add(Piece(B, Shape.KING, Location(0, 3)))
        board.add(Piece(B, Shape.KING, Location(1, 3)))
        with pytest.raises(ValueError, match="2 BLACK kings"):
            board.king_location(B)

    def test_pieces_restartable(self) -> None:
        board = Board.new()
        assert board.pieces() == board.pieces()

    def test_pieces_where_keeps_order(self) -> None:
        board = Board.new()
        rooks = board.pieces_where(lambda p: p.shape == Shape.ROOK)
        assert [bp.location for bp in rooks] == [
            Location(-4, -4),
            Location(3, -4),
            Location(-4, 3),
            Location(3, 3),
        ]

    def test_repr_not_empty(self) -> None:
        text = repr(Board.new())
        assert "K" in text and "k" in text
        assert "-4" in text


class TestBoardPiece:
    def test_accessors(self, board: Board) -> None:
        board.add(Piece(B, Shape.BISHOP, Location(-2, 1)))
        bp = board.piece_at(Location(-2, 1))
        assert bp is not None
        assert bp.color == B
        assert bp.shape == Shape.BISHOP
        assert bp.location == Location(-2, 1)
        assert bp.parent_board is board

    def test_equality_tracks_board_identity(self) -> None:
        a, b = Board.new(), Board.new()
        loc = Location(0, -4)
        assert a.piece_at(loc) == a.piece_at(loc)
        assert a.piece_at(loc) != b.piece_at(loc)


class TestFindAttackers:
    def test_rook_attacks_king_down_open_file(self, board: Board) -> None:
        board.add(Piece(W, Shape.ROOK, Location(0, -4)))
        board.add(Piece(B, Shape.KING, Location(0, 3)))
        attackers = board.find_attackers_of(Location(0, 3), False, W)
        assert [bp.piece for bp in attackers] == [
            Piece(W, Shape.ROOK, Location(0, -4))
        ]

    def test_color_filter(self, board: Board) -> None:
        board.add(Piece(W, Shape.ROOK, Location(0, -4)))
        board.add(Piece(B, Shape.KING, Location(0, 3)))
        board.add(Piece(B, Shape.ROOK, Location(3, 3)))
        everyone = board.find_attackers_of(Location(0, 3), False)
        assert [bp.color for bp in everyone] == [W, B]
        black = board.find_attackers_of(Location(0, 3), False, B)
        assert [bp.location for bp in black] == [Location(3, 3)]

    def test_blocked_line_has_no_attacker(self, board: Board) -> None:
        board.add(Piece(W, Shape.ROOK, Location(0, -4)))
        board.add(Piece(B, Shape.KING, Location(0, 3)))
        board.add(Piece(W, Shape.PAWN, Location(0, 0)))
        assert board.find_attackers_of(Location(0, 3), False, W) == []

    def test_pawns_attack_diagonally_in_start_position(self) -> None:
        board = Board.new()
        attackers = board.find_attackers_of(Location(0, -2), False, W)
        assert sorted(bp.location.file for bp in attackers) == [-1, 1]
        assert all(bp.shape == Shape.PAWN for bp in attackers)

    def test_pinned_attacker_dropped_when_checking_legality(self, board: Board) -> None:
        board.add(Piece(W, Shape.KING, Location(0, -4)))
        board.add(Piece(W, Shape.ROOK, Location(0, -2)))
        board.add(Piece(B, Shape.ROOK, Location(0, 3)))
        target = Location(3, -2)
        assert board.find_attackers_of(target, True, W) == []
        pinned = board.find_attackers_of(target, False, W)
        assert [bp.shape for bp in pinned] == [Shape.ROOK]

    def test_defender_of_own_king_with_legality(self, board: Board) -> None:
        board.add(Piece(W, Shape.KING, Location(0, 0)))
        board.add(Piece(W, Shape.ROOK, Location(0, 3)))
        defenders = board.find_attackers_of(Location(0, 0), True, W)
        assert [bp.shape for bp in defenders] == [Shape.ROOK]

    def test_is_attacked(self, board: Board) -> None:
        board.add(Piece(B, Shape.KNIGHT, Location(0, 0)))
        assert board.is_attacked(Location(1, 2), B)
        assert not board.is_attacked(Location(1, 2), W)
        assert not board.is_attacked(Location(1, 1), B)
