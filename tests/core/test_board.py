"""Tests for Board."""

import pytest

from chessmoves.core.board import Board
from chessmoves.core.enums import PieceKind
from chessmoves.core.errors import (
    ChessMovesError,
    OccupiedCellError,
    OutOfBoundsError,
    UnknownPieceKindError,
)
from chessmoves.core.piece import Piece
from chessmoves.core.types import Coordinate


class TestBoardCreation:
    def test_starts_empty(self) -> None:
        board = Board()
        assert board.size == 8
        assert len(board) == 0
        assert all(
            not board.cell_occupied(Coordinate(x, y)) for x in range(8) for y in range(8)
        )

    def test_custom_size(self) -> None:
        board = Board(size=5)
        assert board.size == 5
        assert board.in_bounds(Coordinate(4, 4))
        assert not board.in_bounds(Coordinate(5, 4))

    @pytest.mark.parametrize("size", [0, -3])
    def test_non_positive_size_rejected(self, size: int) -> None:
        with pytest.raises(ValueError, match="positive"):
            Board(size)


class TestPlacement:
    def test_place_and_get(self, board: Board) -> None:
        piece = board.place_piece(PieceKind.PAWN, Coordinate(4, 4))
        assert isinstance(piece, Piece)
        assert board[Coordinate(4, 4)] is piece
        assert board.piece_at(Coordinate(4, 4)) is piece
        assert piece.kind == PieceKind.PAWN
        assert piece.position == Coordinate(4, 4)
        assert piece.board is board
        assert board.cell_occupied(Coordinate(4, 4))
        assert not board.cell_occupied(Coordinate(4, 3))

    def test_same_cell_twice_rejected(self, board: Board) -> None:
        board.place_piece(PieceKind.KING, Coordinate(2, 2))
        with pytest.raises(OccupiedCellError):
            board.place_piece(PieceKind.QUEEN, Coordinate(2, 2))
        assert board[Coordinate(2, 2)].kind == PieceKind.KING

    @pytest.mark.parametrize(
        "position",
        [Coordinate(8, 0), Coordinate(0, 8), Coordinate(-1, 3), Coordinate(4, -1)],
    )
    def test_out_of_bounds_rejected(self, board: Board, position: Coordinate) -> None:
        with pytest.raises(OutOfBoundsError):
            board.place_piece(PieceKind.KNIGHT, position)
        assert len(board) == 0

    def test_error_hierarchy(self, board: Board) -> None:
        with pytest.raises(IndexError):
            board.place_piece(PieceKind.KNIGHT, Coordinate(8, 8))
        board.place_piece(PieceKind.KNIGHT, Coordinate(1, 1))
        with pytest.raises(ChessMovesError):
            board.place_piece(PieceKind.KNIGHT, Coordinate(1, 1))

    def test_unknown_kind_rejected(self, board: Board) -> None:
        with pytest.raises(UnknownPieceKindError):
            board.place_piece(42, Coordinate(0, 0))  # type: ignore[arg-type]
        assert len(board) == 0


class TestQueries:
    def test_lookup_out_of_bounds_raises(self, board: Board) -> None:
        with pytest.raises(OutOfBoundsError):
            board.piece_at(Coordinate(0, 8))
        with pytest.raises(OutOfBoundsError):
            board.cell_occupied(Coordinate(-1, 0))

    def test_pieces_row_major(self, board: Board) -> None:
        top = board.place_piece(PieceKind.ROOK, Coordinate(0, 7))
        bottom = board.place_piece(PieceKind.BISHOP, Coordinate(5, 0))
        middle = board.place_piece(PieceKind.KING, Coordinate(2, 3))
        assert board.pieces() == [bottom, middle, top]
        assert list(board) == [bottom, middle, top]
        assert len(board) == 3

    def test_repr(self, board: Board) -> None:
        board.place_piece(PieceKind.KNIGHT, Coordinate(0, 7))
        board.place_piece(PieceKind.QUEEN, Coordinate(7, 0))
        lines = repr(board).splitlines()
        assert len(lines) == 9
        assert lines[0] == " 8 N . . . . . . ."
        assert lines[7] == " 1 . . . . . . . Q"
        assert lines[8] == "   1 2 3 4 5 6 7 8"


class TestRelocation:
    def test_attempt_move_keeps_cells_in_sync(self, board: Board) -> None:
        rook = board.place_piece(PieceKind.ROOK, Coordinate(0, 0))
        assert rook.attempt_move(Coordinate(0, 5))
        assert board[Coordinate(0, 0)] is None
        assert board[Coordinate(0, 5)] is rook
        for piece in board:
            assert board[piece.position] is piece

    def test_relocate_foreign_piece_rejected(self, board: Board) -> None:
        other = Board()
        stranger = other.place_piece(PieceKind.PAWN, Coordinate(1, 1))
        with pytest.raises(ValueError, match="not on this board"):
            board._relocate(stranger, Coordinate(1, 2))
