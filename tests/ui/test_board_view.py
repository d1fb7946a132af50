"""Tests for BoardView wiring."""

from __future__ import annotations

from chessmoves.core import Board, Coordinate
from chessmoves.ui.board_view import BoardView


def test_view_wraps_scene_for_board(demo_board: Board) -> None:
    view = BoardView(demo_board)
    assert view.board_scene.board is demo_board
    assert view.scene() is view.board_scene


def test_piece_moved_bubbles_from_scene(demo_board: Board) -> None:
    view = BoardView(demo_board)
    moves: list[tuple[object, object, object]] = []
    view.piece_moved.connect(lambda p, o, d: moves.append((p, o, d)))

    rook = demo_board[Coordinate(3, 5)]
    view.board_scene.select_piece(rook)
    view.board_scene.try_move(Coordinate(0, 5))

    assert moves == [(rook, Coordinate(3, 5), Coordinate(0, 5))]


def test_title_tracks_board_size(demo_board: Board) -> None:
    view = BoardView(demo_board)
    assert view.windowTitle() == "chessmoves — 8x8"

    view.set_board(Board(size=5))

    assert view.windowTitle() == "chessmoves — 5x5"
    assert view.board_scene.sceneRect().width() == 5 * view.board_scene.TILE


def test_view_without_board_has_plain_title() -> None:
    assert BoardView().windowTitle() == "chessmoves"
