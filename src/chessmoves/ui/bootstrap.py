"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from chessmoves.core.board import Board
    from chessmoves.core.piece import Piece
    from chessmoves.core.types import Coordinate

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    app.setApplicationName("chessmoves")
    app.setStyle("Fusion")


def _log_move(piece: Piece, origin: Coordinate, destination: Coordinate) -> None:
    _LOGGER.info("%s moved %s => %s", piece.kind, origin, destination)


def run_application(board: Board, argv: list[str] | None = None) -> int:
    """Create and run a Qt application showing *board*."""
    from PyQt6.QtWidgets import QApplication

    from chessmoves.ui.board_view import BoardView

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    view = BoardView(board)
    view.piece_moved.connect(_log_move)
    view.resize(640, 640)
    view.show()

    return app.exec()
