"""BoardView — window showing one board and keeping it fitted."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from chessmoves.core.board import Board
from chessmoves.ui.board_scene import BoardScene


def window_title(board: Board | None) -> str:
    if board is None:
        return "chessmoves"
    return f"chessmoves — {board.size}x{board.size}"


class BoardView(QGraphicsView):
    """Hosts a :class:`BoardScene`; the title tracks the board's size.

    Signals:
        piece_moved(Piece, Coordinate, Coordinate): Re-emitted from the scene.
    """

    piece_moved = pyqtSignal(object, object, object)

    def __init__(
        self, board: Board | None = None, parent: QWidget | None = None
    ) -> None:
        self._scene = BoardScene(board)
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)
        self.setWindowTitle(window_title(board))

        self._scene.piece_moved.connect(self.piece_moved.emit)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def set_board(self, board: Board) -> None:
        """Show *board*, refitting the view to its extent."""
        self._scene.set_board(board)
        self.setWindowTitle(window_title(board))
        self._fit()

    def _fit(self) -> None:
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self._fit()
