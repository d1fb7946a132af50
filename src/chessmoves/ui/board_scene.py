"""BoardScene — QGraphicsScene that draws the board, pieces and legal moves."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessmoves.core.board import Board
from chessmoves.core.enums import PieceKind
from chessmoves.core.piece import Piece
from chessmoves.core.types import Coordinate
from chessmoves.ui.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

_SYMBOLS: dict[PieceKind, str] = {
    PieceKind.PAWN: "♙",
    PieceKind.BISHOP: "♗",
    PieceKind.KNIGHT: "♘",
    PieceKind.ROOK: "♖",
    PieceKind.QUEEN: "♕",
    PieceKind.KING: "♔",
}


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece glyphs.

    Clicking a piece selects it and marks its legal destinations; clicking
    one of those destinations moves the piece.

    Signals:
        piece_moved(Piece, Coordinate, Coordinate): Emitted after a piece
            moved, with its origin and destination.
    """

    piece_moved = pyqtSignal(object, object, object)

    TILE = 80  # px per square

    def __init__(
        self, board: Board | None = None, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None

        # Interaction state
        self._selected: Piece | None = None
        self._legal_targets: list[Coordinate] = []
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Coordinate, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Coordinate, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        if board is not None:
            self.set_board(board)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board | None:
        return self._board

    @property
    def selected_piece(self) -> Piece | None:
        return self._selected

    @property
    def board_size(self) -> int:
        return 0 if self._board is None else self._board.size

    def set_board(self, board: Board) -> None:
        """Show *board* (full redraw of squares and pieces)."""
        self._board = board
        self.clear_selection()
        self._draw_board()
        self._sync_pieces()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide row/column coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    def select_piece(self, piece: Piece) -> None:
        """Select *piece* and mark its legal destinations."""
        self.clear_selection()
        self._selected = piece
        self._legal_targets = piece.legal_destinations()

        rect = self._make_highlight(piece.position, self._theme.selected)
        self._highlight_items.append(rect)

        if self._show_legal_moves:
            for target in self._legal_targets:
                dot = self._make_highlight(target, self._theme.legal_target)
                self._legal_dot_items.append(dot)

    def clear_selection(self) -> None:
        self._selected = None
        self._legal_targets = []
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def try_move(self, destination: Coordinate) -> bool:
        """Move the selected piece to *destination* if that move is legal."""
        piece = self._selected
        if piece is None:
            return False
        origin = piece.position
        if not piece.attempt_move(destination):
            return False
        self.clear_selection()
        self._sync_pieces()
        self.piece_moved.emit(piece, origin, destination)
        return True

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        if self._board is None:
            return

        t = self.TILE
        n = self._board.size
        font = QFont("Sans Serif", max(9, t // 8))

        for y in range(n):
            for x in range(n):
                coord = Coordinate(x, y)
                col, row = self._visual_coords(coord)
                rect = QGraphicsRectItem(col * t, row * t, t, t)
                rect.setBrush(QBrush(self._theme.square_color(coord)))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[coord] = rect

                label_brush = QBrush(self._theme.label_color(coord))
                # Row numbers (left edge)
                if x == 0:
                    self._add_coord_label(
                        str(y + 1), font, label_brush, col * t + 2, row * t + 1
                    )
                # Column numbers (bottom edge)
                if y == 0:
                    self._add_coord_label(
                        str(x + 1),
                        font,
                        label_brush,
                        col * t + t - 14,
                        row * t + t - 16,
                    )

        self.setSceneRect(0, 0, n * t, n * t)

    def _add_coord_label(
        self, text: str, font: QFont, brush: QBrush, px: float, py: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(brush)
        txt.setPos(px, py)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        font = QFont("Sans Serif", int(t * 0.55))
        for piece in self._board.pieces():
            item = QGraphicsSimpleTextItem(_SYMBOLS[piece.kind])
            item.setFont(font)
            item.setBrush(QBrush(self._theme.piece))
            col, row = self._visual_coords(piece.position)
            bounds = item.boundingRect()
            item.setPos(
                col * t + (t - bounds.width()) / 2,
                row * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[piece.position] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._board is None or event is None:
            return super().mousePressEvent(event)

        coord = self._pos_to_coord(event.scenePos())
        if coord is None:
            self.clear_selection()
            return super().mousePressEvent(event)

        self.handle_click(coord)
        event.accept()

    def handle_click(self, coord: Coordinate) -> None:
        """Select, move or deselect depending on what sits at *coord*."""
        if self._board is None:
            return

        # Clicking a legal target → make the move
        if self._selected is not None and coord in self._legal_targets:
            if not self.try_move(coord):
                _LOGGER.warning("Highlighted move to %s was rejected", coord)
                self.clear_selection()
            return

        piece = self._board.piece_at(coord)
        if piece is not None and piece is not self._selected:
            self.select_piece(piece)
        else:
            self.clear_selection()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    def _visual_coords(self, coord: Coordinate) -> tuple[int, int]:
        """Board coordinate → visual column/row (y grows upwards)."""
        return coord.x, self.board_size - 1 - coord.y

    def _pos_to_coord(self, pos: QPointF) -> Coordinate | None:
        """Scene position → board coordinate."""
        if self._board is None:
            return None
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        coord = Coordinate(col, self.board_size - 1 - row)
        if not self._board.in_bounds(coord):
            return None
        return coord

    def _make_highlight(self, coord: Coordinate, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        col, row = self._visual_coords(coord)
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
