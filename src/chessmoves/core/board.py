"""Board - square grid of piece slots."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chessmoves.core.enums import PieceKind
from chessmoves.core.errors import (
    OccupiedCellError,
    OutOfBoundsError,
    UnknownPieceKindError,
)
from chessmoves.core.piece import Piece
from chessmoves.core.types import DEFAULT_BOARD_SIZE, Coordinate

_LOGGER = logging.getLogger(__name__)

_GLYPHS: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.BISHOP: "B",
    PieceKind.KNIGHT: "N",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}


class Board:
    """Mutable ``size`` × ``size`` grid where each cell holds at most one piece.

    Every occupied cell holds a piece whose ``position`` equals that cell.
    """

    __slots__ = ("_size", "_cells")

    def __init__(self, size: int = DEFAULT_BOARD_SIZE) -> None:
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self._size = size
        # Row-major: index = y * size + x.
        self._cells: list[Piece | None] = [None] * (size * size)

    @property
    def size(self) -> int:
        return self._size

    def in_bounds(self, position: Coordinate) -> bool:
        return position.in_bounds(self._size)

    def _index(self, position: Coordinate) -> int:
        if not self.in_bounds(position):
            raise OutOfBoundsError(
                f"Coordinate {position} is outside the {self._size}x{self._size} board"
            )
        return position.y * self._size + position.x

    # -- Element access -----------------------------------------------------

    def piece_at(self, position: Coordinate) -> Piece | None:
        return self._cells[self._index(position)]

    def __getitem__(self, position: Coordinate) -> Piece | None:
        return self.piece_at(position)

    def cell_occupied(self, position: Coordinate) -> bool:
        return self.piece_at(position) is not None

    # -- Placement ----------------------------------------------------------

    def place_piece(self, kind: PieceKind, position: Coordinate) -> Piece:
        """Create a piece of *kind* at *position* and return it.

        Raises:
            OutOfBoundsError: *position* is off the board.
            OccupiedCellError: *position* already holds a piece.
        """
        try:
            kind = PieceKind(kind)
        except ValueError:
            raise UnknownPieceKindError(f"Unknown piece kind: {kind!r}") from None
        idx = self._index(position)
        if self._cells[idx] is not None:
            raise OccupiedCellError(
                f"Can't place {kind} at {position}: cell is already occupied"
            )
        piece = Piece(self, position, kind)
        self._cells[idx] = piece
        _LOGGER.debug("Placed %s at %s", piece.kind, position)
        return piece

    def _relocate(self, piece: Piece, destination: Coordinate) -> None:
        """Move *piece* from its recorded cell to *destination*."""
        src = self._index(piece.position)
        dst = self._index(destination)
        if self._cells[src] is not piece:
            raise ValueError(f"{piece!r} is not on this board")
        if self._cells[dst] is not None:
            raise OccupiedCellError(
                f"Can't move to {destination}: cell is already occupied"
            )
        self._cells[src] = None
        self._cells[dst] = piece
        _LOGGER.debug("Moved %s from %s to %s", piece.kind, piece.position, destination)

    # -- Query helpers ------------------------------------------------------

    def pieces(self) -> list[Piece]:
        """Every piece on the board, row by row from y = 0."""
        return [piece for piece in self._cells if piece is not None]

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.pieces())

    def __len__(self) -> int:
        return sum(1 for piece in self._cells if piece is not None)

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(self._size - 1, -1, -1):
            row = []
            for x in range(self._size):
                p = self._cells[y * self._size + x]
                row.append(_GLYPHS[p.kind] if p else ".")
            rows.append(f"{y + 1:>2} {' '.join(row)}")
        rows.append("   " + " ".join(str((x + 1) % 10) for x in range(self._size)))
        return "\n".join(rows)
