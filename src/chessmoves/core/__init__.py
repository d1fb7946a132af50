"""Core domain layer — move geometry, board and pieces, no external dependencies.

Quick start::

    from chessmoves.core import Board, Coordinate, PieceKind

    board = Board()
    knight = board.place_piece(PieceKind.KNIGHT, Coordinate(3, 3))
    for move in knight.legal_moves():
        print(move)
"""

from chessmoves.core.board import Board
from chessmoves.core.enums import PieceKind
from chessmoves.core.errors import (
    ChessMovesError,
    InvalidTemplateError,
    OccupiedCellError,
    OutOfBoundsError,
    UnknownPieceKindError,
)
from chessmoves.core.move import GroundedMove, MovementTemplate
from chessmoves.core.piece import Piece
from chessmoves.core.templates import templates_for
from chessmoves.core.types import DEFAULT_BOARD_SIZE, Coordinate, in_bounds

__all__ = [
    # Enums
    "PieceKind",
    # Types / helpers
    "Coordinate",
    "DEFAULT_BOARD_SIZE",
    "in_bounds",
    # Errors
    "ChessMovesError",
    "InvalidTemplateError",
    "OccupiedCellError",
    "OutOfBoundsError",
    "UnknownPieceKindError",
    # Domain objects
    "Board",
    "GroundedMove",
    "MovementTemplate",
    "Piece",
    "templates_for",
]
