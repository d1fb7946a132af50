"""Piece placed on a board, with move derivation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from chessmoves.core.enums import PieceKind
from chessmoves.core.move import GroundedMove
from chessmoves.core.templates import templates_for
from chessmoves.core.types import Coordinate

if TYPE_CHECKING:
    from chessmoves.core.board import Board

_LOGGER = logging.getLogger(__name__)


class Piece:
    """A piece of a fixed kind standing on a :class:`Board`.

    Pieces are created by :meth:`Board.place_piece` only. The board
    reference is used to query occupancy; the piece never writes to the
    board's grid directly.
    """

    __slots__ = ("_kind", "_board", "_position")

    def __init__(self, board: Board, position: Coordinate, kind: PieceKind) -> None:
        self._board = board
        self._position = position
        self._kind = kind

    # -- Attributes ---------------------------------------------------------

    @property
    def kind(self) -> PieceKind:
        return self._kind

    @property
    def board(self) -> Board:
        return self._board

    @property
    def position(self) -> Coordinate:
        return self._position

    # -- Move derivation ----------------------------------------------------

    def grounded_moves_in_bounds(self) -> list[GroundedMove]:
        """Templates grounded at the current position that stay on the board.

        A template with any step off the board is dropped entirely.
        """
        extent = self._board.size
        moves: list[GroundedMove] = []
        for template in templates_for(self._kind, extent):
            move = template.ground(self._position)
            if move.is_in_bounds(extent):
                moves.append(move)
        return moves

    def legal_moves(self) -> list[GroundedMove]:
        """In-bounds moves whose path crosses no occupied cell."""
        return [
            move
            for move in self.grounded_moves_in_bounds()
            if not move.is_blocked_on(self._board)
        ]

    def legal_destinations(self) -> list[Coordinate]:
        """Endpoints of :meth:`legal_moves`, in the same order."""
        return [move.endpoint for move in self.legal_moves()]

    # -- Mutation -----------------------------------------------------------

    def attempt_move(self, destination: Coordinate) -> bool:
        """Move to *destination* if it ends a legal move.

        Returns ``False`` and leaves the piece where it is otherwise.
        """
        if not self._board.in_bounds(destination):
            _LOGGER.debug(
                "%s at %s: destination %s is off the board",
                self._kind,
                self._position,
                destination,
            )
            return False
        if destination not in self.legal_destinations():
            _LOGGER.debug(
                "%s at %s: no legal move to %s", self._kind, self._position, destination
            )
            return False

        self._board._relocate(self, destination)
        self._position = destination
        return True

    # -- Presentation -------------------------------------------------------

    def display_legal_moves(self, stream: TextIO | None = None) -> None:
        """Print kind, position and every legal move to *stream*."""
        from chessmoves.display import print_legal_moves

        print_legal_moves(self, stream)

    def __repr__(self) -> str:
        return f"Piece({self._kind.name}, {self._position.x}, {self._position.y})"
