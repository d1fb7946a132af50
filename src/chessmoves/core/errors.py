"""Exception hierarchy for board and move-template errors."""

from __future__ import annotations


class ChessMovesError(Exception):
    """Base class for all errors raised by :mod:`chessmoves`."""


class OutOfBoundsError(ChessMovesError, IndexError):
    """A coordinate lies outside the board."""


class OccupiedCellError(ChessMovesError, ValueError):
    """A piece was placed on a cell that already holds one."""


class InvalidTemplateError(ChessMovesError, ValueError):
    """A movement template was built from zero offsets."""


class UnknownPieceKindError(ChessMovesError, ValueError):
    """Template lookup received a value outside :class:`PieceKind`."""
