"""Core enumerations for the move calculator."""

from __future__ import annotations

from enum import IntEnum


class PieceKind(IntEnum):
    """Closed set of piece kinds a board can hold."""

    PAWN = 1
    BISHOP = 2
    KNIGHT = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def is_sliding(self) -> bool:
        """Whether the kind moves along rays of increasing length."""
        return self in (PieceKind.BISHOP, PieceKind.ROOK, PieceKind.QUEEN)

    def __str__(self) -> str:
        return self.name.capitalize()

    # IntEnum formats as int by default; f-strings should show the name.
    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)
