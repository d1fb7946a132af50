"""Plain-text presentation of a piece's legal moves."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from chessmoves.core.piece import Piece


def format_legal_moves(piece: Piece) -> list[str]:
    """Header line followed by one numbered ``origin => destination`` per move."""
    lines = [f"{piece.kind} : {piece.position}"]
    for number, move in enumerate(piece.legal_moves(), start=1):
        lines.append(f"{number}. {move}")
    return lines


def print_legal_moves(piece: Piece, stream: TextIO | None = None) -> None:
    out = sys.stdout if stream is None else stream
    for line in format_legal_moves(piece):
        print(line, file=out)
    print(file=out)
