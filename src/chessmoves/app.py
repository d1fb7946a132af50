"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from chessmoves.core import (
    DEFAULT_BOARD_SIZE,
    Board,
    ChessMovesError,
    Coordinate,
    Piece,
    PieceKind,
)
from chessmoves.display import print_legal_moves

_LOGGER = logging.getLogger(__name__)

DEMO_KNIGHT = Coordinate(6, 3)
DEMO_ROOK = Coordinate(6, 2)
DEMO_KNIGHT_TARGET = Coordinate(7, 5)


def build_demo_board(size: int = DEFAULT_BOARD_SIZE) -> tuple[Board, Piece, Piece]:
    """Board with the demo knight and rook placed side by side."""
    board = Board(size)
    knight = board.place_piece(PieceKind.KNIGHT, DEMO_KNIGHT)
    rook = board.place_piece(PieceKind.ROOK, DEMO_ROOK)
    return board, knight, rook


def run_demo(stream: TextIO | None = None, size: int = DEFAULT_BOARD_SIZE) -> int:
    """Show the knight's moves, move it, then show the rook's moves."""
    out = sys.stdout if stream is None else stream
    _board, knight, rook = build_demo_board(size)

    print_legal_moves(knight, out)
    moved = knight.attempt_move(DEMO_KNIGHT_TARGET)
    status = "done" if moved else "rejected"
    print(f"{knight.kind} to {DEMO_KNIGHT_TARGET}: {status}", file=out)
    print(file=out)
    print_legal_moves(rook, out)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessmoves",
        description="Show legal moves of pieces on a square grid board.",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help=f"board extent (default: {DEFAULT_BOARD_SIZE})",
    )
    parser.add_argument(
        "--gui", action="store_true", help="open the demo board in a window"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Launch the chessmoves demo."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.gui:
            from chessmoves.ui.bootstrap import run_application

            board, _knight, _rook = build_demo_board(args.size)
            return run_application(board)
        return run_demo(size=args.size)
    except (ChessMovesError, ValueError) as exc:
        _LOGGER.debug("Demo aborted", exc_info=True)
        print(f"chessmoves: error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
