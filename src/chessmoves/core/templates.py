"""Per-kind movement templates.

Geometry here depends only on the piece kind and the board extent, never on
a particular board instance or where a piece stands on it.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache

from chessmoves.core.enums import PieceKind
from chessmoves.core.errors import UnknownPieceKindError
from chessmoves.core.move import MovementTemplate
from chessmoves.core.types import (
    BACK,
    DEFAULT_BOARD_SIZE,
    FORWARD,
    LEFT,
    RIGHT,
    Coordinate,
)

CARDINAL_DIRS: tuple[Coordinate, ...] = (FORWARD, RIGHT, BACK, LEFT)
DIAGONAL_DIRS: tuple[Coordinate, ...] = (
    FORWARD + RIGHT,
    BACK + RIGHT,
    BACK + LEFT,
    FORWARD + LEFT,
)

KING_STEPS: tuple[Coordinate, ...] = (
    FORWARD,
    FORWARD + RIGHT,
    RIGHT,
    BACK + RIGHT,
    BACK,
    BACK + LEFT,
    LEFT,
    FORWARD + LEFT,
)

KNIGHT_LEAPS: tuple[Coordinate, ...] = (
    FORWARD + FORWARD + RIGHT,
    FORWARD + FORWARD + LEFT,
    RIGHT + RIGHT + FORWARD,
    RIGHT + RIGHT + BACK,
    BACK + BACK + RIGHT,
    BACK + BACK + LEFT,
    LEFT + LEFT + FORWARD,
    LEFT + LEFT + BACK,
)


# -- Builders ----------------------------------------------------------------


def _rays(
    directions: tuple[Coordinate, ...], extent: int
) -> tuple[MovementTemplate, ...]:
    """Sliding templates, one per (length, direction) pair.

    Lengths run 1..extent-1 and are interleaved across directions; each
    template extends the previous one of its direction by one step.
    """
    templates: list[MovementTemplate] = []
    current: list[MovementTemplate | None] = [None] * len(directions)
    for length in range(1, extent):
        for idx, direction in enumerate(directions):
            step = direction.scaled(length)
            previous = current[idx]
            if previous is None:
                ray = MovementTemplate.single(step)
            else:
                ray = previous.extended(step)
            current[idx] = ray
            templates.append(ray)
    return tuple(templates)


def _singles(steps: tuple[Coordinate, ...]) -> tuple[MovementTemplate, ...]:
    return tuple(MovementTemplate.single(step) for step in steps)


def _pawn(extent: int) -> tuple[MovementTemplate, ...]:
    return (MovementTemplate.single(FORWARD),)


def _knight(extent: int) -> tuple[MovementTemplate, ...]:
    return _singles(KNIGHT_LEAPS)


def _king(extent: int) -> tuple[MovementTemplate, ...]:
    return _singles(KING_STEPS)


def _rook(extent: int) -> tuple[MovementTemplate, ...]:
    return _rays(CARDINAL_DIRS, extent)


def _bishop(extent: int) -> tuple[MovementTemplate, ...]:
    return _rays(DIAGONAL_DIRS, extent)


def _queen(extent: int) -> tuple[MovementTemplate, ...]:
    return _rook(extent) + _bishop(extent)


_BUILDERS: dict[PieceKind, Callable[[int], tuple[MovementTemplate, ...]]] = {
    PieceKind.PAWN: _pawn,
    PieceKind.BISHOP: _bishop,
    PieceKind.KNIGHT: _knight,
    PieceKind.ROOK: _rook,
    PieceKind.QUEEN: _queen,
    PieceKind.KING: _king,
}


@lru_cache(maxsize=64)
def _cached_templates(kind: PieceKind, extent: int) -> tuple[MovementTemplate, ...]:
    return _BUILDERS[kind](extent)


# -- Public API ----------------------------------------------------------------


def templates_for(
    kind: PieceKind, extent: int = DEFAULT_BOARD_SIZE
) -> tuple[MovementTemplate, ...]:
    """All movement templates for *kind* on an *extent* × *extent* board."""
    try:
        kind = PieceKind(kind)
    except ValueError:
        raise UnknownPieceKindError(
            f"No movement templates for unknown piece kind: {kind!r}"
        ) from None
    return _cached_templates(kind, extent)
