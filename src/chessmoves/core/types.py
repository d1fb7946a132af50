"""Coordinate value type and board-extent helpers.

Board layout (0-indexed storage, 1-indexed display)::

    y = extent-1   (1, N) ... (N, N)
    ...
    y = 0          (1, 1) ... (N, 1)
                   x = 0      x = extent-1
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable 2D integer position or offset."""

    x: int
    y: int

    # ── Arithmetic ───────────────────────────────────────────────────────

    def __add__(self, other: Coordinate) -> Coordinate:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coordinate) -> Coordinate:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self.x - other.x, self.y - other.y)

    def scaled(self, factor: int) -> Coordinate:
        """Both components multiplied by *factor*."""
        return Coordinate(self.x * factor, self.y * factor)

    # ── Bounds ───────────────────────────────────────────────────────────

    def in_bounds(self, extent: int = DEFAULT_BOARD_SIZE) -> bool:
        return 0 <= self.x < extent and 0 <= self.y < extent

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """1-indexed form, e.g. Coordinate(0, 7) → '(1, 8)'."""
        return f"({self.x + 1}, {self.y + 1})"


def in_bounds(coord: Coordinate, extent: int = DEFAULT_BOARD_SIZE) -> bool:
    """Check whether *coord* lies on an *extent* × *extent* board."""
    return coord.in_bounds(extent)


# ── Unit steps ──────────────────────────────────────────────────────────────

FORWARD = Coordinate(0, 1)
RIGHT = Coordinate(1, 0)
BACK = Coordinate(0, -1)
LEFT = Coordinate(-1, 0)
