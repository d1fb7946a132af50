"""Movement templates and their board-grounded counterparts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessmoves.core.errors import InvalidTemplateError
from chessmoves.core.types import DEFAULT_BOARD_SIZE, Coordinate

if TYPE_CHECKING:
    from chessmoves.core.board import Board


@dataclass(frozen=True, slots=True)
class MovementTemplate:
    """One candidate move as cumulative offsets from an unspecified origin.

    Each offset is the total displacement after that many steps, so the last
    one is where the move ends. Templates hold no piece or board state and
    are shared between all pieces of a kind.
    """

    offsets: tuple[Coordinate, ...]

    def __init__(self, offsets: Iterable[Coordinate]) -> None:
        steps = tuple(offsets)
        if not steps:
            raise InvalidTemplateError(
                "MovementTemplate can't be built from an empty sequence of offsets"
            )
        object.__setattr__(self, "offsets", steps)

    @classmethod
    def single(cls, step: Coordinate) -> MovementTemplate:
        """Template made of exactly one offset (leapers)."""
        return cls((step,))

    @property
    def endpoint(self) -> Coordinate:
        """Offset of the final step."""
        return self.offsets[-1]

    def extended(self, step: Coordinate) -> MovementTemplate:
        """Copy with *step* appended as a new cumulative offset."""
        return MovementTemplate((*self.offsets, step))

    def ground(self, origin: Coordinate) -> GroundedMove:
        """Translate every offset by *origin*."""
        return GroundedMove(origin, tuple(origin + offset for offset in self.offsets))

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.offsets)

    def __len__(self) -> int:
        return len(self.offsets)


@dataclass(frozen=True, slots=True)
class GroundedMove:
    """A template translated to absolute board coordinates.

    ``steps`` excludes the origin square itself.
    """

    origin: Coordinate
    steps: tuple[Coordinate, ...]

    @property
    def endpoint(self) -> Coordinate:
        return self.steps[-1]

    def is_in_bounds(self, extent: int = DEFAULT_BOARD_SIZE) -> bool:
        """Whether every step lies on the board."""
        return all(step.in_bounds(extent) for step in self.steps)

    def is_blocked_on(self, board: Board) -> bool:
        """Whether any step along the path is occupied on *board*."""
        return any(board.cell_occupied(step) for step in self.steps)

    def __str__(self) -> str:
        return f"{self.origin} => {self.endpoint}"
