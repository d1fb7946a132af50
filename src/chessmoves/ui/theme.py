"""Colour scheme for the board viewer."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from chessmoves.core.types import Coordinate


@dataclass(frozen=True)
class BoardTheme:
    """Colours for squares, labels, highlights and piece glyphs.

    Square shade alternates like a chessboard: (0, 0) is dark.
    """

    light_square: QColor
    dark_square: QColor
    label_on_light: QColor
    label_on_dark: QColor
    selected: QColor
    legal_target: QColor
    piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(238, 221, 190),
            dark_square=QColor(170, 128, 96),
            label_on_light=QColor(170, 128, 96),
            label_on_dark=QColor(238, 221, 190),
            selected=QColor(250, 230, 60, 110),
            legal_target=QColor(40, 110, 40, 70),
            piece=QColor(30, 30, 30),
        )

    @staticmethod
    def is_light(coord: Coordinate) -> bool:
        return (coord.x + coord.y) % 2 == 1

    def square_color(self, coord: Coordinate) -> QColor:
        return self.light_square if self.is_light(coord) else self.dark_square

    def label_color(self, coord: Coordinate) -> QColor:
        """Label colour that contrasts with the square at *coord*."""
        return self.label_on_light if self.is_light(coord) else self.label_on_dark
