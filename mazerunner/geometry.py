"""Grid coordinates and the fixed dimensions of the game."""

from __future__ import annotations

from dataclasses import dataclass

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
BASE_CELL_SIZE = 30.0
MINIMAP_SCALE = 0.5
POWERUP_DURATION = 10.0


@dataclass(frozen=True)
class Point:
    """An integer cell position on the maze grid."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)