"""Enemies that patrol a square path around their starting cell."""

from __future__ import annotations

import math

import pygame

from .geometry import Point

ENEMY_COLOR = (255, 0, 0)
PATROL_SIDE = 3


class Enemy:
    """An enemy walking a closed square patrol at a fixed speed."""

    def __init__(self, start: Point, speed: float) -> None:
        self.position = start
        self.speed = speed
        self._progress = 0.0
        self.patrol_path: tuple[Point, ...] = (
            start,
            Point(start.x + PATROL_SIDE, start.y),
            Point(start.x + PATROL_SIDE, start.y + PATROL_SIDE),
            Point(start.x, start.y + PATROL_SIDE),
        )

    def update(self, delta_time: float) -> None:
        """Advance along the patrol path by speed times elapsed seconds."""
        count = len(self.patrol_path)
        if count < 2:
            return
        self._progress += self.speed * delta_time
        if self._progress >= count:
            self._progress = math.fmod(self._progress, count)

        index = int(self._progress)
        current = self.patrol_path[index]
        following = self.patrol_path[(index + 1) % count]
        fraction = self._progress - index
        self.position = Point(
            int(current.x + (following.x - current.x) * fraction),
            int(current.y + (following.y - current.y) * fraction),
        )

    def check_collision(self, player_pos: Point) -> bool:
        """Return True when the enemy occupies the player's cell."""
        return (
            abs(self.position.x - player_pos.x) < 1.0
            and abs(self.position.y - player_pos.y) < 1.0
        )

    def draw(self, surface: pygame.Surface, cell_size: float) -> None:
        """Draw the enemy as a red circle inside its cell."""
        radius = cell_size * 0.4
        left = self.position.x * cell_size + cell_size * 0.1
        top = self.position.y * cell_size + cell_size * 0.1
        pygame.draw.circle(surface, ENEMY_COLOR, (left + radius, top + radius), radius)