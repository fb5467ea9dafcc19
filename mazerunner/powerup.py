"""Collectible power-ups that expire after a fixed time."""

from __future__ import annotations

from enum import Enum

import pygame

from .geometry import POWERUP_DURATION, Point


class PowerUpType(Enum):
    """The kinds of power-up, each with its display colour."""

    SPEED_BOOST = (255, 255, 0)
    WALL_BREAK = (255, 0, 0)
    TELEPORT = (0, 0, 255)
    REVEAL_PATH = (0, 255, 0)
    TIME_SLOW = (255, 0, 255)

    @property
    def color(self) -> tuple[int, int, int]:
        return self.value


class PowerUp:
    """A power-up lying on a maze cell, active until its duration runs out."""

    def __init__(self, kind: PowerUpType, position: Point) -> None:
        self.kind = kind
        self.position = position
        self.active = True
        self.duration = POWERUP_DURATION

    def update(self, delta_time: float) -> None:
        """Count down the remaining time and deactivate when it is spent."""
        if self.active and self.duration > 0:
            self.duration -= delta_time
            if self.duration <= 0:
                self.active = False

    def draw(self, surface: pygame.Surface, cell_size: float) -> None:
        """Draw an active power-up as a coloured circle; inactive ones are hidden."""
        if not self.active:
            return
        radius = cell_size / 3.0
        left = self.position.x * cell_size + cell_size / 3.0
        top = self.position.y * cell_size + cell_size / 3.0
        pygame.draw.circle(surface, self.kind.color, (left + radius, top + radius), radius)