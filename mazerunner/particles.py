"""A small particle effect with gravity and fading."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import pygame

GRAVITY = 200.0
PARTICLE_RADIUS = 2.0
_TWO_PI = 2 * 3.14159


@dataclass
class Particle:
    """One particle: position, velocity, RGBA colour and remaining lifetime."""

    position: tuple[float, float]
    velocity: tuple[float, float]
    color: tuple[int, int, int, int]
    lifetime: float = 1.0


def _rgba(color: Sequence[int]) -> tuple[int, int, int, int]:
    if len(color) == 3:
        r, g, b = color
        return (r, g, b, 255)
    if len(color) == 4:
        r, g, b, a = color
        return (r, g, b, a)
    raise ValueError(f"colour must have 3 or 4 components, got {len(color)}")


class ParticleSystem:
    """Particles that fly out in random directions, fall and fade away."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._particles: list[Particle] = []

    def add_particle(self, position: tuple[float, float], color: Sequence[int]) -> None:
        """Emit one particle from a point in a random direction."""
        angle = self._rng.random() * _TWO_PI
        speed = 50.0 + self._rng.random() * 50.0
        self._particles.append(
            Particle(
                position=(float(position[0]), float(position[1])),
                velocity=(math.cos(angle) * speed, math.sin(angle) * speed),
                color=_rgba(color),
            )
        )

    def update(self, delta_time: float) -> None:
        """Move, accelerate and fade every particle; drop the expired ones."""
        for particle in self._particles:
            (px, py), (vx, vy) = particle.position, particle.velocity
            particle.position = (px + vx * delta_time, py + vy * delta_time)
            particle.velocity = (vx, vy + GRAVITY * delta_time)
            particle.lifetime -= delta_time
            alpha = max(0, min(255, int(255 * particle.lifetime)))
            particle.color = (*particle.color[:3], alpha)
        self._particles = [p for p in self._particles if p.lifetime > 0]

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every particle as a small translucent circle."""
        diameter = int(PARTICLE_RADIUS * 2)
        for particle in self._particles:
            dot = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
            pygame.draw.circle(dot, particle.color, (PARTICLE_RADIUS, PARTICLE_RADIUS), PARTICLE_RADIUS)
            surface.blit(dot, (int(particle.position[0]), int(particle.position[1])))

    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)