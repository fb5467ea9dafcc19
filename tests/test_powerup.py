import pygame
import pytest

from mazerunner.geometry import POWERUP_DURATION, Point
from mazerunner.powerup import PowerUp, PowerUpType


def _drawn_colour(kind):
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    PowerUp(kind, Point(1, 1)).draw(surface, 30.0)
    return tuple(surface.get_at((50, 50)))[:3]


def test_new_powerup_is_active_with_full_duration():
    power = PowerUp(PowerUpType.TELEPORT, Point(3, 4))
    assert power.active is True
    assert power.duration == POWERUP_DURATION
    assert power.position == Point(3, 4)
    assert power.kind is PowerUpType.TELEPORT


def test_update_counts_down():
    power = PowerUp(PowerUpType.SPEED_BOOST, Point(1, 1))
    power.update(3.0)
    assert power.duration == pytest.approx(POWERUP_DURATION - 3.0)
    assert power.active is True


def test_expires_when_duration_spent():
    power = PowerUp(PowerUpType.SPEED_BOOST, Point(1, 1))
    power.update(POWERUP_DURATION)
    assert power.active is False


def test_expired_powerup_stops_counting():
    power = PowerUp(PowerUpType.WALL_BREAK, Point(1, 1))
    power.update(POWERUP_DURATION + 1.0)
    remaining = power.duration
    power.update(5.0)
    assert power.duration == remaining
    assert power.active is False


def test_each_kind_draws_distinct_colour():
    colours = {_drawn_colour(kind) for kind in PowerUpType}
    assert len(colours) == len(PowerUpType)


@pytest.mark.parametrize("kind", list(PowerUpType))
def test_draw_uses_kind_colour(kind):
    assert _drawn_colour(kind) == kind.color


def test_inactive_powerup_draws_nothing():
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    power = PowerUp(PowerUpType.REVEAL_PATH, Point(1, 1))
    power.update(POWERUP_DURATION + 1.0)
    power.draw(surface, 30.0)
    assert tuple(surface.get_at((50, 50)))[:3] == (0, 0, 0)