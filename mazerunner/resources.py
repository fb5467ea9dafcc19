"""Shared fonts, loaded once and cached per size."""

from __future__ import annotations

import sys
from functools import lru_cache

import pygame

FONT_PATHS = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/TTF/Arial.ttf",
)


def _ensure_font_module() -> None:
    if not pygame.font.get_init():
        pygame.font.init()


@lru_cache(maxsize=None)
def _font_path() -> str | None:
    """Return the first usable font file, or None to use the built-in font."""
    _ensure_font_module()
    for path in FONT_PATHS:
        try:
            pygame.font.Font(path, 12)
        except (OSError, pygame.error):
            continue
        print(f"Loaded font from: {path}")
        return path
    print("Warning: Could not load any font!", file=sys.stderr)
    return None


@lru_cache(maxsize=None)
def get_font(size: int) -> pygame.font.Font:
    """Return the game font at the given pixel size, shared between callers."""
    if size < 1:
        raise ValueError(f"font size must be positive, got {size}")
    _ensure_font_module()
    return pygame.font.Font(_font_path(), size)