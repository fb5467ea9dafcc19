"""A clickable rectangular button with a centred label and a hover colour."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from .resources import get_font

DEFAULT_CHARACTER_SIZE = 24
DEFAULT_TEXT_COLOR = (255, 255, 255)

Color = Sequence[int]


class Button:
    """A rectangle that highlights under the mouse and reports left clicks."""

    def __init__(
        self,
        label: str,
        position: tuple[float, float],
        size: tuple[float, float],
        normal_color: Color,
        hover_color: Color,
    ) -> None:
        self._label = label
        self._position = (float(position[0]), float(position[1]))
        self._size = (float(size[0]), float(size[1]))
        self.normal_color = tuple(normal_color)
        self.hover_color = tuple(hover_color)
        self.fill_color = self.normal_color
        self.is_hovered = False
        self._character_size = DEFAULT_CHARACTER_SIZE
        self._text_color = DEFAULT_TEXT_COLOR
        self._render_text()

    @property
    def label(self) -> str:
        return self._label

    @label.setter
    def label(self, value: str) -> None:
        self._label = value
        self._render_text()

    @property
    def position(self) -> tuple[float, float]:
        return self._position

    @position.setter
    def position(self, value: tuple[float, float]) -> None:
        self._position = (float(value[0]), float(value[1]))
        self._center_text()

    @property
    def size(self) -> tuple[float, float]:
        return self._size

    @size.setter
    def size(self, value: tuple[float, float]) -> None:
        self._size = (float(value[0]), float(value[1]))
        self._center_text()

    @property
    def character_size(self) -> int:
        return self._character_size

    @character_size.setter
    def character_size(self, value: int) -> None:
        self._character_size = value
        self._render_text()

    @property
    def text_color(self) -> tuple[int, ...]:
        return tuple(self._text_color)

    @text_color.setter
    def text_color(self, value: Color) -> None:
        self._text_color = tuple(value)
        self._render_text()

    @property
    def text_rect(self) -> pygame.Rect:
        """Where the label is drawn."""
        return self._text_surface.get_rect(topleft=self._text_pos)

    def set_colors(self, normal_color: Color, hover_color: Color) -> None:
        """Change both colours; the fill follows unless the mouse is over it."""
        self.normal_color = tuple(normal_color)
        self.hover_color = tuple(hover_color)
        if not self.is_hovered:
            self.fill_color = self.normal_color

    def contains(self, point: tuple[float, float]) -> bool:
        """Return True if the point lies inside the button's rectangle."""
        x, y = point
        left, top = self._position
        width, height = self._size
        return left <= x < left + width and top <= y < top + height

    def update(self, mouse_pos: tuple[float, float]) -> None:
        """Track whether the mouse is over the button and recolour it."""
        was_hovered = self.is_hovered
        self.is_hovered = self.contains(mouse_pos)
        if was_hovered != self.is_hovered:
            self.fill_color = self.hover_color if self.is_hovered else self.normal_color

    def is_clicked(self, event: pygame.event.Event) -> bool:
        """Return True for a left mouse press inside the button."""
        if event.type != pygame.MOUSEBUTTONDOWN or getattr(event, "button", None) != 1:
            return False
        return self.contains(event.pos)

    def draw(self, surface: pygame.Surface) -> None:
        left, top = self._position
        width, height = self._size
        pygame.draw.rect(surface, self.fill_color, pygame.Rect(int(left), int(top), int(width), int(height)))
        surface.blit(self._text_surface, self._text_pos)

    def _render_text(self) -> None:
        font = get_font(self._character_size)
        self._text_surface = font.render(self._label, True, self._text_color)
        self._center_text()

    def _center_text(self) -> None:
        left, top = self._position
        width, height = self._size
        text_width, text_height = self._text_surface.get_size()
        self._text_pos = (
            int(left + (width - text_width) / 2.0),
            int(top + (height - text_height) / 2.0),
        )