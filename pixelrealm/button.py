"""A clickable rectangular menu button."""

from __future__ import annotations

import enum

import pygame

from pixelrealm.tilemap import Vec2

Color = tuple[int, ...]
TEXT_COLOR: Color = (0, 0, 0)


class ButtonState(enum.Enum):
    IDLE = enum.auto()
    HOVER = enum.auto()
    ACTIVE = enum.auto()


class Button:
    """A labelled rectangle that changes colour on hover and press.

    ``font`` is anything with pygame's ``size`` and ``render`` methods; the
    label is meant to be drawn at a 20-pixel character size.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        font,
        text: str,
        idle_color: Color,
        hover_color: Color,
        active_color: Color,
    ) -> None:
        self.rect = (float(x), float(y), float(width), float(height))
        self.font = font
        self.text = text
        self.idle_color = idle_color
        self.hover_color = hover_color
        self.active_color = active_color
        self.state = ButtonState.IDLE
        self.fill_color = idle_color

        text_w, text_h = font.size(text)
        self.text_position: Vec2 = (
            x + width / 2.0 - text_w / 2.0,
            y + height / 2.0 - text_h / 2.0,
        )

    def _contains(self, point: Vec2) -> bool:
        left, top, width, height = self.rect
        px, py = point
        return left <= px < left + width and top <= py < top + height

    def update(self, mouse_pos: Vec2, mouse_pressed: bool) -> None:
        """Set the state from the mouse position and left-button state."""
        if self._contains(mouse_pos):
            self.state = ButtonState.ACTIVE if mouse_pressed else ButtonState.HOVER
        else:
            self.state = ButtonState.IDLE
        self.fill_color = {
            ButtonState.IDLE: self.idle_color,
            ButtonState.HOVER: self.hover_color,
            ButtonState.ACTIVE: self.active_color,
        }[self.state]

    def is_pressed(self) -> bool:
        """True while the button is being clicked."""
        return self.state is ButtonState.ACTIVE

    def render(self, surface: pygame.Surface) -> None:
        """Draw the rectangle and its label."""
        left, top, width, height = self.rect
        pygame.draw.rect(surface, self.fill_color, pygame.Rect(left, top, width, height))
        label = self.font.render(self.text, True, TEXT_COLOR)
        surface.blit(label, (round(self.text_position[0]), round(self.text_position[1])))