"""Sprites that live in the world and the controls that steer them."""

from __future__ import annotations

import enum
import math
import os
from abc import ABC, abstractmethod
from typing import AbstractSet

import pygame

from pixelrealm.tilemap import Vec2

DEFAULT_TEXTURE = "../textures/char_a_p1_0bas_humn_v00.png"
FRAME_SIZE = 64


class Control(enum.Enum):
    """Held keys the game reacts to, valued by their pygame key code."""

    LEFT = pygame.K_a
    RIGHT = pygame.K_d
    UP = pygame.K_w
    DOWN = pygame.K_s
    ZOOM_IN = pygame.K_e
    ZOOM_OUT = pygame.K_q


def pressed_controls() -> frozenset[Control]:
    """Return the controls whose keys are held down right now."""
    keys = pygame.key.get_pressed()
    return frozenset(control for control in Control if keys[control.value])


def movement_vector(pressed: AbstractSet[Control]) -> Vec2:
    """Return the unit direction the held arrow controls point in, or (0, 0)."""
    x = float(Control.RIGHT in pressed) - float(Control.LEFT in pressed)
    y = float(Control.DOWN in pressed) - float(Control.UP in pressed)
    length = math.hypot(x, y)
    if length == 0.0:
        return (0.0, 0.0)
    return (x / length, y / length)


class Entity(ABC):
    """A textured sprite with a world position."""

    def __init__(
        self,
        texture: pygame.Surface | None = None,
        *,
        texture_path: str | os.PathLike = DEFAULT_TEXTURE,
    ) -> None:
        if texture is None:
            try:
                texture = pygame.image.load(os.fspath(texture_path))
            except (pygame.error, OSError) as exc:
                raise RuntimeError(
                    f"failed to load texture {os.fspath(texture_path)}"
                ) from exc
        self.texture = texture
        self.position: Vec2 = (100.0, 100.0)
        self.velocity: Vec2 = (0.0, 0.0)
        self.scale: Vec2 = (4.0, 4.0)
        self.texture_rect: tuple[int, int, int, int] = (0, 0, FRAME_SIZE, FRAME_SIZE)

    @abstractmethod
    def update(self, pressed: AbstractSet[Control]) -> None:
        """Advance the entity one frame given the held controls."""

    def draw(self, surface: pygame.Surface, view) -> None:
        """Draw the current texture frame onto ``surface`` through ``view``."""
        screen = surface.get_size()
        left, top, width, height = self.bounds()
        x0, y0 = view.world_to_screen((left, top), screen)
        x1, y1 = view.world_to_screen((left + width, top + height), screen)
        size = (round(x1) - round(x0), round(y1) - round(y0))
        source = pygame.Rect(self.texture_rect).clip(self.texture.get_rect())
        if source.width == 0 or source.height == 0 or size[0] <= 0 or size[1] <= 0:
            return
        image = pygame.transform.scale(self.texture.subsurface(source), size)
        surface.blit(image, (round(x0), round(y0)))

    def move(self, offset: Vec2) -> None:
        """Shift the position by ``offset``."""
        self.position = (self.position[0] + offset[0], self.position[1] + offset[1])

    def set_texture_rect(self, rect: tuple[int, int, int, int]) -> None:
        """Choose which part of the texture is shown."""
        self.texture_rect = tuple(rect)

    def bounds(self) -> tuple[float, float, float, float]:
        """Return (left, top, width, height) of the sprite in world space."""
        _, _, width, height = self.texture_rect
        return (
            self.position[0],
            self.position[1],
            width * self.scale[0],
            height * self.scale[1],
        )