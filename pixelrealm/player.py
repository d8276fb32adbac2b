"""The player character."""

from __future__ import annotations

from typing import AbstractSet

from pixelrealm.entity import FRAME_SIZE, Control, Entity, movement_vector

ANIMATION_WIDTH = 384
ROW_LEFT = 448
ROW_RIGHT = 384
ROW_UP = 320
ROW_DOWN = 256
ANIMATION_STEP = 0.05


class Player(Entity):
    """A walking character with a four-direction sprite sheet."""

    def __init__(self, texture=None, **kwargs) -> None:
        super().__init__(texture, **kwargs)
        self.player_speed = 6.0
        self.tex_width = 0
        self.timer = 0.0
        self.timer_max = 0.25

    def animate(self, max_texture_pixel: int, row: int) -> None:
        """Advance the walk cycle on sprite-sheet row ``row``."""
        self.timer += ANIMATION_STEP
        if self.timer < self.timer_max:
            return
        self.tex_width += FRAME_SIZE
        if self.tex_width >= max_texture_pixel:
            self.tex_width = 0
        if self.tex_width < self.texture.get_width():
            self.set_texture_rect((self.tex_width, row, FRAME_SIZE, FRAME_SIZE))
        self.timer = 0.0

    def update(self, pressed: AbstractSet[Control]) -> None:
        """Walk in the held direction and animate."""
        dx, dy = movement_vector(pressed)
        if dx == 0.0 and dy == 0.0:
            return
        self.move((dx * self.player_speed, dy * self.player_speed))
        if Control.LEFT in pressed:
            self.animate(ANIMATION_WIDTH, ROW_LEFT)
        elif Control.RIGHT in pressed:
            self.animate(ANIMATION_WIDTH, ROW_RIGHT)
        elif Control.UP in pressed:
            self.animate(ANIMATION_WIDTH, ROW_UP)
        elif Control.DOWN in pressed:
            self.animate(ANIMATION_WIDTH, ROW_DOWN)