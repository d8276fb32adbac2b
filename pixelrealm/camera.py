"""Views onto the world: a free or following level camera and a menu camera."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet

from pixelrealm.entity import Control, Entity, movement_vector
from pixelrealm.tilemap import Vec2

ZOOM_IN_FACTOR = 1.01
ZOOM_OUT_FACTOR = 0.99
FOLLOW_OFFSET_X = 128.0


@dataclass
class View:
    """A rectangle of the world, given by its centre and size, mapped onto the screen."""

    center: Vec2 = (500.0, 500.0)
    size: Vec2 = (1000.0, 1000.0)

    def zoom(self, factor: float) -> None:
        """Scale the visible area by ``factor``."""
        self.size = (self.size[0] * factor, self.size[1] * factor)

    def move(self, offset: Vec2) -> None:
        """Shift the centre by ``offset``."""
        self.center = (self.center[0] + offset[0], self.center[1] + offset[1])

    def world_to_screen(self, point: Vec2, screen_size: tuple[float, float]) -> Vec2:
        """Map a world point to pixel coordinates on a screen of ``screen_size``."""
        return tuple(
            (p - c) / s * screen + screen / 2
            for p, c, s, screen in zip(point, self.center, self.size, screen_size)
        )

    def screen_to_world(self, point: Vec2, screen_size: tuple[float, float]) -> Vec2:
        """Map a pixel on a screen of ``screen_size`` back to world coordinates."""
        return tuple(
            (p - screen / 2) / screen * s + c
            for p, c, s, screen in zip(point, self.center, self.size, screen_size)
        )


def _fit(view: View, size: Vec2) -> None:
    view.size = (float(size[0]), float(size[1]))
    view.center = (view.size[0] / 2.0, view.size[1] / 2.0)


@dataclass
class Camera:
    """The level camera: steered by keys in camera mode, else following the player."""

    view: View = field(default_factory=View)
    camera_speed: float = 16.0
    initialized: bool = False

    def init_camera(self, window_size: Vec2) -> None:
        """Fit the view to the window, the first time only."""
        if not self.initialized:
            _fit(self.view, window_size)
            self.initialized = True

    def update(self, pressed: AbstractSet[Control]) -> None:
        """Pan and zoom according to the held controls."""
        if Control.ZOOM_IN in pressed:
            self.view.zoom(ZOOM_IN_FACTOR)
        if Control.ZOOM_OUT in pressed:
            self.view.zoom(ZOOM_OUT_FACTOR)
        dx, dy = movement_vector(pressed)
        if dx != 0.0 or dy != 0.0:
            self.view.move((dx * self.camera_speed, dy * self.camera_speed))

    def update_follow(self, entity: Entity) -> None:
        """Centre the view just right of ``entity``."""
        x, y = entity.position
        self.view.center = (x + FOLLOW_OFFSET_X, y)

    def resize(self, new_size: Vec2) -> None:
        """Fit the view to a new window size."""
        _fit(self.view, new_size)


@dataclass
class MenuCamera:
    """A fixed view that always covers the whole window."""

    view: View = field(default_factory=View)

    def init_menu_camera(self, window_size: Vec2) -> None:
        """Fit the view to the window."""
        _fit(self.view, window_size)

    def resize(self, new_size: Vec2) -> None:
        """Fit the view to a new window size."""
        _fit(self.view, new_size)