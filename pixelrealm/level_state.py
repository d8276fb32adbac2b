"""The playable level: a tile map, the player and a camera."""

from __future__ import annotations

import pygame

from pixelrealm.camera import Camera
from pixelrealm.entity import pressed_controls
from pixelrealm.player import Player
from pixelrealm.state import State
from pixelrealm.tilemap import TileMap

BACKGROUND_COLOR = (255, 255, 255)


class LevelState(State):
    """The level screen; Enter returns to the menu, Escape quits."""

    def __init__(
        self,
        player: Player | None = None,
        tile_map: TileMap | None = None,
        camera: Camera | None = None,
    ) -> None:
        self.player = player if player is not None else Player()
        self.tile_map = tile_map if tile_map is not None else TileMap()
        self.camera = camera if camera is not None else Camera()

    def handle_input(self, engine, event) -> None:
        """Close on quit or Escape, go to the menu on Enter, refit on resize."""
        if event.type == pygame.QUIT:
            engine.close()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                engine.close()
            if event.key == pygame.K_RETURN:
                engine.change_state(engine.menu_factory())
        if event.type == pygame.VIDEORESIZE:
            self.camera.resize((float(event.w), float(event.h)))

    def update(self, engine, delta_time: float) -> None:
        """Move the free camera in camera mode, otherwise the player and its camera."""
        self.camera.init_camera(engine.window.get_size())
        pressed = pressed_controls()
        if engine.camera_mode:
            self.camera.update(pressed)
        else:
            self.player.update(pressed)
            self.camera.update_follow(self.player)

    def render(self, engine) -> None:
        """Draw the map, the player and the overlay."""
        window = engine.window
        window.fill(BACKGROUND_COLOR)
        view = self.camera.view
        self.tile_map.draw(window, view)
        if self.tile_map.tileset is None:
            self.tile_map.create_tile_map()
        self.player.draw(window, view)
        engine.draw_overlay()