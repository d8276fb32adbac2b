"""The title menu with Play and Exit buttons over a background picture."""

from __future__ import annotations

import os

import pygame

from pixelrealm.button import Button
from pixelrealm.camera import MenuCamera
from pixelrealm.state import State
from pixelrealm.tilemap import Vec2

FONT_PATH = "../textures/apercumovistarbold.ttf"
BACKGROUND_PATH = "../textures/pixel_art_bg.jpg"
FONT_SIZE = 20
BACKGROUND_SCALE = 0.3

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)


def _load_font(path: str | os.PathLike) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.Font(os.fspath(path), FONT_SIZE)
    except (pygame.error, OSError) as exc:
        raise RuntimeError("failed to load font") from exc


def _load_background(path: str | os.PathLike) -> pygame.Surface:
    try:
        return pygame.image.load(os.fspath(path))
    except (pygame.error, OSError) as exc:
        raise RuntimeError("failed to load texture") from exc


class MenuState(State):
    """The menu screen; Play or Enter starts the level, Exit or Escape quits."""

    def __init__(
        self,
        font=None,
        background: pygame.Surface | None = None,
        *,
        font_path: str | os.PathLike = FONT_PATH,
        background_path: str | os.PathLike = BACKGROUND_PATH,
    ) -> None:
        self.font = font if font is not None else _load_font(font_path)
        self.menu_camera = MenuCamera()
        self.buttons = {
            "PLAY": Button(800, 200, 300, 100, self.font, "Play", WHITE, BLUE, GREEN),
            "EXIT": Button(800, 500, 300, 100, self.font, "Exit", WHITE, BLUE, GREEN),
        }
        if background is None:
            background = _load_background(background_path)
        width, height = background.get_size()
        self.background = pygame.transform.scale(
            background,
            (round(width * BACKGROUND_SCALE), round(height * BACKGROUND_SCALE)),
        )

    def handle_input(self, engine, event) -> None:
        """Close on quit or Escape, start the level on Enter, refit on resize."""
        if event.type == pygame.QUIT:
            engine.close()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                engine.close()
            if event.key == pygame.K_RETURN:
                engine.change_state(engine.level_factory())
        elif event.type == pygame.VIDEORESIZE:
            self.menu_camera.resize((float(event.w), float(event.h)))

    def update(self, engine, delta_time: float) -> None:
        """Track the mouse over the buttons."""
        screen = engine.window.get_size()
        self.menu_camera.init_menu_camera(screen)
        mouse_pos = self.menu_camera.view.screen_to_world(pygame.mouse.get_pos(), screen)
        self.update_buttons(engine, mouse_pos, bool(pygame.mouse.get_pressed()[0]))

    def render(self, engine) -> None:
        """Draw the background, the buttons and the overlay."""
        window = engine.window
        window.fill(BLACK)
        self.render_background(window)
        self.render_buttons(window)
        engine.draw_overlay()

    def update_buttons(self, engine, mouse_pos: Vec2, mouse_pressed: bool) -> None:
        """Update every button and act on a pressed one."""
        for button in self.buttons.values():
            button.update(mouse_pos, mouse_pressed)
        if self.buttons["PLAY"].is_pressed():
            engine.change_state(engine.level_factory())
        elif self.buttons["EXIT"].is_pressed():
            engine.close()

    def render_buttons(self, surface: pygame.Surface) -> None:
        """Draw every button."""
        for button in self.buttons.values():
            button.render(surface)

    def render_background(self, surface: pygame.Surface) -> None:
        """Draw the scaled background at the top-left corner."""
        surface.blit(self.background, (0, 0))