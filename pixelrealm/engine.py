"""The game engine: window, frame loop, current state and debug overlay."""

from __future__ import annotations

import os

import pygame

from pixelrealm.level_state import LevelState
from pixelrealm.menu_state import MenuState
from pixelrealm.mesh import Mesh
from pixelrealm.tilemap import Vec2

WINDOW_SIZE = (1920, 1080)
WINDOW_TITLE = "My window"
FRAME_RATE = 60

OVERLAY_TITLE = "Control"
OVERLAY_FONT_SIZE = 18
_PANEL_X, _PANEL_Y = 10, 10
_PADDING = 6
_TITLE_HEIGHT = 24
_BUTTON_W, _BUTTON_H = 140, 24
_SPACING = 4
_PANEL_COLOR = (40, 40, 40)
_BUTTON_COLOR = (66, 90, 140)
_LABEL_COLOR = (255, 255, 255)

_OVERLAY_LABELS = ("playerMode", "cameraMode", "menu state", "level state")


def _overlay_layout() -> dict[str, tuple[int, int, int, int]]:
    rects = {}
    y = _PANEL_Y + _TITLE_HEIGHT
    for label in _OVERLAY_LABELS:
        rects[label] = (_PANEL_X + _PADDING, y, _BUTTON_W, _BUTTON_H)
        y += _BUTTON_H + _SPACING
    return rects


OVERLAY_BUTTONS = _overlay_layout()
OVERLAY_PANEL = (
    _PANEL_X,
    _PANEL_Y,
    _BUTTON_W + 2 * _PADDING,
    _TITLE_HEIGHT + len(_OVERLAY_LABELS) * (_BUTTON_H + _SPACING) + _PADDING,
)


class Engine:
    """Runs the current state in a frame loop until the window is closed."""

    def __init__(
        self,
        window: pygame.Surface | None = None,
        *,
        menu_factory=None,
        level_factory=None,
    ) -> None:
        self.window = window
        self.running = window is not None
        self.camera_mode = False
        self.meshes: list[Mesh] = []
        self.current_state = None
        self.menu_factory = menu_factory if menu_factory is not None else MenuState
        self.level_factory = level_factory if level_factory is not None else LevelState
        self.pending_click: Vec2 | None = None
        self._overlay_font = None
        self._owns_display = False

    def init_window(self) -> None:
        """Open the resizable game window and prepare the overlay."""
        pygame.init()
        try:
            self.window = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        except pygame.error as exc:
            raise RuntimeError("failed to open window") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        self._owns_display = True
        self.running = True
        try:
            self._overlay_font = pygame.font.Font(None, OVERLAY_FONT_SIZE)
        except (pygame.error, OSError) as exc:
            raise RuntimeError("failed to load overlay") from exc

    def main_loop(self) -> None:
        """Feed events to the current state, update and render until closed."""
        if self.current_state is None:
            raise RuntimeError("no state to run")
        clock = pygame.time.Clock()
        while self.running:
            delta_time = clock.tick(FRAME_RATE) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.pending_click = event.pos
                self.current_state.handle_input(self, event)
            self.current_state.update(self, delta_time)
            self.current_state.render(self)
            if self.window is not None and self.window is pygame.display.get_surface():
                pygame.display.flip()
        self.cleanup()

    def create_meshes(self) -> None:
        """Create the engine's stock meshes."""
        self.create_mesh("../textures/soldier.png", (100.0, 100.0), (2.0, 2.0))

    def create_mesh(
        self, texture_path: str | os.PathLike, position: Vec2, scale: Vec2
    ) -> None:
        """Load a textured quad and keep it."""
        mesh = Mesh(position=tuple(position), scale=tuple(scale))
        mesh.init_primitives(texture_path)
        self.meshes.append(mesh)

    def cleanup(self) -> None:
        """Release the overlay and, if this engine opened it, the display."""
        self._overlay_font = None
        if self._owns_display:
            pygame.quit()
            self._owns_display = False

    def draw_overlay(self) -> None:
        """Draw the control panel and act on a pending click on one of its buttons."""
        if self.window is None:
            raise RuntimeError("window is not open")
        if self._overlay_font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._overlay_font = pygame.font.Font(None, OVERLAY_FONT_SIZE)

        click, self.pending_click = self.pending_click, None
        clicked = None
        if click is not None:
            clicked = next(
                (
                    label
                    for label, rect in OVERLAY_BUTTONS.items()
                    if pygame.Rect(rect).collidepoint(click)
                ),
                None,
            )

        if clicked == "playerMode":
            self.camera_mode = False
        elif clicked == "cameraMode":
            self.camera_mode = True
        elif clicked == "menu state":
            self.change_state(self.menu_factory())
        elif clicked == "level state":
            self.change_state(self.level_factory())

        self._draw_panel()

    def _draw_panel(self) -> None:
        font = self._overlay_font
        pygame.draw.rect(self.window, _PANEL_COLOR, pygame.Rect(OVERLAY_PANEL))
        title = font.render(OVERLAY_TITLE, True, _LABEL_COLOR)
        self.window.blit(title, (_PANEL_X + _PADDING, _PANEL_Y + _PADDING))
        for label, rect in OVERLAY_BUTTONS.items():
            area = pygame.Rect(rect)
            pygame.draw.rect(self.window, _BUTTON_COLOR, area)
            text = font.render(label, True, _LABEL_COLOR)
            self.window.blit(text, text.get_rect(center=area.center))

    def change_state(self, new_state) -> None:
        """Make ``new_state`` the running state."""
        self.current_state = new_state

    def close(self) -> None:
        """Stop the frame loop after the current frame."""
        self.running = False