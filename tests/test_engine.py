import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from pixelrealm.engine import OVERLAY_BUTTONS, WINDOW_SIZE, Engine
from pixelrealm.state import State


class _Stub(State):
    def handle_input(self, engine, event):
        pass

    def update(self, engine, delta_time):
        pass

    def render(self, engine):
        pass


class _OneFrame(State):
    def __init__(self):
        self.calls = []
        self.event_types = []

    def handle_input(self, engine, event):
        self.event_types.append(event.type)

    def update(self, engine, delta_time):
        self.calls.append("update")
        engine.close()

    def render(self, engine):
        self.calls.append("render")
        engine.draw_overlay()


def _center(label):
    return pygame.Rect(OVERLAY_BUTTONS[label]).center


@pytest.fixture(autouse=True)
def _pygame():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def menu():
    return _Stub()


@pytest.fixture
def level():
    return _Stub()


@pytest.fixture
def engine(menu, level):
    return Engine(
        window=pygame.Surface((800, 600)),
        menu_factory=lambda: menu,
        level_factory=lambda: level,
    )


def test_init_window_opens_display_and_cleanup_releases_it():
    engine = Engine()
    assert engine.running is False
    engine.init_window()
    assert engine.window.get_size() == WINDOW_SIZE
    assert pygame.display.get_caption()[0] == "My window"
    assert engine.running is True
    engine.cleanup()
    assert pygame.display.get_init() is False


def test_change_state_and_close(engine, menu):
    engine.change_state(menu)
    assert engine.current_state is menu
    engine.close()
    assert engine.running is False


def test_overlay_camera_mode(engine):
    engine.pending_click = _center("cameraMode")
    engine.draw_overlay()
    assert engine.camera_mode is True
    assert engine.pending_click is None


def test_overlay_player_mode(engine):
    engine.camera_mode = True
    engine.pending_click = _center("playerMode")
    engine.draw_overlay()
    assert engine.camera_mode is False


@pytest.mark.parametrize("label", ["menu state", "level state"])
def test_overlay_switches_state(engine, menu, level, label):
    engine.pending_click = _center(label)
    engine.draw_overlay()
    expected = menu if label == "menu state" else level
    assert engine.current_state is expected


def test_overlay_click_elsewhere_does_nothing(engine):
    engine.pending_click = (790, 590)
    engine.draw_overlay()
    assert engine.camera_mode is False
    assert engine.current_state is None


def test_overlay_draws_panel(engine):
    engine.window.fill((255, 255, 255))
    engine.draw_overlay()
    x, y, _, _ = OVERLAY_BUTTONS["playerMode"]
    assert engine.window.get_at((x + 1, y + 1)) != pygame.Color(255, 255, 255)
    assert engine.window.get_at((790, 590)) == pygame.Color(255, 255, 255)


def test_overlay_needs_window():
    with pytest.raises(RuntimeError, match="window is not open"):
        Engine().draw_overlay()


def test_create_mesh(engine, tmp_path):
    path = tmp_path / "mesh.bmp"
    pygame.image.save(pygame.Surface((8, 4)), str(path))
    engine.create_mesh(path, (5.0, 6.0), (2.0, 2.0))
    assert len(engine.meshes) == 1
    assert engine.meshes[0].position == (5.0, 6.0)
    assert engine.meshes[0].texture.get_size() == (8, 4)


def test_create_mesh_missing_texture(engine, tmp_path):
    with pytest.raises(RuntimeError, match="failed to load texture"):
        engine.create_mesh(tmp_path / "missing.png", (0.0, 0.0), (1.0, 1.0))
    assert engine.meshes == []


def test_create_meshes_needs_soldier_texture(engine, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(RuntimeError, match="soldier.png"):
        engine.create_meshes()


def test_main_loop_without_state(engine):
    with pytest.raises(RuntimeError, match="no state"):
        engine.main_loop()


def test_main_loop_runs_one_frame():
    engine = Engine()
    engine.init_window()
    state = _OneFrame()
    engine.change_state(state)
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    pygame.event.post(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=_center("cameraMode"))
    )
    engine.main_loop()
    assert state.calls == ["update", "render"]
    assert pygame.KEYDOWN in state.event_types
    assert engine.camera_mode is True
    assert pygame.display.get_init() is False