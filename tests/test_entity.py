import math
from unittest import mock

import pygame
import pytest

from pixelrealm.camera import View
from pixelrealm.entity import Control, Entity, movement_vector, pressed_controls


class _Dummy(Entity):
    def update(self, pressed):
        self.move(movement_vector(pressed))


class _FakeKeys:
    def __init__(self, held):
        self._held = set(held)

    def __getitem__(self, key):
        return key in self._held


def _make(color=(255, 0, 0)):
    texture = pygame.Surface((384, 512))
    texture.fill(color)
    return _Dummy(texture)


def test_entity_is_abstract():
    with pytest.raises(TypeError):
        Entity(pygame.Surface((64, 64)))


def test_missing_texture_raises(tmp_path):
    entity = _Dummy.__new__(_Dummy)
    with pytest.raises(RuntimeError):
        Entity.__init__(entity, texture_path=tmp_path / "missing.png")


def test_movement_vector_single_direction():
    assert movement_vector({Control.LEFT}) == (-1.0, 0.0)
    assert movement_vector({Control.DOWN}) == (0.0, 1.0)


def test_movement_vector_opposites_cancel():
    assert movement_vector({Control.LEFT, Control.RIGHT}) == (0.0, 0.0)
    assert movement_vector(set()) == (0.0, 0.0)


def test_movement_vector_diagonal_is_unit_length():
    x, y = movement_vector({Control.RIGHT, Control.UP})
    assert math.hypot(x, y) == pytest.approx(1.0)
    assert x > 0 and y < 0


def test_movement_vector_ignores_zoom():
    assert movement_vector({Control.ZOOM_IN, Control.ZOOM_OUT}) == (0.0, 0.0)


def test_pressed_controls_reads_keyboard():
    keys = _FakeKeys({pygame.K_a, pygame.K_e})
    with mock.patch("pygame.key.get_pressed", return_value=keys):
        assert pressed_controls() == frozenset({Control.LEFT, Control.ZOOM_IN})


def test_default_position_and_bounds():
    entity = _make()
    assert entity.position == (100.0, 100.0)
    assert Entity.bounds(entity) == (100.0, 100.0, 64 * 4.0, 64 * 4.0)


def test_move_adds_offset():
    entity = _make()
    Entity.move(entity, (5.0, -3.0))
    assert entity.position == (105.0, 97.0)


def test_set_texture_rect_changes_bounds():
    entity = _make()
    Entity.set_texture_rect(entity, (64, 0, 32, 16))
    assert entity.texture_rect == (64, 0, 32, 16)
    assert Entity.bounds(entity)[2:] == (32 * 4.0, 16 * 4.0)


def test_update_through_subclass():
    entity = _make()
    assert movement_vector({Control.RIGHT}) == (1.0, 0.0)
    entity.update({Control.RIGHT})
    assert entity.position == (101.0, 100.0)


def test_draw_paints_sprite():
    entity = _make((255, 0, 0))
    surface = pygame.Surface((400, 400))
    surface.fill((0, 0, 0))
    entity.draw(surface, View(center=(200.0, 200.0), size=(400.0, 400.0)))
    assert tuple(surface.get_at((150, 150)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((50, 50)))[:3] == (0, 0, 0)