"""Tile map built from a tileset image and a grid of tile numbers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Sequence

import pygame

Vec2 = tuple[float, float]

TILE_SCALE = 2.0
DEFAULT_TILESET = "../textures/tileset_1bit.png"
DEFAULT_TILE_SIZE = (16, 16)
MAP_WIDTH = 28
MAP_HEIGHT = 16


def _default_level() -> list[int]:
    top = [8] + [9] * (MAP_WIDTH - 2) + [10]
    middle = [16] + [17] * (MAP_WIDTH - 2) + [18]
    bottom = [24] + [25] * (MAP_WIDTH - 2) + [26]
    return top + middle * (MAP_HEIGHT - 2) + bottom


@dataclass(frozen=True)
class Vertex:
    """A corner of a textured primitive: where it sits and where it samples."""

    position: Vec2
    tex_coords: Vec2


def build_tile_vertices(
    tiles: Sequence[int],
    width: int,
    height: int,
    tile_size: tuple[int, int],
    tileset_width: int,
) -> list[Vertex]:
    """Return six vertices (two triangles) per tile, tiles in row-major order."""
    tile_w, tile_h = tile_size
    columns = tileset_width // tile_w
    if columns == 0:
        raise ValueError("tileset is narrower than a single tile")
    count = width * height
    if len(tiles) < count:
        raise ValueError(f"expected {count} tiles, got {len(tiles)}")

    vertices: list[Vertex] = []
    for index, number in enumerate(tiles[:count]):
        j, i = divmod(index, width)
        tv, tu = divmod(number, columns)

        left, right = i * tile_w * TILE_SCALE, (i + 1) * tile_w * TILE_SCALE
        top, bottom = j * tile_h * TILE_SCALE, (j + 1) * tile_h * TILE_SCALE
        tex_left, tex_right = float(tu * tile_w), float((tu + 1) * tile_w)
        tex_top, tex_bottom = float(tv * tile_h), float((tv + 1) * tile_h)

        vertices.extend(
            (
                Vertex((left, top), (tex_left, tex_top)),
                Vertex((right, top), (tex_right, tex_top)),
                Vertex((left, bottom), (tex_left, tex_bottom)),
                Vertex((left, bottom), (tex_left, tex_bottom)),
                Vertex((right, top), (tex_right, tex_top)),
                Vertex((right, bottom), (tex_right, tex_bottom)),
            )
        )
    return vertices


class TileMap:
    """A level drawn from a tileset, two triangles per tile."""

    def __init__(
        self,
        level: Sequence[int] | None = None,
        *,
        tileset_path: str | os.PathLike = DEFAULT_TILESET,
        tile_size: tuple[int, int] = DEFAULT_TILE_SIZE,
        tile_width: int = MAP_WIDTH,
        tile_height: int = MAP_HEIGHT,
    ) -> None:
        self.level = list(level) if level is not None else _default_level()
        self.tileset_path = tileset_path
        self.tile_size = tile_size
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.tileset: pygame.Surface | None = None
        self.vertices: list[Vertex] = []

    def load(
        self,
        tileset_path: str | os.PathLike,
        tile_size: tuple[int, int],
        tiles: Sequence[int],
        width: int,
        height: int,
    ) -> bool:
        """Load the tileset and build the vertices; False if the image cannot be read."""
        try:
            tileset = pygame.image.load(os.fspath(tileset_path))
        except (pygame.error, OSError):
            return False
        self.tileset = tileset
        self.vertices = build_tile_vertices(
            tiles, width, height, tile_size, tileset.get_width()
        )
        return True

    def create_tile_map(self) -> None:
        """Build the map from the configured level and tileset."""
        if not self.load(
            self.tileset_path,
            self.tile_size,
            self.level,
            self.tile_width,
            self.tile_height,
        ):
            raise RuntimeError("failed to load tilemap")

    def draw(self, surface: pygame.Surface, view) -> None:
        """Draw every tile onto ``surface`` as seen through ``view``."""
        if self.tileset is None:
            return
        screen = surface.get_size()
        bounds = self.tileset.get_rect()
        quads = zip(*[iter(self.vertices)] * 6)
        for first, *_, last in quads:
            x0, y0 = view.world_to_screen(first.position, screen)
            x1, y1 = view.world_to_screen(last.position, screen)
            size = (round(x1) - round(x0), round(y1) - round(y0))
            tex_left, tex_top = first.tex_coords
            tex_right, tex_bottom = last.tex_coords
            source = pygame.Rect(
                int(tex_left),
                int(tex_top),
                int(tex_right - tex_left),
                int(tex_bottom - tex_top),
            ).clip(bounds)
            if source.width == 0 or source.height == 0 or size[0] <= 0 or size[1] <= 0:
                continue
            image = pygame.transform.scale(self.tileset.subsurface(source), size)
            surface.blit(image, (round(x0), round(y0)))