"""A textured quad placed in the world."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import pygame

from pixelrealm.tilemap import Vec2, Vertex


def quad_vertices(
    position: Vec2, scale: Vec2, texture_size: tuple[int, int]
) -> list[Vertex]:
    """Return the four triangle-strip vertices of a scaled textured quad."""
    x, y = position
    tex_w, tex_h = float(texture_size[0]), float(texture_size[1])
    width = tex_w * scale[0]
    height = tex_h * scale[1]
    return [
        Vertex((x, y), (0.0, 0.0)),
        Vertex((x, y + height), (0.0, tex_h)),
        Vertex((x + width, y), (tex_w, 0.0)),
        Vertex((x + width, y + height), (tex_w, tex_h)),
    ]


@dataclass
class Mesh:
    """A texture drawn as a quad at ``position``, rotated by ``rotation`` degrees."""

    position: Vec2 = (0.0, 0.0)
    scale: Vec2 = (0.0, 0.0)
    rotation: float = 0.0
    texture: pygame.Surface | None = None
    vertices: list[Vertex] = field(default_factory=list)

    def init_primitives(self, texture_path: str | os.PathLike) -> None:
        """Load the texture and lay out the quad over it."""
        try:
            self.texture = pygame.image.load(os.fspath(texture_path))
        except (pygame.error, OSError) as exc:
            raise RuntimeError(
                f"failed to load texture for mesh{os.fspath(texture_path)}"
            ) from exc
        self.vertices = quad_vertices(
            self.position, self.scale, self.texture.get_size()
        )
        self.rotation += 45.0