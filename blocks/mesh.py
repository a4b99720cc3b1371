"""Indexed triangle meshes and the primitive shapes built from them."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import Any

from blocks.color import Color, VertexColor
from blocks.entity import Entity, Renderable
from blocks.shader import ColorShader

_log = logging.getLogger(__name__)

_VERTEX = struct.Struct("<3fI")


@dataclass(frozen=True)
class DrawCall:
    """Everything a renderer needs to draw one mesh."""

    view_id: int
    program: Any
    vertex_buffer: bytes
    index_buffer: bytes
    transform: tuple[float, ...]


class Mesh(Renderable):
    """A renderable made of coloured vertices and 16-bit triangle indices."""

    def initialize(self, entity: Entity) -> None:
        """Pack the vertex and index buffers and bind the mesh to entity."""
        if self.shader is None:
            raise RuntimeError("mesh has no shader")
        if not self.vertices or not self.indices:
            _log.error("Error when trying create buffers")
            return
        try:
            vertex_buffer = b"".join(
                _VERTEX.pack(v.x, v.y, v.z, v.color) for v in self.vertices
            )
            index_buffer = struct.pack(f"<{len(self.indices)}H", *self.indices)
        except struct.error as exc:
            raise ValueError(f"mesh data does not fit its buffer format: {exc}") from exc
        self.vertex_buffer = vertex_buffer
        self.index_buffer = index_buffer
        self.entity = entity
        self.initialized = True

    def draw(self) -> None:
        """Submit the mesh with its entity's transform, if it can be drawn."""
        if not self.validate_draw():
            return
        assert self.entity is not None
        self._submit_draw(
            DrawCall(
                view_id=self.view_id,
                program=self.shader.shader_program,
                vertex_buffer=self.vertex_buffer,
                index_buffer=self.index_buffer,
                transform=self.entity.transform_array(),
            )
        )


_BLUE = Color.from_ints(0, 0, 255)
_RED = Color.from_ints(255, 0, 0)

_CUBE_VERTICES = (
    (0.5, 0.5, 0.5, _BLUE),
    (0.5, -0.5, 0.5, _BLUE),
    (-0.5, -0.5, 0.5, _BLUE),
    (-0.5, 0.5, 0.5, _BLUE),
    (0.5, 0.5, -0.5, _RED),
    (0.5, -0.5, -0.5, _RED),
    (-0.5, -0.5, -0.5, _RED),
    (-0.5, 0.5, -0.5, _RED),
)

_CUBE_INDICES = (
    0, 1, 3, 1, 2, 3,  # front
    4, 7, 5, 5, 7, 6,  # back
    3, 6, 7, 3, 2, 6,  # left
    0, 4, 5, 0, 5, 1,  # right
    0, 7, 4, 0, 3, 7,  # top
    1, 5, 6, 1, 6, 2,  # bottom
)

_PLANE_VERTICES = (
    (-0.5, 0.0, -0.5),
    (0.5, 0.0, -0.5),
    (-0.5, 0.0, 0.5),
    (0.5, 0.0, 0.5),
)

_PLANE_INDICES = (0, 1, 2, 1, 3, 2)


def _color_shader(entity: Entity) -> Any:
    return entity.shaders.use(ColorShader) if entity.shaders is not None else None


class Cube(Entity):
    """A unit cube, blue at the front and red at the back."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.renderable = Mesh(
            vertices=[VertexColor.from_color(x, y, z, c) for x, y, z, c in _CUBE_VERTICES],
            indices=_CUBE_INDICES,
            shader=_color_shader(self),
        )
        self.renderable.initialize(self)


class Plane(Entity):
    """A unit square lying flat in the XZ plane, in the default grey."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.renderable = Mesh(
            vertices=[VertexColor(x, y, z) for x, y, z in _PLANE_VERTICES],
            indices=_PLANE_INDICES,
            shader=_color_shader(self),
        )
        self.renderable.initialize(self)