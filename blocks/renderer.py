"""Software renderer drawing the current scene's meshes onto a pygame surface."""

from __future__ import annotations

import logging
import struct
from typing import Any, Iterable

import numpy as np
import pygame

from blocks.application import Application, get_application
from blocks.mesh import DrawCall

_log = logging.getLogger(__name__)

SKY_COLOR = 0x4FD1FFFF

Matrix = tuple[float, ...]

_VERTEX = struct.Struct("<3fI")
_IDENTITY: Matrix = tuple(float(v) for v in np.eye(4).flatten(order="F"))
_MIN_W = 1e-6


def _rgba(color: int) -> tuple[int, int, int, int]:
    return ((color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def _abgr(color: int) -> tuple[int, int, int, int]:
    return (color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF, (color >> 24) & 0xFF)


def _as_matrix_tuple(values: Iterable[float]) -> Matrix:
    result = tuple(float(v) for v in values)
    if len(result) != 16:
        raise ValueError(f"a matrix needs 16 values, got {len(result)}")
    return result


def _matrix(values: Matrix) -> np.ndarray:
    return np.array(values, dtype=float).reshape((4, 4), order="F")


class Renderer:
    """Collects draw calls for a frame and rasterises them, far to near."""

    name = "software"

    def __init__(self, app: Application | None = None) -> None:
        self.app = app if app is not None else get_application()
        self.initialized = False
        self.width = 0
        self.height = 0
        self.surface: pygame.Surface | None = None
        self.scene_manager: Any = None
        self.clear_color = SKY_COLOR
        self.view_rect = (0, 0, 0, 0)
        self.view_transforms: dict[int, tuple[Matrix, Matrix]] = {}
        self.frame = 0
        self.triangles_drawn = 0
        self._pending: list[DrawCall] = []

    @property
    def is_running(self) -> bool:
        return self.initialized

    def initialize(self, window: Any) -> None:
        """Size the renderer to the window and draw onto its surface."""
        width, height = int(window.width), int(window.height)
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid render size {width}x{height}")
        self.width, self.height = width, height
        surface = window.surface
        self.surface = surface if surface is not None else pygame.Surface((width, height))
        self.scene_manager = self.app.scene_manager
        self.view_transforms.clear()
        self._pending.clear()
        self.initialized = True
        _log.info("Current Renderer: %s", self.name)

    def _require_running(self) -> None:
        if not self.initialized:
            raise RuntimeError("renderer is not initialized")

    def render(self) -> None:
        """Draw one frame of the current scene."""
        self._require_running()
        manager = self.scene_manager if self.scene_manager is not None else self.app.scene_manager
        if manager is None:
            raise RuntimeError("no scene manager is available to render")
        self._begin_frame()
        manager.render_current_scene()
        self._end_frame()

    def render_sky(self) -> None:
        """Cover the whole view with the sky colour."""
        self.view_rect = (0, 0, self.width, self.height)
        self.clear_color = SKY_COLOR

    def set_view_transform(self, view_id: int, view: Iterable[float], projection: Iterable[float]) -> None:
        """Set the column-major view and projection matrices of a view."""
        self.view_transforms[int(view_id)] = (
            _as_matrix_tuple(view),
            _as_matrix_tuple(projection),
        )

    def submit(self, draw_call: DrawCall) -> None:
        """Queue a mesh for the current frame."""
        self._require_running()
        self._pending.append(draw_call)

    def shutdown(self) -> None:
        """Stop rendering and drop all frame state."""
        self.initialized = False
        self._pending.clear()
        self.view_transforms.clear()
        _log.info("Renderer shut down")

    def _begin_frame(self) -> None:
        self._pending.clear()
        self.render_sky()

    def _end_frame(self) -> None:
        assert self.surface is not None
        self.surface.fill(_rgba(self.clear_color))
        triangles = [tri for call in self._pending for tri in self._triangles(call)]
        triangles.sort(key=lambda tri: tri[0], reverse=True)
        for _, points, color in triangles:
            pygame.draw.polygon(self.surface, color, points)
        self.triangles_drawn = len(triangles)
        self._pending.clear()
        self.frame += 1

    def _triangles(self, call: DrawCall) -> list[tuple[float, list[tuple[float, float]], tuple[int, int, int]]]:
        view, projection = self.view_transforms.get(call.view_id, (_IDENTITY, _IDENTITY))
        mvp = _matrix(projection) @ _matrix(view) @ _matrix(_as_matrix_tuple(call.transform))

        if len(call.vertex_buffer) % _VERTEX.size or len(call.index_buffer) % 2:
            raise ValueError("draw call buffers have a partial element")
        vertices = list(_VERTEX.iter_unpack(call.vertex_buffer))
        if not vertices:
            return []
        positions = np.array([[x, y, z, 1.0] for x, y, z, _ in vertices])
        clip = positions @ mvp.T
        colors = [_abgr(color) for *_, color in vertices]
        indices = [i for (i,) in struct.iter_unpack("<H", call.index_buffer)]
        if any(i >= len(vertices) for i in indices):
            raise ValueError("index buffer refers past the end of the vertex buffer")

        result = []
        corners = iter(indices)
        for triangle in zip(corners, corners, corners):
            picked = clip[list(triangle)]
            ws = picked[:, 3]
            if np.any(ws <= _MIN_W):
                continue
            ndc = picked[:, :3] / ws[:, None]
            points = [
                ((x + 1.0) * 0.5 * self.width, (1.0 - y) * 0.5 * self.height)
                for x, y, _ in ndc
            ]
            color = tuple(sum(colors[i][c] for i in triangle) // 3 for c in range(3))
            result.append((float(ndc[:, 2].mean()), points, color))
        return result