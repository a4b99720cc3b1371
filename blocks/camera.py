"""Perspective camera and the view and projection matrices it produces."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Iterable, Protocol

import numpy as np

Matrix = tuple[float, ...]


class View(IntEnum):
    """Render view identifiers."""

    SCENE = 0
    CAMERA = 1
    PLAYER = 2
    UI = 3


class _ViewTransformTarget(Protocol):
    def set_view_transform(self, view_id: int, view: Matrix, projection: Matrix) -> None: ...


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vector / length


def perspective(
    fov: float,
    aspect_ratio: float,
    near: float,
    far: float,
    homogeneous_depth: bool = False,
) -> Matrix:
    """Left-handed perspective projection, 16 floats in column-major order.

    fov is the vertical field of view in degrees. With homogeneous_depth the
    depth range is -1..1, otherwise 0..1.
    """
    height = 1.0 / math.tan(math.radians(fov) * 0.5)
    width = height / aspect_ratio
    diff = far - near
    if homogeneous_depth:
        aa = (far + near) / diff
        bb = (2.0 * far * near) / diff
    else:
        aa = far / diff
        bb = near * aa
    result = [0.0] * 16
    result[0] = width
    result[5] = height
    result[10] = aa
    result[11] = 1.0
    result[14] = -bb
    return tuple(result)


def look_at(
    eye: Iterable[float],
    target: Iterable[float],
    up: Iterable[float] = (0.0, 1.0, 0.0),
) -> Matrix:
    """Left-handed view matrix looking from eye towards target, column-major."""
    eye_v = np.array(eye, dtype=float)
    view = _normalize(np.array(target, dtype=float) - eye_v)
    uxv = np.cross(np.array(up, dtype=float), view)
    if float(np.dot(uxv, uxv)) == 0.0:
        right = np.array([-1.0, 0.0, 0.0])
    else:
        right = _normalize(uxv)
    up_v = np.cross(view, right)

    result = [0.0] * 16
    result[0], result[1], result[2] = right[0], up_v[0], view[0]
    result[4], result[5], result[6] = right[1], up_v[1], view[1]
    result[8], result[9], result[10] = right[2], up_v[2], view[2]
    result[12] = -float(np.dot(right, eye_v))
    result[13] = -float(np.dot(up_v, eye_v))
    result[14] = -float(np.dot(view, eye_v))
    result[15] = 1.0
    return tuple(float(v) for v in result)


class Camera:
    """A perspective camera holding a view and a projection matrix."""

    def __init__(
        self,
        fov: float,
        aspect_ratio: float,
        near_plane: float,
        far_plane: float,
        homogeneous_depth: bool = False,
    ) -> None:
        self.fov = fov
        self.aspect_ratio = aspect_ratio
        self.near_plane = near_plane
        self.far_plane = far_plane
        self.view_id = View.CAMERA
        self.view_matrix: Matrix = (0.0,) * 16
        self.projection_matrix = perspective(
            fov, aspect_ratio, near_plane, far_plane, homogeneous_depth
        )

    def set_view(self, eye, target, up=(0.0, 1.0, 0.0)) -> None:
        """Point the camera from eye at target."""
        self.view_matrix = look_at(eye, target, up)

    def update_view(self, position, rotation, offset, up=(0.0, 1.0, 0.0)) -> None:
        """Place the camera at position + offset, facing along the Euler rotation."""
        pitch = math.radians(rotation[0])
        yaw = math.radians(rotation[1])
        front = np.array(
            [
                math.sin(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.cos(yaw) * math.cos(pitch),
            ]
        )
        direction = _normalize(front)
        eye = np.array(position, dtype=float) + np.array(offset, dtype=float)
        self.set_view(eye, eye + direction, up)

    def apply_view(self, renderer: _ViewTransformTarget) -> None:
        """Hand the matrices to the renderer for the scene view."""
        renderer.set_view_transform(View.SCENE, self.view_matrix, self.projection_matrix)