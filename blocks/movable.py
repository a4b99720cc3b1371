"""Position, rotation and scale of objects in the world."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np


def _vec3(value: Iterable[float]) -> np.ndarray:
    arr = np.array(value, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected three components, got shape {arr.shape}")
    return arr


def _axis_rotation(axis: int, degrees: float) -> np.ndarray:
    angle = math.radians(degrees)
    c, s = math.cos(angle), math.sin(angle)
    if axis == 0:
        return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])
    if axis == 1:
        return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


class Movable:
    """Something with a position, an Euler rotation in degrees and a scale."""

    def __init__(self, *, position=None, rotation=None, scale=None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.position = (0.0, 0.0, 0.0) if position is None else position
        self.rotation = (0.0, 0.0, 0.0) if rotation is None else rotation
        self.scale = (1.0, 1.0, 1.0) if scale is None else scale

    @property
    def position(self) -> np.ndarray:
        return self._position

    @position.setter
    def position(self, value: Iterable[float]) -> None:
        self._position = _vec3(value)

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation

    @rotation.setter
    def rotation(self, value: Iterable[float]) -> None:
        self._rotation = _vec3(value)

    @property
    def scale(self) -> np.ndarray:
        return self._scale

    @scale.setter
    def scale(self, value: Iterable[float]) -> None:
        self._scale = _vec3(value)

    def move(self, delta: Iterable[float]) -> None:
        self._position += _vec3(delta)

    def move_x(self, x: float) -> None:
        self._position[0] += x

    def move_y(self, y: float) -> None:
        self._position[1] += y

    def move_z(self, z: float) -> None:
        self._position[2] += z

    def rotate(self, delta: Iterable[float]) -> None:
        self._rotation += _vec3(delta)

    def rotate_x(self, x: float) -> None:
        self._rotation[0] += x

    def rotate_y(self, y: float) -> None:
        self._rotation[1] += y

    def rotate_z(self, z: float) -> None:
        self._rotation[2] += z

    def forward(self) -> np.ndarray:
        """Horizontal facing direction, ignoring pitch."""
        yaw = math.radians(self._rotation[1])
        return np.array([math.sin(yaw), 0.0, math.cos(yaw)])

    def back(self) -> np.ndarray:
        return -self.forward()

    def right(self) -> np.ndarray:
        """Horizontal direction to the right of forward()."""
        yaw = math.radians(self._rotation[1])
        return np.array([math.cos(yaw), 0.0, -math.sin(yaw)])

    def left(self) -> np.ndarray:
        return -self.right()

    def rotation_matrix(self) -> np.ndarray:
        """3x3 rotation built as Rz * Ry * Rx from the Euler angles."""
        rx = _axis_rotation(0, self._rotation[0])
        ry = _axis_rotation(1, self._rotation[1])
        rz = _axis_rotation(2, self._rotation[2])
        return rz @ ry @ rx

    def transform_matrix(self) -> np.ndarray:
        """4x4 affine matrix: translate, then rotate, then scale."""
        matrix = np.eye(4)
        matrix[:3, :3] = self.rotation_matrix() @ np.diag(self._scale)
        matrix[:3, 3] = self._position
        return matrix

    def transform_array(self) -> tuple[float, ...]:
        """The transform matrix as 16 floats in column-major order."""
        return tuple(float(v) for v in self.transform_matrix().flatten(order="F"))