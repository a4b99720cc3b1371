"""Colours and coloured vertices, packed the way the GPU vertex layout expects."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

_FULL = np.float32(255.0)


def _channel(value: float) -> int:
    """Convert a normalised float channel to a byte, truncating like a cast."""
    return int(np.float32(value) * _FULL) & 0xFF


@dataclass(frozen=True)
class Color:
    """An RGBA colour with channels normalised to the 0..1 range."""

    r: float
    g: float
    b: float
    alpha: float = 1.0

    @classmethod
    def from_ints(cls, r: int, g: int, b: int, alpha: int = 255) -> "Color":
        """Build a colour from 0..255 integer channels."""
        return cls(
            *(float(np.float32(v) / _FULL) for v in (r, g, b, alpha))
        )

    def _bytes(self) -> tuple[int, int, int, int]:
        return (
            _channel(self.r),
            _channel(self.g),
            _channel(self.b),
            _channel(self.alpha),
        )

    def abgr(self) -> int:
        """Pack as 0xAABBGGRR."""
        r, g, b, a = self._bytes()
        return (a << 24) | (b << 16) | (g << 8) | r

    def argb(self) -> int:
        """Pack as 0xAARRGGBB."""
        r, g, b, a = self._bytes()
        return (a << 24) | (r << 16) | (g << 8) | b

    def rgba(self) -> int:
        """Pack as 0xRRGGBBAA."""
        r, g, b, a = self._bytes()
        return (r << 24) | (g << 16) | (b << 8) | a


DEFAULT_VERTEX_COLOR = Color.from_ints(135, 135, 135).abgr()


@dataclass
class VertexColor:
    """A vertex position with a packed ABGR colour."""

    x: float
    y: float
    z: float
    color: int = field(default=DEFAULT_VERTEX_COLOR)

    @classmethod
    def from_color(cls, x: float, y: float, z: float, color: Color) -> "VertexColor":
        """Build a vertex whose colour is taken from a Color."""
        return cls(x, y, z, color.abgr())