"""Shader binaries, shader programs and the vertex layouts they consume."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import NamedTuple

_log = logging.getLogger(__name__)

_ATTRIB_TYPE_SIZES = {"uint8": 1, "uint10": 4, "int16": 2, "half": 2, "float": 4}


class RendererType(Enum):
    """Rendering back ends a shader binary can be compiled for."""

    NOOP = "noop"
    AGC = "agc"
    DIRECT3D11 = "direct3d11"
    DIRECT3D12 = "direct3d12"
    GNM = "gnm"
    METAL = "metal"
    NVN = "nvn"
    OPENGLES = "opengles"
    OPENGL = "opengl"
    VULKAN = "vulkan"
    WEBGPU = "webgpu"


_SHADER_TYPES = {
    RendererType.NOOP: "dx11",
    RendererType.DIRECT3D11: "dx11",
    RendererType.DIRECT3D12: "dx11",
    RendererType.AGC: "pssl",
    RendererType.GNM: "pssl",
    RendererType.METAL: "metal",
    RendererType.NVN: "nvn",
    RendererType.OPENGL: "glsl",
    RendererType.OPENGLES: "essl",
    RendererType.VULKAN: "spirv",
}


def shader_type_for(renderer_type: RendererType) -> str:
    """The compiled-shader suffix used for a renderer back end."""
    return _SHADER_TYPES.get(renderer_type, "unknown")


class _Attribute(NamedTuple):
    attrib: str
    count: int
    attrib_type: str
    normalized: bool


@dataclass
class VertexLayout:
    """An ordered description of the attributes making up one vertex."""

    attributes: list[_Attribute] = field(default_factory=list)

    def add(
        self, attrib: str, count: int, attrib_type: str, normalized: bool = False
    ) -> "VertexLayout":
        """Append an attribute and return the layout for chaining."""
        if attrib_type not in _ATTRIB_TYPE_SIZES:
            raise ValueError(f"unknown attribute type: {attrib_type!r}")
        if count < 1:
            raise ValueError(f"attribute count must be positive, got {count}")
        self.attributes.append(_Attribute(attrib, count, attrib_type, normalized))
        return self

    @property
    def stride(self) -> int:
        """Size of one vertex in bytes."""
        return sum(a.count * _ATTRIB_TYPE_SIZES[a.attrib_type] for a in self.attributes)


def _color_layout(layout: VertexLayout) -> VertexLayout:
    layout.attributes.clear()
    return layout.add("position", 3, "float").add("color0", 4, "uint8", True)


class ShaderLoader:
    """Loads one compiled shader binary from the asset directory."""

    def __init__(
        self,
        shader_name: str,
        *,
        base_dir: str | Path | None = None,
        platform: str = "osx",
        renderer_type: RendererType = RendererType.METAL,
    ) -> None:
        self.shader_name = shader_name
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.platform = platform
        self.renderer_type = renderer_type
        self.data: bytes | None = None
        self.loaded = False

    @property
    def shader_type(self) -> str:
        return shader_type_for(self.renderer_type)

    @property
    def path(self) -> Path:
        base = self.base_dir if self.base_dir is not None else Path.cwd()
        return (
            base / "assets" / "shaders" / "bin" / self.platform
            / f"{self.shader_name}.{self.shader_type}.bin"
        )

    def load(self) -> "ShaderLoader":
        """Read the binary; on failure log it and leave the loader unloaded."""
        path = self.path
        _log.info("Loading shader %s: %s", self.shader_name, path)
        try:
            raw = path.read_bytes()
        except OSError:
            raw = b""
        if not raw or raw[0] == 0:
            _log.error("Failed to load shader: %s", path)
            return self
        self.data = raw + b"\0"
        self.loaded = True
        _log.info("Shader %s loaded", self.shader_name)
        return self


class ShaderProgram:
    """A vertex and a fragment shader linked together with their vertex layout."""

    def __init__(self, vertex_shader: ShaderLoader, fragment_shader: ShaderLoader) -> None:
        for loader in (vertex_shader, fragment_shader):
            if not loader.loaded:
                loader.load()
        self.vertex_shader = vertex_shader
        self.fragment_shader = fragment_shader
        self.valid = vertex_shader.loaded and fragment_shader.loaded
        if not self.valid:
            _log.error("Shader program handle is invalid")
        self.layout = _color_layout(VertexLayout())


class Shader(ABC):
    """A shader program together with the layout of the vertices it draws."""

    def __init__(
        self,
        vertex_name: str,
        fragment_name: str | None = None,
        *,
        base_dir: str | Path | None = None,
        renderer_type: RendererType = RendererType.METAL,
    ) -> None:
        if fragment_name is None:
            vertex_name, fragment_name = f"vertex_{vertex_name}", f"fragment_{vertex_name}"
        self.vertex_shader = ShaderLoader(
            vertex_name, base_dir=base_dir, renderer_type=renderer_type
        )
        self.fragment_shader = ShaderLoader(
            fragment_name, base_dir=base_dir, renderer_type=renderer_type
        )
        self.shader_program = ShaderProgram(self.vertex_shader, self.fragment_shader)

    def initialize(self) -> None:
        """Let the shader describe its vertex layout."""
        self.make_layout(self.shader_program.layout)

    @abstractmethod
    def make_layout(self, layout: VertexLayout) -> None:
        """Fill in the vertex layout this shader expects."""


class ColorShader(Shader):
    """Shader drawing vertices with a position and a packed colour."""

    def __init__(
        self,
        *,
        base_dir: str | Path | None = None,
        renderer_type: RendererType = RendererType.METAL,
    ) -> None:
        super().__init__("color", base_dir=base_dir, renderer_type=renderer_type)

    def make_layout(self, layout: VertexLayout) -> None:
        _color_layout(layout)