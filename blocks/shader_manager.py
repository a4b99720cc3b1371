"""Registry of the shaders available to the scene, keyed by shader class."""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from blocks.shader import ColorShader, RendererType, Shader

S = TypeVar("S", bound=Shader)


class ShaderManager:
    """Holds one shader instance per shader class."""

    def __init__(
        self,
        *,
        base_dir: str | Path | None = None,
        renderer_type: RendererType = RendererType.METAL,
    ) -> None:
        self.base_dir = base_dir
        self.renderer_type = renderer_type
        self.shaders: dict[type[Shader], Shader] = {}

    def initialize(self) -> None:
        """Create and register the built-in shaders."""
        color = ColorShader(base_dir=self.base_dir, renderer_type=self.renderer_type)
        color.initialize()
        self.add_shader(color)

    def add_shader(self, shader: Shader) -> None:
        """Register a shader under its class; an existing entry is kept."""
        self.shaders.setdefault(type(shader), shader)

    def use(self, shader_type: type[S]) -> S | None:
        """The registered shader of the given class, or None."""
        return self.shaders.get(shader_type)  # type: ignore[return-value]