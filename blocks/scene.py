"""Scenes: a set of layers that is loaded, updated and drawn as a whole."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from blocks.application import Application, get_application
from blocks.entity import Inputable, Updatable
from blocks.layer_manager import LayerManager


class Scene(Updatable, Inputable, ABC):
    """A scene owning its layers; subclasses build their content in init()."""

    def __init__(self, *, app: Application | None = None, **kwargs: Any) -> None:
        self.app = app if app is not None else get_application()
        kwargs.setdefault("timer", self.app.timer)
        kwargs.setdefault("keyboard", self.app.keyboard)
        kwargs.setdefault("mouse", self.app.mouse)
        super().__init__(**kwargs)
        self.layers = LayerManager()
        self.shaders = self.app.shader_manager
        self.loaded = False

    @abstractmethod
    def init(self) -> None:
        """Create the layers and entities of the scene."""

    def load(self) -> None:
        """Mark the scene as loaded."""
        self.loaded = True

    def unload(self) -> None:
        """Mark the scene as unloaded so it is built again on next use."""
        self.loaded = False

    def render(self) -> None:
        self.layers.render_layers()