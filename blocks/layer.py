"""Layers grouping the entities drawn into one render view."""

from __future__ import annotations

from typing import Any, Sequence

from blocks.camera import View
from blocks.entity import Inputable, Updatable
from blocks.entity_manager import EntityManager


class Layer(Updatable, Inputable):
    """A set of entities drawn into one view and fed the same events."""

    def __init__(self, view_id: int, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.view_id = view_id
        self.visible = True
        self.entities = EntityManager()

    def render(self) -> None:
        """Draw every renderable entity, unless the layer is hidden."""
        if not self.visible:
            return
        for entity in self.entities:
            if entity.is_renderable:
                entity.renderable.draw()

    def update(self, delta_time: float) -> None:
        for entity in self.entities:
            entity.update(delta_time)

    def handle_key_down(self, key: int) -> None:
        for entity in self.entities:
            entity.on_key_down(key)

    def handle_key_up(self, key: int) -> None:
        for entity in self.entities:
            entity.on_key_up(key)

    def handle_key_press(self, keystate: Sequence[int]) -> None:
        for entity in self.entities:
            entity.on_key_press(keystate)

    def handle_mouse_move(self, x: int, y: int) -> None:
        for entity in self.entities:
            entity.on_mouse_move(x, y)


class MeshLayer(Layer):
    """The layer holding the world geometry."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(View.SCENE, **kwargs)


class UILayer(Layer):
    """The layer drawn on top for the user interface."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(View.UI, **kwargs)