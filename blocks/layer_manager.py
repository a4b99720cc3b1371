"""Registry of the layers making up a scene, keyed by layer class."""

from __future__ import annotations

from typing import Any, Iterator, Sequence, TypeVar

from blocks.layer import Layer

L = TypeVar("L", bound=Layer)


class LayerManager:
    """Holds one layer per layer class and fans events out to the visible ones."""

    def __init__(self) -> None:
        self.layers: dict[type[Layer], Layer] = {}

    def add(self, layer: Layer) -> None:
        """Register a layer under its class; an existing entry is kept."""
        self.layers.setdefault(type(layer), layer)

    def create(self, layer_type: type[L], *args: Any, **kwargs: Any) -> L:
        """Build a layer of layer_type, register it and return it."""
        layer = layer_type(*args, **kwargs)
        self.layers.setdefault(layer_type, layer)
        return layer

    def use(self, layer_type: type[L]) -> L | None:
        """The registered layer of the given class, or None."""
        return self.layers.get(layer_type)  # type: ignore[return-value]

    def _visible(self) -> Iterator[Layer]:
        return (layer for layer in list(self.layers.values()) if layer.visible)

    def render_layers(self) -> None:
        for layer in self._visible():
            layer.render()

    def update(self, delta_time: float) -> None:
        for layer in self._visible():
            layer.update(delta_time)

    def handle_key_down(self, key: int) -> None:
        for layer in self._visible():
            layer.handle_key_down(key)
            layer.on_key_down(key)

    def handle_key_up(self, key: int) -> None:
        for layer in self._visible():
            layer.handle_key_up(key)
            layer.on_key_up(key)

    def handle_key_press(self, keystate: Sequence[int]) -> None:
        for layer in self._visible():
            layer.handle_key_press(keystate)
            layer.on_key_press(keystate)

    def handle_mouse_move(self, x: int, y: int) -> None:
        for layer in self._visible():
            layer.handle_mouse_move(x, y)
            layer.on_mouse_move(x, y)