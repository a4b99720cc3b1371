"""Holds the scenes of the game and routes frames and events to the current one."""

from __future__ import annotations

from typing import Any, Sequence, TypeVar

from blocks.scene import Scene

S = TypeVar("S", bound=Scene)


class SceneManager:
    """One scene per scene class, with at most one of them current."""

    def __init__(self) -> None:
        self.scenes: dict[type[Scene], Scene] = {}
        self.current_scene: Scene | None = None

    def _unload_scenes(self) -> None:
        for scene in self.scenes.values():
            scene.unload()

    @staticmethod
    def _load_scene(scene: Scene) -> None:
        if not scene.loaded:
            scene.init()
            scene.load()

    def add_scene(self, scene_type: type[S], *args: Any, **kwargs: Any) -> S:
        """Create a scene, register it and make it the loaded current scene."""
        scene = scene_type(*args, **kwargs)
        self.scenes.setdefault(scene_type, scene)
        self._unload_scenes()
        self.current_scene = scene
        self._load_scene(scene)
        return scene

    def set_current_scene(self, scene_type: type[Scene]) -> Scene | None:
        """Switch to the registered scene of scene_type, or to none if absent."""
        scene = self.scenes.get(scene_type)
        self.current_scene = scene
        if scene is not None:
            self._load_scene(scene)
        return scene

    def render_current_scene(self) -> None:
        if self.current_scene is not None:
            self.current_scene.render()

    def update(self, delta_time: float) -> None:
        scene = self.current_scene
        if scene is not None:
            scene.update(delta_time)
            scene.layers.update(delta_time)

    def handle_mouse_move(self, x: int, y: int) -> None:
        scene = self.current_scene
        if scene is not None:
            scene.on_mouse_move(x, y)
            scene.layers.handle_mouse_move(x, y)

    def handle_key_up(self, key: int) -> None:
        scene = self.current_scene
        if scene is not None:
            scene.on_key_up(key)
            scene.layers.handle_key_up(key)

    def handle_key_down(self, key: int) -> None:
        scene = self.current_scene
        if scene is not None:
            scene.on_key_down(key)
            scene.layers.handle_key_down(key)

    def handle_key_press(self, keystate: Sequence[int]) -> None:
        scene = self.current_scene
        if scene is not None:
            scene.on_key_press(keystate)
            scene.layers.handle_key_press(keystate)