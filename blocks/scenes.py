"""The two demo scenes of the game and the keys that switch between them."""

from __future__ import annotations

from typing import Any

from blocks.layer import MeshLayer, UILayer
from blocks.mesh import Cube, Plane
from blocks.player import Player
from blocks.scene import Scene

KEY_ESCAPE = 27
KEY_1 = ord("1")
KEY_2 = ord("2")


class _DemoScene(Scene):
    """Shared helpers for scenes that build their entities from the application."""

    player: Player | None = None

    def _input_options(self) -> dict[str, Any]:
        return {
            "timer": self.app.timer,
            "keyboard": self.app.keyboard,
            "mouse": self.app.mouse,
        }

    def _entity_options(self) -> dict[str, Any]:
        return {**self._input_options(), "shaders": self.app.shader_manager}

    def _make_player(self) -> Player:
        window = self.app.window
        aspect_ratio = window.aspect_ratio if window is not None else None
        return Player(
            aspect_ratio=aspect_ratio,
            renderer=self.app.renderer,
            **self._entity_options(),
        )

    def _scene_manager(self) -> Any:
        if self.app.scene_manager is None:
            raise RuntimeError("no scene manager is registered with the application")
        return self.app.scene_manager

    def _mesh_layer(self) -> MeshLayer:
        layer = self.layers.use(MeshLayer)
        if layer is None:
            raise RuntimeError("the scene has no mesh layer")
        return layer


class TestScene(_DemoScene):
    """A floor with two cubes; Escape frees the cursor and 2 switches scenes."""

    __test__ = False

    def init(self) -> None:
        """Build the layers, the player, two cubes and the floor, then grab the cursor."""
        self.layers.create(MeshLayer, **self._input_options())
        self.layers.create(UILayer, **self._input_options())

        self.player = self._make_player()
        options = self._entity_options()
        cube = Cube(**options)
        another_cube = Cube(**options)
        plane = Plane(**options)

        plane.scale = (10.0, 10.0, 10.0)

        cube.move_x(1.5)
        cube.move_y(2.5)
        cube.move_z(3.5)

        another_cube.move_y(0.5)

        entities = self._mesh_layer().entities
        for entity in (self.player, cube, another_cube, plane):
            entities.add(entity)

        if self.app.mouse is None:
            raise RuntimeError("no mouse is registered with the application")
        self.app.mouse.hide()

    def load(self) -> None:
        super().load()

    def update(self, delta_time: float) -> None:
        """The scene itself is static."""

    def on_key_up(self, key: int) -> None:
        if key == KEY_ESCAPE:
            if self.app.mouse is None:
                raise RuntimeError("no mouse is registered with the application")
            self.app.mouse.toggle_visibility()
        if key == KEY_2:
            self._scene_manager().set_current_scene(AnotherScene)


class AnotherScene(_DemoScene):
    """A single spinning cube; 1 switches back to the test scene."""

    def init(self) -> None:
        """Build the mesh layer with the player and one cube."""
        self.layers.create(MeshLayer, **self._input_options())

        self.player = self._make_player()
        cube = Cube(**self._entity_options())

        cube.move_x(-1.5)
        cube.move_z(-1.5)

        entities = self._mesh_layer().entities
        entities.add(self.player)
        entities.add(cube)

    def load(self) -> None:
        super().load()

    def update(self, delta_time: float) -> None:
        """Spin every renderable entity of the mesh layer."""
        layer = self.layers.use(MeshLayer)
        if layer is None:
            return
        for entity in layer.entities:
            if entity.is_renderable:
                entity.rotate_x(7.5 * delta_time)
                entity.rotate_y(8.5 * delta_time)
                entity.rotate_z(9.5 * delta_time)

    def on_key_up(self, key: int) -> None:
        if key == KEY_1:
            self._scene_manager().set_current_scene(TestScene)