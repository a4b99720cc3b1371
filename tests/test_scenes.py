import numpy as np
import pytest

from blocks.application import get_application, reset_application
from blocks.inputs import Keyboard, Mouse
from blocks.layer import MeshLayer, UILayer
from blocks.mesh import Cube, Plane
from blocks.player import Player
from blocks.scene_manager import SceneManager
from blocks.scenes import KEY_1, KEY_2, KEY_ESCAPE, AnotherScene, TestScene
from blocks.shader_manager import ShaderManager
from blocks.timer import Timer


class FakeWindow:
    aspect_ratio = 2.0

    def __init__(self):
        self.cursor_visible = []

    def set_cursor_visibility(self, visible):
        self.cursor_visible.append(visible)


@pytest.fixture
def app(tmp_path):
    reset_application()
    application = get_application()
    application.window = FakeWindow()
    application.timer = Timer(clock=lambda: 0.0)
    application.keyboard = Keyboard(application)
    application.mouse = Mouse(application)
    shaders = ShaderManager(base_dir=tmp_path)
    shaders.initialize()
    application.shader_manager = shaders
    application.scene_manager = SceneManager()
    yield application
    reset_application()


def mesh_entities(scene):
    return list(scene.layers.use(MeshLayer).entities)


def test_test_scene_builds_its_entities(app):
    scene = app.scene_manager.add_scene(TestScene, app=app)
    entities = mesh_entities(scene)
    assert [type(e) for e in entities] == [Player, Cube, Cube, Plane]
    assert entities[0] is scene.player
    assert scene.layers.use(UILayer) is not None and scene.loaded


def test_test_scene_places_entities(app):
    scene = app.scene_manager.add_scene(TestScene, app=app)
    _, cube, another, plane = mesh_entities(scene)
    assert np.allclose(cube.position, [1.5, 2.5, 3.5])
    assert np.allclose(another.position, [0.0, 0.5, 0.0])
    assert np.allclose(plane.scale, [10.0, 10.0, 10.0])


def test_test_scene_hides_the_cursor(app):
    app.scene_manager.add_scene(TestScene, app=app)
    assert app.mouse.visible is False
    assert app.window.cursor_visible == [False]


def test_player_uses_window_aspect_ratio(app):
    scene = app.scene_manager.add_scene(TestScene, app=app)
    assert scene.player.camera.aspect_ratio == app.window.aspect_ratio


def test_escape_toggles_cursor(app):
    scene = app.scene_manager.add_scene(TestScene, app=app)
    scene.on_key_up(KEY_ESCAPE)
    assert app.mouse.visible is True
    assert app.window.cursor_visible == [False, True]


def test_key_two_switches_to_another_scene(app):
    manager = app.scene_manager
    manager.add_scene(AnotherScene, app=app)
    scene = manager.add_scene(TestScene, app=app)
    assert manager.current_scene is scene
    scene.on_key_up(KEY_2)
    assert manager.current_scene is manager.scenes[AnotherScene]
    assert manager.current_scene.loaded


def test_key_two_without_another_scene_clears_current(app):
    manager = app.scene_manager
    scene = manager.add_scene(TestScene, app=app)
    scene.on_key_up(KEY_2)
    assert manager.current_scene is None


def test_key_one_switches_back_to_test_scene(app):
    manager = app.scene_manager
    manager.add_scene(TestScene, app=app)
    another = manager.add_scene(AnotherScene, app=app)
    another.on_key_up(KEY_1)
    assert manager.current_scene is manager.scenes[TestScene]


def test_other_keys_leave_scene_alone(app):
    manager = app.scene_manager
    scene = manager.add_scene(AnotherScene, app=app)
    scene.on_key_up(KEY_2)
    assert manager.current_scene is scene


def test_another_scene_builds_player_and_cube(app):
    scene = app.scene_manager.add_scene(AnotherScene, app=app)
    entities = mesh_entities(scene)
    assert [type(e) for e in entities] == [Player, Cube]
    assert np.allclose(entities[1].position, [-1.5, 0.0, -1.5])
    assert scene.layers.use(UILayer) is None


def test_another_scene_spins_only_renderables(app):
    scene = app.scene_manager.add_scene(AnotherScene, app=app)
    player, cube = mesh_entities(scene)
    scene.update(1.0)
    assert np.allclose(cube.rotation, [7.5, 8.5, 9.5])
    assert np.allclose(player.rotation, [0.0, 0.0, 0.0])


def test_test_scene_update_is_static(app):
    scene = app.scene_manager.add_scene(TestScene, app=app)
    before = [e.rotation.copy() for e in mesh_entities(scene)]
    scene.update(1.0)
    after = [e.rotation for e in mesh_entities(scene)]
    assert all(np.array_equal(a, b) for a, b in zip(before, after))


def test_scene_switch_without_manager_raises(app):
    scene = app.scene_manager.add_scene(AnotherScene, app=app)
    app.scene_manager = None
    with pytest.raises(RuntimeError):
        scene.on_key_up(KEY_1)


def test_init_without_window_raises(app):
    app.window = None
    with pytest.raises(RuntimeError):
        app.scene_manager.add_scene(AnotherScene, app=app)