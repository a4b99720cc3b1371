from types import SimpleNamespace

import numpy as np
import pytest

from blocks.application import get_application, reset_application
from blocks.entity import Entity, Inputable, Renderable, Updatable
from blocks.timer import Timer


@pytest.fixture(autouse=True)
def _fresh_application():
    reset_application()
    yield
    reset_application()


class _Geometry(Renderable):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.draws = 0

    def initialize(self, entity):
        self.entity = entity
        self.vertex_buffer = b"v"
        self.index_buffer = b"i"
        self.initialized = True

    def draw(self):
        if self.validate_draw():
            self.draws += 1


def _valid_shader(valid=True):
    return SimpleNamespace(shader_program=SimpleNamespace(valid=valid))


def test_updatable_takes_timer_from_application():
    timer = Timer()
    get_application().timer = timer
    assert Updatable().timer is timer


def test_updatable_explicit_timer_wins():
    get_application().timer = Timer()
    own = Timer()
    assert Updatable(timer=own).timer is own


def test_inputable_takes_devices_from_application():
    app = get_application()
    app.keyboard = object()
    app.mouse = object()
    inputable = Inputable()
    assert inputable.keyboard is app.keyboard
    assert inputable.mouse is app.mouse


def test_renderable_is_abstract():
    with pytest.raises(TypeError):
        Renderable()


def test_validate_draw_requires_initialization():
    geometry = _Geometry(shader=_valid_shader())
    assert geometry.validate_draw() is False
    geometry.initialize(Entity())
    assert geometry.validate_draw() is True


def test_validate_draw_rejects_invalid_program():
    geometry = _Geometry(shader=_valid_shader(valid=False))
    geometry.initialize(Entity())
    assert geometry.validate_draw() is False


def test_validate_draw_rejects_missing_shader():
    geometry = _Geometry()
    geometry.initialize(Entity())
    assert geometry.validate_draw() is False


def test_validate_draw_rejects_missing_buffers():
    geometry = _Geometry(shader=_valid_shader())
    geometry.initialize(Entity())
    geometry.index_buffer = None
    assert geometry.validate_draw() is False


def test_renderable_copies_geometry_lists():
    indices = (0, 1, 2)
    entity = Entity(_Geometry(view_id=3, indices=indices))
    assert entity.renderable.indices == [0, 1, 2]
    assert entity.renderable.view_id == 3


def test_entity_without_renderable():
    entity = Entity()
    assert entity.is_renderable is False
    assert entity.renderable is None


def test_entity_with_renderable():
    geometry = _Geometry()
    entity = Entity(geometry)
    assert entity.is_renderable is True
    assert entity.renderable is geometry


def test_entity_takes_shader_manager_from_application():
    manager = object()
    get_application().shader_manager = manager
    assert Entity().shaders is manager


def test_entity_is_movable():
    entity = Entity(position=(1.0, 2.0, 3.0))
    entity.move_x(1.0)
    assert np.allclose(entity.position, [2.0, 2.0, 3.0])
    assert np.allclose(entity.scale, [1.0, 1.0, 1.0])


def test_entity_default_hooks_leave_state_alone():
    entity = Entity()
    entity.update(0.5)
    entity.on_key_down(1)
    entity.on_mouse_move(3, 4)
    assert np.allclose(entity.position, [0.0, 0.0, 0.0])
    assert np.allclose(entity.rotation, [0.0, 0.0, 0.0])