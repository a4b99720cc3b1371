import struct
from types import SimpleNamespace

import numpy as np
import pygame
import pytest

from blocks.application import Application
from blocks.camera import Camera
from blocks.color import Color
from blocks.mesh import DrawCall
from blocks.renderer import SKY_COLOR, Renderer

WIDTH, HEIGHT = 40, 30
CENTER = (WIDTH // 2, HEIGHT // 2)
IDENTITY = tuple(float(v) for v in np.eye(4).flatten(order="F"))
RED = Color.from_ints(255, 0, 0).abgr()
BLUE = Color.from_ints(0, 0, 255).abgr()


class FakeSceneManager:
    def __init__(self):
        self.renderer = None
        self.calls = []

    def render_current_scene(self):
        for call in self.calls:
            self.renderer.submit(call)


def triangle(vertices, color):
    vb = b"".join(struct.pack("<3fI", x, y, z, color) for x, y, z in vertices)
    return DrawCall(
        view_id=0,
        program=None,
        vertex_buffer=vb,
        index_buffer=struct.pack("<3H", 0, 1, 2),
        transform=IDENTITY,
    )


def full_screen(z, color):
    return triangle([(-1.0, -1.0, z), (3.0, -1.0, z), (-1.0, 3.0, z)], color)


@pytest.fixture
def setup():
    app = Application()
    manager = FakeSceneManager()
    app.scene_manager = manager
    renderer = Renderer(app)
    manager.renderer = renderer
    window = SimpleNamespace(width=WIDTH, height=HEIGHT, surface=pygame.Surface((WIDTH, HEIGHT)))
    renderer.initialize(window)
    return renderer, manager, window


def pixel(window, pos):
    return tuple(window.surface.get_at(pos))[:3]


def test_submit_before_initialize_raises():
    with pytest.raises(RuntimeError):
        Renderer(Application()).submit(full_screen(0.5, RED))


def test_render_before_initialize_raises():
    with pytest.raises(RuntimeError):
        Renderer(Application()).render()


def test_empty_frame_shows_sky(setup):
    renderer, _, window = setup
    renderer.render()
    sky = ((SKY_COLOR >> 24) & 0xFF, (SKY_COLOR >> 16) & 0xFF, (SKY_COLOR >> 8) & 0xFF)
    assert pixel(window, CENTER) == sky
    assert renderer.view_rect == (0, 0, WIDTH, HEIGHT)
    assert renderer.triangles_drawn == 0


def test_triangle_is_drawn_in_its_colour(setup):
    renderer, manager, window = setup
    manager.calls.append(full_screen(0.5, RED))
    renderer.render()
    assert pixel(window, CENTER) == (255, 0, 0)
    assert pixel(window, (5, 5)) == (255, 0, 0)
    assert renderer.triangles_drawn == 1


def test_nearer_triangle_covers_farther(setup):
    renderer, manager, window = setup
    manager.calls.extend([full_screen(0.2, RED), full_screen(0.8, BLUE)])
    renderer.render()
    assert pixel(window, CENTER) == (255, 0, 0)
    assert renderer.triangles_drawn == 2


def test_camera_sees_triangle_in_front(setup):
    renderer, manager, window = setup
    camera = Camera(60.0, WIDTH / HEIGHT, 0.1, 100.0)
    camera.set_view((0.0, 0.0, -5.0), (0.0, 0.0, 0.0))
    camera.apply_view(renderer)
    manager.calls.append(triangle([(-1.0, -1.0, 0.0), (1.0, -1.0, 0.0), (0.0, 1.0, 0.0)], RED))
    renderer.render()
    assert pixel(window, CENTER) == (255, 0, 0)


def test_triangle_behind_camera_is_skipped(setup):
    renderer, manager, window = setup
    camera = Camera(60.0, WIDTH / HEIGHT, 0.1, 100.0)
    camera.set_view((0.0, 0.0, -5.0), (0.0, 0.0, -10.0))
    camera.apply_view(renderer)
    manager.calls.append(triangle([(-1.0, -1.0, 0.0), (1.0, -1.0, 0.0), (0.0, 1.0, 0.0)], RED))
    renderer.render()
    assert renderer.triangles_drawn == 0
    assert pixel(window, CENTER) != (255, 0, 0)


def test_frames_do_not_keep_old_draw_calls(setup):
    renderer, manager, _ = setup
    manager.calls.append(full_screen(0.5, RED))
    renderer.render()
    manager.calls.clear()
    renderer.render()
    assert renderer.triangles_drawn == 0
    assert renderer.frame == 2


def test_view_transform_needs_sixteen_values(setup):
    renderer, _, _ = setup
    with pytest.raises(ValueError):
        renderer.set_view_transform(0, (1.0, 2.0), IDENTITY)


def test_index_past_vertices_is_rejected(setup):
    renderer, manager, _ = setup
    bad = DrawCall(
        view_id=0,
        program=None,
        vertex_buffer=struct.pack("<3fI", 0.0, 0.0, 0.0, RED),
        index_buffer=struct.pack("<3H", 0, 1, 2),
        transform=IDENTITY,
    )
    manager.calls.append(bad)
    with pytest.raises(ValueError):
        renderer.render()


def test_shutdown_stops_renderer(setup):
    renderer, _, _ = setup
    renderer.shutdown()
    assert renderer.is_running is False
    with pytest.raises(RuntimeError):
        renderer.submit(full_screen(0.5, RED))


def test_initialize_rejects_empty_size():
    renderer = Renderer(Application())
    with pytest.raises(ValueError):
        renderer.initialize(SimpleNamespace(width=0, height=10, surface=None))