"""The player: a first-person camera driven by keyboard and mouse."""

from __future__ import annotations

from typing import Any, Sequence

from blocks.application import get_application
from blocks.camera import Camera
from blocks.entity import Entity

SCANCODE_A = 4
SCANCODE_D = 7
SCANCODE_S = 22
SCANCODE_W = 26
SCANCODE_SPACE = 44
SCANCODE_LSHIFT = 225

CAMERA_OFFSET = (0.0, 0.8, 0.0)
PITCH_LIMIT = 89.0


class Player(Entity):
    """An entity carrying the camera, walking with WASD and looking with the mouse."""

    def __init__(
        self,
        *,
        aspect_ratio: float | None = None,
        renderer: Any = None,
        speed: float = 5.0,
        mouse_sensitivity: float = 0.1,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        if aspect_ratio is None:
            window = get_application().window
            if window is None:
                raise RuntimeError("no window is registered to take the aspect ratio from")
            aspect_ratio = window.aspect_ratio
        self.camera = Camera(60.0, aspect_ratio, 0.1, 100.0)
        self.renderer = renderer
        self.speed = speed
        self.mouse_sensitivity = mouse_sensitivity
        self.position = (0.0, 0.0, -10.0)

    def update(self, delta_time: float) -> None:
        """Move the camera to the player's eye and hand it to the renderer."""
        renderer = self.renderer if self.renderer is not None else get_application().renderer
        if renderer is None:
            raise RuntimeError("no renderer is available for the camera")
        self.camera.update_view(self.position, self.rotation, CAMERA_OFFSET)
        self.camera.apply_view(renderer)

    def on_key_press(self, keystate: Sequence[int]) -> None:
        """Walk, rise and sink according to the keys held this frame."""
        if self.keyboard is None:
            raise RuntimeError("player has no keyboard")
        if self.timer is None:
            raise RuntimeError("player has no timer")
        step = self.speed * self.timer.delta_time
        pressed = self.keyboard.is_key_pressed

        if pressed(SCANCODE_W):
            self.move(self.forward() * step)
        if pressed(SCANCODE_S):
            self.move(-self.forward() * step)
        if pressed(SCANCODE_A):
            self.move(-self.right() * step)
        if pressed(SCANCODE_D):
            self.move(self.right() * step)
        if pressed(SCANCODE_SPACE):
            self.move_y(step)
        if pressed(SCANCODE_LSHIFT):
            self.move_y(-step)

    def on_mouse_move(self, x: int, y: int) -> None:
        """Turn with horizontal motion and pitch with vertical, clamping the pitch."""
        self.rotate_y(x * self.mouse_sensitivity)
        self.rotate_x(-y * self.mouse_sensitivity)
        self.rotation[0] = min(max(self.rotation[0], -PITCH_LIMIT), PITCH_LIMIT)