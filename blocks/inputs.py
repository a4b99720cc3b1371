"""Keyboard and mouse state, forwarding input events to the active scene."""

from __future__ import annotations

import time
from typing import Any, Sequence

from blocks.application import Application, get_application


def _scene_manager(app: Application) -> Any:
    if app.scene_manager is None:
        raise RuntimeError("no scene manager is registered with the application")
    return app.scene_manager


class Keyboard:
    """Tracks the current key state and forwards key events."""

    def __init__(self, app: Application | None = None) -> None:
        self.app = app if app is not None else get_application()
        self.keystate: Sequence[int] = ()

    def handle_key_press(self, keystate: Sequence[int]) -> None:
        """Store the per-scancode key state and forward it to the scene."""
        self.keystate = keystate
        _scene_manager(self.app).handle_key_press(keystate)

    def handle_key_up(self, key: int) -> None:
        _scene_manager(self.app).handle_key_up(key)

    def handle_key_down(self, key: int) -> None:
        _scene_manager(self.app).handle_key_down(key)

    def is_key_pressed(self, keycode: int) -> bool:
        """Whether the key with this scancode is held in the last key state."""
        if keycode < 0 or keycode >= len(self.keystate):
            return False
        return bool(self.keystate[keycode])


class Mouse:
    """Relative mouse motion for the current frame and cursor visibility."""

    def __init__(self, app: Application | None = None) -> None:
        self.app = app if app is not None else get_application()
        self.axis_x = 0
        self.axis_y = 0
        self.last_update: float | None = None
        self.visible = True

    @property
    def axis(self) -> tuple[int, int]:
        return (self.axis_x, self.axis_y)

    def handle_mouse_move(self, x: int, y: int) -> None:
        """Record relative motion and forward it to the scene."""
        self.axis_x = x
        self.axis_y = y
        self.last_update = time.perf_counter()
        _scene_manager(self.app).handle_mouse_move(self.axis_x, self.axis_y)

    def reset(self) -> None:
        self.axis_x = 0
        self.axis_y = 0

    def _apply_visibility(self) -> None:
        if self.app.window is None:
            raise RuntimeError("no window is registered with the application")
        self.app.window.set_cursor_visibility(self.visible)

    def show(self) -> None:
        self.visible = True
        self._apply_visibility()

    def hide(self) -> None:
        self.visible = False
        self._apply_visibility()

    def toggle_visibility(self) -> None:
        self.visible = not self.visible
        self._apply_visibility()