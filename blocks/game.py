"""The game: wires the subsystems together and drives updates and rendering."""

from __future__ import annotations

import argparse
from enum import IntEnum
from typing import Any, Sequence

from blocks.application import Application, get_application
from blocks.inputs import Keyboard, Mouse
from blocks.renderer import Renderer
from blocks.scene_manager import SceneManager
from blocks.scenes import AnotherScene, TestScene
from blocks.shader_manager import ShaderManager
from blocks.timer import Timer
from blocks.window import Window


class GameStatus(IntEnum):
    """Lifecycle state of the game."""

    IDLE = 0
    RUNNING = 1
    PAUSED = 2
    STOPPED = 3


class Game:
    """Owns the game status and passes frames and events on to the scenes."""

    def __init__(self, app: Application | None = None, timer: Timer | None = None) -> None:
        self.app = app if app is not None else get_application()
        if timer is None:
            timer = self.app.timer if self.app.timer is not None else Timer()
        self.timer = timer
        self.status = GameStatus.IDLE

    def run(self) -> None:
        """Set up every subsystem, load the scenes and enter the window loop."""
        app = self.app
        if app.window is None:
            app.window = Window(app=app)
        if app.keyboard is None:
            app.keyboard = Keyboard(app)
        if app.mouse is None:
            app.mouse = Mouse(app)
        if app.renderer is None:
            app.renderer = Renderer(app)
        if app.shader_manager is None:
            app.shader_manager = ShaderManager()
        if app.scene_manager is None:
            app.scene_manager = SceneManager()
        app.timer = self.timer
        app.game = self

        window = app.window
        window.initialize()
        app.renderer.initialize(window)
        app.shader_manager.initialize()

        app.scene_manager.add_scene(AnotherScene, app=app)
        app.scene_manager.add_scene(TestScene, app=app)

        self.status = GameStatus.RUNNING
        window.run()

    def _scene_manager(self) -> Any:
        if self.app.scene_manager is None:
            raise RuntimeError("no scene manager is registered with the application")
        return self.app.scene_manager

    def update(self) -> None:
        """Advance the timer and, while running, the current scene."""
        if self.status == GameStatus.STOPPED:
            if self.app.window is not None:
                self.app.window.close()
            return

        self.timer.update()

        if self.status == GameStatus.RUNNING:
            self._scene_manager().update(self.timer.delta_time)

    def render(self) -> None:
        renderer = self.app.renderer
        if renderer is not None and renderer.is_running:
            renderer.render()

    def pause(self) -> None:
        self.status = GameStatus.PAUSED

    def resume(self) -> None:
        self.status = GameStatus.RUNNING

    def stop(self) -> None:
        self.status = GameStatus.STOPPED

    def send_on_key_down_event(self, key: int) -> None:
        if self.status == GameStatus.RUNNING:
            self._scene_manager().handle_key_down(key)

    def send_on_key_up_event(self, key: int) -> None:
        if self.status == GameStatus.RUNNING:
            self._scene_manager().handle_key_up(key)

    def send_on_key_press_event(self, keystate: Sequence[int]) -> None:
        if self.status == GameStatus.RUNNING:
            self._scene_manager().handle_key_press(keystate)

    def send_on_mouse_move_event(self, x: int, y: int) -> None:
        if self.status == GameStatus.RUNNING:
            self._scene_manager().handle_mouse_move(x, y)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="blocks", description="Run the Blocks game.")
    parser.parse_args(argv)
    Game().run()
    return 0