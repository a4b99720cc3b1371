"""The game window: owns the display surface and runs the event loop."""

from __future__ import annotations

import time
from typing import Any, Callable, Iterable

import pygame

from blocks.application import Application, get_application

_SCANCODE_COUNT = 512


class Window:
    """A pygame window feeding input to the game and presenting its frames."""

    def __init__(
        self,
        width: int = 1280,
        height: int = 720,
        title: str = "Blocks",
        *,
        app: Application | None = None,
        event_source: Callable[[], Iterable[Any]] | None = None,
        frame_delay_ms: int = 16,
    ) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.app = app if app is not None else get_application()
        self.frame_delay_ms = frame_delay_ms
        self.surface: pygame.Surface | None = None
        self.initialized = False
        self.should_close = False
        self.keystate = bytearray(_SCANCODE_COUNT)
        self._event_source = event_source

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def is_running(self) -> bool:
        return self.initialized

    def initialize(self) -> None:
        """Open the display window."""
        try:
            pygame.display.init()
            self.surface = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(self.title)
        except pygame.error as exc:
            raise RuntimeError(f"failed to create the window: {exc}") from exc
        self.initialized = True
        self.should_close = False

    def run(self) -> None:
        """Poll input, update and render the game once per frame until closed."""
        game, keyboard, mouse = self.app.game, self.app.keyboard, self.app.mouse
        if game is None or keyboard is None or mouse is None:
            raise RuntimeError("the game, keyboard and mouse must be registered before running")
        poll = self._event_source if self._event_source is not None else pygame.event.get

        while not self.should_close:
            for event in poll():
                self._dispatch(event, keyboard, mouse)

            keyboard.handle_key_press(self.keystate)
            game.update()
            game.render()
            if self.initialized:
                pygame.display.flip()
            mouse.reset()

            if self.frame_delay_ms > 0:
                time.sleep(self.frame_delay_ms / 1000.0)

    def _dispatch(self, event: Any, keyboard: Any, mouse: Any) -> None:
        if event.type == pygame.QUIT:
            self.should_close = True
        elif event.type == pygame.MOUSEMOTION:
            dx, dy = event.rel
            mouse.handle_mouse_move(dx, dy)
        elif event.type == pygame.KEYDOWN:
            self._set_key(event, 1)
            keyboard.handle_key_down(event.key)
        elif event.type == pygame.KEYUP:
            self._set_key(event, 0)
            keyboard.handle_key_up(event.key)

    def _set_key(self, event: Any, state: int) -> None:
        scancode = getattr(event, "scancode", None)
        if isinstance(scancode, int) and 0 <= scancode < _SCANCODE_COUNT:
            self.keystate[scancode] = state

    def close(self) -> None:
        """Close the display and end the event loop."""
        if self.initialized:
            pygame.display.quit()
        self.surface = None
        self.initialized = False
        self.should_close = True

    def set_cursor_visibility(self, visible: bool) -> None:
        """Show the cursor, or hide it and capture the mouse for relative motion."""
        if not self.initialized:
            raise RuntimeError("the window is not initialized")
        pygame.mouse.set_visible(visible)
        pygame.event.set_grab(not visible)