"""Base building blocks of everything that lives in a scene."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Sequence

from blocks.application import get_application
from blocks.color import VertexColor
from blocks.movable import Movable

_log = logging.getLogger(__name__)


class Updatable:
    """Something that advances once per frame."""

    def __init__(self, *, timer: Any = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.timer = timer if timer is not None else get_application().timer

    def update(self, delta_time: float) -> None:
        """Advance by delta_time seconds; nothing happens by default."""


class Inputable:
    """Something that reacts to keyboard and mouse events.

    The default handlers remember the most recent event of each kind;
    subclasses override them to react.
    """

    def __init__(self, *, keyboard: Any = None, mouse: Any = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        app = get_application()
        self.keyboard = keyboard if keyboard is not None else app.keyboard
        self.mouse = mouse if mouse is not None else app.mouse
        self.last_key_down: int | None = None
        self.last_key_up: int | None = None
        self.last_keystate: Sequence[int] | None = None
        self.last_mouse_motion: tuple[int, int] | None = None

    def on_key_down(self, key: int) -> None:
        """Called when a key goes down; remembers the key by default."""
        self.last_key_down = key

    def on_key_up(self, key: int) -> None:
        """Called when a key is released; remembers the key by default."""
        self.last_key_up = key

    def on_key_press(self, keystate: Sequence[int]) -> None:
        """Called every frame with the key state; remembers it by default."""
        self.last_keystate = keystate

    def on_mouse_move(self, x: int, y: int) -> None:
        """Called with the relative mouse motion; remembers it by default."""
        self.last_mouse_motion = (x, y)


class Renderable(ABC):
    """Geometry drawn with a shader on behalf of an entity."""

    def __init__(
        self,
        view_id: int = 0,
        vertices: Iterable[VertexColor] = (),
        indices: Iterable[int] = (),
        shader: Any = None,
        *,
        renderer: Any = None,
    ) -> None:
        self.view_id = view_id
        self.vertices: list[VertexColor] = list(vertices)
        self.indices: list[int] = list(indices)
        self.shader = shader
        self.renderer = renderer
        self.initialized = False
        self.entity: Entity | None = None
        self.vertex_buffer: bytes | None = None
        self.index_buffer: bytes | None = None

    @abstractmethod
    def initialize(self, entity: "Entity") -> None:
        """Prepare the GPU buffers and bind the renderable to its entity."""

    @abstractmethod
    def draw(self) -> None:
        """Submit the geometry for drawing."""

    def validate_draw(self) -> bool:
        """Whether everything needed for a draw is in place; logs what is missing."""
        if not self.initialized:
            _log.error("Mesh not initialized in draw")
            return False
        program = getattr(self.shader, "shader_program", None)
        if program is None or not program.valid:
            _log.error("Invalid shader program handle in draw")
            return False
        if self.vertex_buffer is None or self.index_buffer is None:
            _log.error("Invalid vertex/index buffer in draw")
            return False
        return True

    def _submit_draw(self, draw_call: Any) -> None:
        renderer = self.renderer if self.renderer is not None else get_application().renderer
        if renderer is None:
            raise RuntimeError("no renderer is available to submit the draw")
        renderer.submit(draw_call)


class Entity(Movable, Updatable, Inputable):
    """A movable, updatable, input-aware object, optionally with geometry."""

    def __init__(
        self,
        renderable: Renderable | None = None,
        *,
        shaders: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.renderable = renderable
        self.shaders = shaders if shaders is not None else get_application().shader_manager

    @property
    def is_renderable(self) -> bool:
        return self.renderable is not None