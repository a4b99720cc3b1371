"""Process-wide registry of the engine's subsystems."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any


@dataclass
class Application:
    """Holds the window, renderer, managers, input devices, game and timer."""

    window: Any = None
    renderer: Any = None
    scene_manager: Any = None
    shader_manager: Any = None
    game: Any = None
    keyboard: Any = None
    mouse: Any = None
    timer: Any = None


@lru_cache(maxsize=None)
def get_application() -> Application:
    """The shared application registry, created on first use."""
    return Application()


def reset_application() -> None:
    """Discard the shared registry so the next call creates a fresh one."""
    get_application.cache_clear()