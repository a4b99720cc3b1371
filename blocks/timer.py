"""Frame timer measuring the time elapsed between updates."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Tracks the time in seconds between consecutive calls to update()."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self.last_time = clock()
        self.delta_time = 0.0

    def update(self) -> float:
        """Record the current time and return the seconds since the last update."""
        now = self._clock()
        self.delta_time = now - self.last_time
        self.last_time = now
        return self.delta_time