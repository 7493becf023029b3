# src/termtodo/core/startup.py

from __future__ import annotations

import time
from collections.abc import Callable


class StartupGate:
    """
    Timed gate in front of the main view.

    Purely cosmetic: the tasks are already loaded when the gate starts.
    A zero duration is ready immediately.
    """

    def __init__(self, duration: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.duration = max(0.0, float(duration))
        self._clock = clock
        self._started_at = clock()

    def elapsed(self) -> float:
        return max(0.0, self._clock() - self._started_at)

    def progress(self) -> float:
        """Fraction of the delay that has passed, in [0, 1]."""
        if self.duration <= 0:
            return 1.0
        return min(1.0, self.elapsed() / self.duration)

    def is_ready(self) -> bool:
        return self.elapsed() >= self.duration
