# sat_engine/clock.py

"""
Tick sources for the module timer.

Both clocks deliver ticks on the caller's thread, one callback per
elapsed second, so the engine never sees a concurrent writer.
"""

from __future__ import annotations

import time
from typing import Callable, List, Protocol

TickListener = Callable[[], None]


class Clock(Protocol):
    def subscribe(self, listener: TickListener) -> None:
        ...

    def unsubscribe(self, listener: TickListener) -> None:
        ...


class _ListenerSet:
    def __init__(self) -> None:
        self._listeners: List[TickListener] = []

    def subscribe(self, listener: TickListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: TickListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _tick(self) -> None:
        # Listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            if listener in self._listeners:
                listener()


class ManualClock(_ListenerSet):
    """Deterministic clock advanced by hand (tests, simulations)."""

    def __init__(self) -> None:
        super().__init__()
        self._elapsed = 0

    @property
    def elapsed(self) -> int:
        return self._elapsed

    def advance(self, seconds: int = 1) -> None:
        if seconds < 0:
            raise ValueError("seconds must be non-negative")
        for _ in range(seconds):
            self._elapsed += 1
            self._tick()


class MonotonicClock(_ListenerSet):
    """
    Wall clock backed by time.monotonic().
    Ticks are delivered lazily: call pump() from the UI loop and every
    whole second elapsed since the previous pump is replayed.
    """

    def __init__(self, now: Callable[[], float] = time.monotonic) -> None:
        super().__init__()
        self._now = now
        self._last = now()

    def subscribe(self, listener: TickListener) -> None:
        # Time that passed with nobody listening is not replayed
        if self.listener_count == 0:
            self._last = self._now()
        super().subscribe(listener)

    def pump(self) -> int:
        now = self._now()
        ticks = int(now - self._last)
        if ticks <= 0:
            return 0
        self._last += ticks
        for _ in range(ticks):
            self._tick()
        return ticks
