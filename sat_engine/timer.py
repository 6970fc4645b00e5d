# sat_engine/timer.py

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Set

from .clock import Clock

logger = logging.getLogger(__name__)


class ModuleTimer:
    """
    Countdown for a single module.

    - one decrement per clock tick
    - advisory warnings fire once each when the countdown lands on a threshold
    - on_expired fires exactly once when the countdown reaches 0
    - stop() is idempotent; a stopped timer ignores any further tick
    """

    def __init__(
        self,
        duration_seconds: int,
        clock: Clock,
        *,
        on_tick: Optional[Callable[[int], None]] = None,
        on_warning: Optional[Callable[[int], None]] = None,
        on_expired: Optional[Callable[[], None]] = None,
        warning_thresholds: Iterable[int] = (300, 60),
    ):
        if duration_seconds <= 0:
            raise ValueError("duration_seconds must be positive")
        self.duration_seconds = duration_seconds
        self._clock = clock
        self._on_tick = on_tick
        self._on_warning = on_warning
        self._on_expired = on_expired
        self._thresholds = sorted(set(warning_thresholds), reverse=True)
        self._warned: Set[int] = set()

        self._remaining = duration_seconds
        self._running = False
        self._expired = False

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def elapsed_seconds(self) -> int:
        return self.duration_seconds - self._remaining

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def has_expired(self) -> bool:
        return self._expired

    def start(self) -> None:
        if self._running or self._expired:
            return
        self._running = True
        self._clock.subscribe(self._handle_tick)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self._clock.unsubscribe(self._handle_tick)

    def _handle_tick(self) -> None:
        if not self._running:
            return

        self._remaining -= 1
        if self._on_tick:
            self._on_tick(self._remaining)

        for threshold in self._thresholds:
            if self._remaining == threshold and threshold not in self._warned:
                self._warned.add(threshold)
                logger.info(f"⏳ {threshold}s remaining")
                if self._on_warning:
                    self._on_warning(threshold)

        if self._remaining <= 0 and not self._expired:
            self._remaining = 0
            self._expired = True
            self.stop()
            logger.info("⏰ Time expired")
            if self._on_expired:
                self._on_expired()
