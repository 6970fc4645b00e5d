# sat_engine/events.py

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, DefaultDict, List

# Event names emitted by the engine
MODULE_STARTED = "module_started"
TIME_WARNING = "time_warning"
TICK = "tick"
MODULE_SUBMITTED = "module_submitted"
TEST_COMPLETED = "test_completed"
TEST_ABANDONED = "test_abandoned"

EVENTS = (MODULE_STARTED, TIME_WARNING, TICK, MODULE_SUBMITTED, TEST_COMPLETED, TEST_ABANDONED)

Listener = Callable[..., Any]


class EventEmitter:
    """Synchronous observer registry. Listener errors propagate to the emitter."""

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, List[Listener]] = defaultdict(list)

    def subscribe(self, event: str, listener: Listener) -> None:
        if event not in EVENTS:
            raise ValueError(f"Unknown event {event!r}")
        self._listeners[event].append(listener)

    def unsubscribe(self, event: str, listener: Listener) -> None:
        if listener in self._listeners.get(event, []):
            self._listeners[event].remove(listener)

    def emit(self, event: str, *args: Any) -> None:
        for listener in list(self._listeners.get(event, [])):
            listener(*args)
