"""Observable angle value with per-tick change notification."""
from __future__ import annotations

from typing import Callable

_Handler = Callable[[float, float], None]


class AngleState:
    """Single source of truth for the current angle.

    One writer calls set(); readers either poll ``value`` or subscribe and
    receive ``(old, new)`` pairs when flush() runs.
    """

    def __init__(self, value: float = 0.0) -> None:
        self._value = value
        self._subscribers: list[_Handler] = []
        self._queue: list[tuple[float, float]] = []

    @property
    def value(self) -> float:
        return self._value

    @property
    def pending(self) -> int:
        return len(self._queue)

    def subscribe(self, handler: _Handler) -> None:
        self._subscribers.append(handler)

    def unsubscribe(self, handler: _Handler) -> None:
        try:
            self._subscribers.remove(handler)
        except ValueError:
            pass

    def set(self, value: float) -> None:
        if value == self._value:
            return
        self._queue.append((self._value, value))
        self._value = value

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for old, new in snapshot:
            for handler in list(self._subscribers):
                handler(old, new)
