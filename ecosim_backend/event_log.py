"""Short-lived retention of emitted events for display.

The engine stamps every event with simulation time and forgets it after the
tick. The presentation layer animates births, meals and moves for a few
seconds, so the adapter keeps each event until it falls outside the display
window.
"""

import logging
from collections import deque
from typing import Any, Deque, Iterable, List, Tuple

from ecosim.config.ecosystem import EVENT_DISPLAY_WINDOW_MS

logger = logging.getLogger(__name__)


class EventLog:
    """Events kept for ``window_ms`` of simulation time."""

    def __init__(self, window_ms: float = EVENT_DISPLAY_WINDOW_MS) -> None:
        if window_ms <= 0:
            raise ValueError(f"window_ms must be positive, got {window_ms}")
        self.window_ms = window_ms
        self._events: Deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._events)

    def append(self, event: Any) -> None:
        self._events.append(event)

    def add(self, events: Iterable[Any]) -> None:
        self._events.extend(events)

    def prune(self, now: float) -> int:
        """Drop events older than the window; returns how many were dropped."""
        cutoff = now - self.window_ms
        kept = deque(e for e in self._events if e.timestamp >= cutoff)
        dropped = len(self._events) - len(kept)
        self._events = kept
        if dropped:
            logger.debug(f"EventLog pruned {dropped} events older than {cutoff:.0f}ms")
        return dropped

    def of_type(self, event_type: type) -> Tuple[Any, ...]:
        return tuple(e for e in self._events if isinstance(e, event_type))

    def all(self) -> List[Any]:
        return list(self._events)

    def clear(self) -> None:
        self._events.clear()
