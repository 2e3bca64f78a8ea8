"""Synchronous event bus for domain event dispatch.

The EventBus provides a lightweight, synchronous pub/sub mechanism so the
engine can hand each tick's events to consumers without knowing who they
are.

Design goals:
- Zero overhead when no subscribers (single dict lookup)
- Synchronous for determinism
- Type-safe dispatch via event type
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import Iterable, TypeVar

T = TypeVar("T")


class EventBus:
    """Synchronous event bus for domain events.

    Events are dispatched immediately to all registered handlers.
    Handlers registered for ``object`` receive every event.

    Example:
        bus = EventBus()
        bus.subscribe(ReproductionEvent, show_birth)
        bus.emit(event)
    """

    def __init__(self) -> None:
        """Initialize an empty event bus."""
        self._handlers: dict[type, list[Callable]] = defaultdict(list)

    def emit(self, event: object) -> None:
        """Emit an event to all registered handlers.

        Handlers for the exact event type run first, then catch-all handlers,
        each group in registration order.
        """
        for handler in self._handlers.get(type(event), ()):
            handler(event)
        for handler in self._handlers.get(object, ()):
            handler(event)

    def emit_all(self, events: Iterable[object]) -> None:
        for event in events:
            self.emit(event)

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        """Register a handler for a specific event type (``object`` for all)."""
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> bool:
        """Remove a handler for a specific event type.

        Returns:
            True if handler was found and removed, False otherwise
        """
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)
            return True
        return False

