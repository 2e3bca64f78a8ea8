"""Tests for the EventBus domain event dispatch system."""

from ecosim.events import EventBus
from ecosim.events.domain_events import DeathEvent, ReproductionEvent
from ecosim.math_utils import Position


def death(organism_id: str = "a") -> DeathEvent:
    return DeathEvent(
        organism_id=organism_id, type="fox", position=Position(1, 1), cause="environment", timestamp=0
    )


class TestEventBus:
    """Test suite for EventBus functionality."""

    def test_emit_reaches_subscriber(self) -> None:
        """Verify events are delivered to subscribed handlers."""
        bus = EventBus()
        received: list = []
        bus.subscribe(DeathEvent, received.append)

        event = death("x")
        bus.emit(event)

        assert received == [event]

    def test_no_subscribers_no_crash(self) -> None:
        bus = EventBus()
        bus.emit(death())

    def test_dispatch_is_by_exact_type(self) -> None:
        bus = EventBus()
        births: list = []
        bus.subscribe(ReproductionEvent, births.append)
        bus.emit(death())
        assert births == []

    def test_catch_all_runs_after_typed_handlers(self) -> None:
        bus = EventBus()
        order: list = []
        bus.subscribe(object, lambda e: order.append("all"))
        bus.subscribe(DeathEvent, lambda e: order.append("typed"))
        bus.emit_all([death(), death()])
        assert order == ["typed", "all", "typed", "all"]

    def test_unsubscribe(self) -> None:
        bus = EventBus()
        received: list = []
        bus.subscribe(DeathEvent, received.append)
        assert bus.unsubscribe(DeathEvent, received.append) is True
        assert bus.unsubscribe(DeathEvent, received.append) is False
        bus.emit(death())
        assert received == []

