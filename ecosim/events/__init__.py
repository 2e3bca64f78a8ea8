"""Events module for domain event dispatch.

This module provides the EventBus for decoupling the tick from whatever
consumes its output (presentation, logging, tests), plus typed domain event
definitions.
"""

from ecosim.events.domain_events import (
    DeathEvent,
    EvolutionEvent,
    FeedingEvent,
    InteractionEvent,
    MovementEvent,
    ReproductionEvent,
)
from ecosim.events.event_bus import EventBus

__all__ = [
    "DeathEvent",
    "EventBus",
    "EvolutionEvent",
    "FeedingEvent",
    "InteractionEvent",
    "MovementEvent",
    "ReproductionEvent",
]
