"""Lifecycle phase: remove organisms whose health reached zero."""

import logging
from typing import Sequence

from ecosim.entities.organism import Organism
from ecosim.events.domain_events import DeathEvent
from ecosim.systems.base import PhaseResult

logger = logging.getLogger(__name__)

CAUSE_ENVIRONMENT = "environment"
CAUSE_PREDATION = "predation"


def remove_dead(organisms: Sequence[Organism], now: float, cause: str = CAUSE_ENVIRONMENT) -> PhaseResult:
    """Drop every organism with ``health <= 0`` and emit a DeathEvent for each."""
    living = []
    events = []
    for organism in organisms:
        if organism.health > 0:
            living.append(organism)
            continue
        events.append(
            DeathEvent(
                organism_id=organism.id,
                type=organism.type,
                position=organism.position,
                cause=cause,
                timestamp=now,
            )
        )
        logger.debug(f"{organism.type} {organism.id[:8]} died ({cause})")
    return PhaseResult(organisms=tuple(living), events=events, details={"deaths": len(events)})
