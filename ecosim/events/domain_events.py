"""Domain event definitions emitted by the tick.

These events represent significant occurrences in the simulation domain.
They are data-only (frozen dataclasses) and carry a ``timestamp`` in
simulation milliseconds. The core only emits them; how long they stay
visible is up to the consumer.

Design principles:
- Immutable: Events are facts that happened, don't mutate them
- Complete: Include all data handlers need (no callbacks to domain)
- Typed: Use strong types for type-safe dispatch and IDE support
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ecosim.math_utils import Position


@dataclass(frozen=True)
class ReproductionEvent:
    """Two organisms produced an offspring.

    Attributes:
        id: Event id (the offspring's id)
        type: Species of the parents and offspring
        position: Where the offspring appeared
        timestamp: Simulation time (ms)
        parent_ids: Ids of both parents
    """

    id: str
    type: str
    position: Position
    timestamp: float
    parent_ids: Tuple[str, str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "position": self.position.to_dict(),
            "timestamp": self.timestamp,
            "parentIds": list(self.parent_ids),
        }


@dataclass(frozen=True)
class FeedingEvent:
    """An organism fed.

    Attributes:
        predator_id: The organism that ate
        prey_id: The organism eaten or grazed (None when there is no victim)
        position: Where the feeding took place
        timestamp: Simulation time (ms)
        health_gained: Health restored to the eater
    """

    predator_id: str
    prey_id: Optional[str]
    position: Position
    timestamp: float
    health_gained: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "predatorId": self.predator_id,
            "preyId": self.prey_id,
            "position": self.position.to_dict(),
            "timestamp": self.timestamp,
            "healthGained": self.health_gained,
        }


@dataclass(frozen=True)
class MovementEvent:
    """An organism set off towards a new target.

    Attributes:
        organism_id: The moving organism
        start_position: Position when the target was chosen
        target_position: Destination
        start_time: Simulation time (ms)
        duration: Expected travel time (ms) at the current speed
    """

    organism_id: str
    start_position: Position
    target_position: Position
    start_time: float
    duration: float

    @property
    def timestamp(self) -> float:
        return self.start_time

    def to_dict(self) -> Dict[str, Any]:
        return {
            "organismId": self.organism_id,
            "startPosition": self.start_position.to_dict(),
            "targetPosition": self.target_position.to_dict(),
            "startTime": self.start_time,
            "duration": self.duration,
        }


@dataclass(frozen=True)
class InteractionEvent:
    """Generic organism interaction (feeding, mating).

    Attributes:
        kind: "feeding" or "mating"
        organisms: Ids of the organisms involved
        position: Where it happened
        timestamp: Simulation time (ms)
        result: Optional outcome description
    """

    kind: str
    organisms: Tuple[str, ...]
    position: Position
    timestamp: float
    result: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "organisms": list(self.organisms),
            "position": self.position.to_dict(),
            "timestamp": self.timestamp,
            "result": self.result,
        }


@dataclass(frozen=True)
class EvolutionEvent:
    """An organism advanced one evolution stage."""

    organism_id: str
    type: str
    from_stage: int
    to_stage: int
    stage_name: str
    timestamp: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "organismId": self.organism_id,
            "type": self.type,
            "fromStage": self.from_stage,
            "toStage": self.to_stage,
            "stageName": self.stage_name,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class DeathEvent:
    """An organism was removed from the population.

    Attributes:
        cause: "environment" (health ran out) or "predation"
    """

    organism_id: str
    type: str
    position: Position
    cause: str
    timestamp: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "organismId": self.organism_id,
            "type": self.type,
            "position": self.position.to_dict(),
            "cause": self.cause,
            "timestamp": self.timestamp,
        }
