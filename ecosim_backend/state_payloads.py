"""Lightweight data transfer objects for simulation state serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import orjson

from ecosim.events.domain_events import FeedingEvent, MovementEvent, ReproductionEvent
from ecosim.simulation.state import SimulationSnapshot
from ecosim_backend.event_log import EventLog


@dataclass
class StatsPayload:
    """Headline numbers shown next to the biome view."""

    organism_count: int
    producer_count: int
    consumer_count: int
    decomposer_count: int
    average_health: float
    average_adaptation: float
    species_distribution: Dict[str, int] = field(default_factory=dict)
    fully_evolved_species: List[str] = field(default_factory=list)

    @classmethod
    def from_engine_stats(cls, stats: Dict[str, Any]) -> "StatsPayload":
        return cls(
            organism_count=stats["organism_count"],
            producer_count=stats["producer_count"],
            consumer_count=stats["consumer_count"],
            decomposer_count=stats["decomposer_count"],
            average_health=stats["average_health"],
            average_adaptation=stats["average_adaptation"],
            species_distribution=dict(stats["species_distribution"]),
            fully_evolved_species=list(stats["fully_evolved_species"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "organismCount": self.organism_count,
            "producerCount": self.producer_count,
            "consumerCount": self.consumer_count,
            "decomposerCount": self.decomposer_count,
            "averageHealth": round(self.average_health, 1),
            "averageAdaptation": round(self.average_adaptation, 1),
            "speciesDistribution": self.species_distribution,
            "fullyEvolvedSpecies": self.fully_evolved_species,
        }


@dataclass
class StatePayload:
    """Full state update for the presentation layer."""

    snapshot: SimulationSnapshot
    reproduction_events: Tuple[ReproductionEvent, ...] = ()
    feeding_events: Tuple[FeedingEvent, ...] = ()
    movement_events: Tuple[MovementEvent, ...] = ()
    stats: Optional[StatsPayload] = None
    type: str = "update"

    @classmethod
    def from_snapshot(
        cls,
        snapshot: SimulationSnapshot,
        *,
        event_log: Optional[EventLog] = None,
        stats: Optional[StatsPayload] = None,
    ) -> "StatePayload":
        """Build a payload; events come from the retention window when given,
        otherwise from the snapshot (last tick only)."""
        if event_log is None:
            return cls(
                snapshot=snapshot,
                reproduction_events=snapshot.reproduction_events,
                feeding_events=snapshot.feeding_events,
                movement_events=snapshot.movement_events,
                stats=stats,
            )
        return cls(
            snapshot=snapshot,
            reproduction_events=event_log.of_type(ReproductionEvent),
            feeding_events=event_log.of_type(FeedingEvent),
            movement_events=event_log.of_type(MovementEvent),
            stats=stats,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = self.snapshot.to_dict()
        data["type"] = self.type
        data["reproductionEvents"] = [e.to_dict() for e in self.reproduction_events]
        data["feedingEvents"] = [e.to_dict() for e in self.feeding_events]
        data["movementEvents"] = [e.to_dict() for e in self.movement_events]
        if self.stats is not None:
            data["stats"] = self.stats.to_dict()
        return data

    def to_json(self) -> str:
        return orjson.dumps(self.to_dict()).decode("utf-8")
