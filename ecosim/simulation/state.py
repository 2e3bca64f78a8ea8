"""Simulation state and the read-only snapshot handed to consumers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from ecosim.config.seasons import DEFAULT_SEASON_LENGTH_MS
from ecosim.entities.organism import Organism
from ecosim.environment import Season, effective_environment, EffectiveEnvironment
from ecosim.events.domain_events import FeedingEvent, MovementEvent, ReproductionEvent


@dataclass(frozen=True)
class EnvironmentState:
    """Process-wide environment scalars.

    ``water_level`` and ``sunlight_level`` are the operator-set base values;
    the season's modifiers are applied on top of them each tick.
    """

    water_level: float
    sunlight_level: float
    biome_type: str = "forest"
    season: Season = Season.SPRING
    season_progress: float = 0.0
    season_length_ms: float = DEFAULT_SEASON_LENGTH_MS
    simulation_speed: int = 1
    is_paused: bool = False

    def effective(self) -> EffectiveEnvironment:
        return effective_environment(self.water_level, self.sunlight_level, self.season, self.biome_type)


@dataclass(frozen=True)
class SimulationState:
    """Everything a tick reads and writes.

    Attributes:
        organisms: Living population, in insertion order
        environment: Environment scalars
        biome_health: Aggregate ecosystem health (10-100)
        time_ms: Simulation clock, advanced by one tick interval per tick
        tick_count: Number of ticks committed
    """

    organisms: Tuple[Organism, ...]
    environment: EnvironmentState
    biome_health: float
    time_ms: float = 0.0
    tick_count: int = 0


@dataclass(frozen=True)
class SimulationSnapshot:
    """Read-only view for the presentation layer.

    Event lists hold the events emitted by the most recent tick.
    """

    biome_type: str
    biome_health: float
    organisms: Tuple[Organism, ...]
    water_level: float
    sunlight_level: float
    simulation_speed: int
    is_paused: bool
    current_season: Season
    season_progress: float
    reproduction_events: Tuple[ReproductionEvent, ...] = field(default_factory=tuple)
    feeding_events: Tuple[FeedingEvent, ...] = field(default_factory=tuple)
    movement_events: Tuple[MovementEvent, ...] = field(default_factory=tuple)
    time_ms: float = 0.0
    tick_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Camel-cased dict matching the presentation payload shape."""
        return {
            "biomeType": self.biome_type,
            "biomeHealth": self.biome_health,
            "organisms": [o.to_dict() for o in self.organisms],
            "waterLevel": self.water_level,
            "sunlightLevel": self.sunlight_level,
            "simulationSpeed": self.simulation_speed,
            "isPaused": self.is_paused,
            "currentSeason": self.current_season.value,
            "seasonProgress": self.season_progress,
            "reproductionEvents": [e.to_dict() for e in self.reproduction_events],
            "feedingEvents": [e.to_dict() for e in self.feeding_events],
            "movementEvents": [e.to_dict() for e in self.movement_events],
            "timeMs": self.time_ms,
            "tickCount": self.tick_count,
        }
