"""Simulation engine: owns the mutable state and applies commands.

The engine is a COORDINATOR, not a DOER. The tick function computes the next
state; the engine holds the current one, swaps it in after each tick,
publishes the tick's events on its EventBus and exposes the operator
commands and read-only snapshots.

State changes happen in exactly two places:
- ``step()`` commits a tick's result
- the command methods (placement, levels, speed, pause, season, biome)

Commands take effect immediately and are visible to the very next tick.
"""

import logging
import random
import uuid
from collections import Counter
from dataclasses import replace
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ecosim.config.ecosystem import (
    LEVEL_MAX,
    LEVEL_MIN,
    MAX_SIMULATION_SPEED,
    MIN_SIMULATION_SPEED,
)
from ecosim.config.simulation_config import VALID_BIOMES, SimulationConfig
from ecosim.ecosystem_stats import (
    average_adaptation,
    average_health,
    count_roles,
    fully_evolved_species,
    species_distribution,
    stage_distribution,
)
from ecosim.entities.organism import Organism
from ecosim.environment import Season
from ecosim.events.domain_events import FeedingEvent, MovementEvent, ReproductionEvent
from ecosim.events.event_bus import EventBus
from ecosim.exceptions import CommandError, ConfigurationError, EcosimError, SimulationError
from ecosim.math_utils import Position, clamp
from ecosim.placement import try_place
from ecosim.simulation.state import EnvironmentState, SimulationSnapshot, SimulationState
from ecosim.simulation.tick import TickResult, tick, tick_interval_ms

logger = logging.getLogger(__name__)

PositionLike = Union[Position, Mapping[str, float], Tuple[float, float]]


def _to_position(position: PositionLike) -> Position:
    if isinstance(position, Position):
        return position
    if isinstance(position, Mapping):
        return Position(float(position["x"]), float(position["y"]))
    x, y = position
    return Position(float(x), float(y))


class SimulationEngine:
    """Headless ecosystem simulation.

    Attributes:
        config: Simulation configuration
        rng: The single random source for ticks, ids and placement
        event_bus: Receives every event emitted by a tick
        run_id: Unique identifier for this engine instance
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the simulation engine.

        Args:
            config: Simulation configuration (defaults if omitted)
            rng: Shared random number generator for deterministic runs
            seed: Optional seed (used if rng is not provided)
        """
        self.config = config or SimulationConfig()
        self.config.validate()

        if rng is not None:
            self.rng: random.Random = rng
            self.seed = None
        elif seed is not None:
            self.rng = random.Random(seed)
            self.seed = seed
        else:
            self.rng = random.Random()
            self.seed = None

        self.event_bus = EventBus()
        self.run_id: str = str(uuid.uuid4())
        self._state = self._initial_state()
        self._last_result: Optional[TickResult] = None
        logger.info(f"SimulationEngine initialized with run_id={self.run_id}")

    def _initial_state(self) -> SimulationState:
        cfg = self.config
        return SimulationState(
            organisms=(),
            environment=EnvironmentState(
                water_level=cfg.water_level,
                sunlight_level=cfg.sunlight_level,
                biome_type=cfg.biome_type,
                season=Season(cfg.seasons.initial_season),
                season_length_ms=cfg.seasons.season_length_ms,
                simulation_speed=cfg.simulation_speed,
            ),
            biome_health=cfg.biome_health,
        )

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def state(self) -> SimulationState:
        """The current committed state (immutable)."""
        return self._state

    @property
    def organisms(self) -> Tuple[Organism, ...]:
        return self._state.organisms

    @property
    def environment(self) -> EnvironmentState:
        return self._state.environment

    @property
    def paused(self) -> bool:
        return self._state.environment.is_paused

    @property
    def tick_interval_ms(self) -> float:
        return tick_interval_ms(self.config, self._state.environment.simulation_speed)

    @property
    def last_result(self) -> Optional[TickResult]:
        return self._last_result

    def get_organism(self, organism_id: str) -> Optional[Organism]:
        for org in self._state.organisms:
            if org.id == organism_id:
                return org
        return None

    def snapshot(self) -> SimulationSnapshot:
        """Read-only view of the current state plus the last tick's events."""
        state = self._state
        env = state.environment
        last = self._last_result
        return SimulationSnapshot(
            biome_type=env.biome_type,
            biome_health=state.biome_health,
            organisms=state.organisms,
            water_level=env.water_level,
            sunlight_level=env.sunlight_level,
            simulation_speed=env.simulation_speed,
            is_paused=env.is_paused,
            current_season=env.season,
            season_progress=env.season_progress,
            reproduction_events=last.events_of(ReproductionEvent) if last else (),
            feeding_events=last.events_of(FeedingEvent) if last else (),
            movement_events=last.events_of(MovementEvent) if last else (),
            time_ms=state.time_ms,
            tick_count=state.tick_count,
        )

    def get_stats(self) -> Dict[str, Any]:
        """Summary statistics for the current population."""
        organisms = self._state.organisms
        roles = count_roles(organisms)
        return {
            "tick_count": self._state.tick_count,
            "time_ms": self._state.time_ms,
            "organism_count": len(organisms),
            "producer_count": roles.producers,
            "consumer_count": roles.consumers,
            "decomposer_count": roles.decomposers,
            "average_health": average_health(organisms),
            "average_adaptation": average_adaptation(organisms),
            "biome_health": self._state.biome_health,
            "species_distribution": species_distribution(organisms),
            "stage_distribution": stage_distribution(organisms),
            "fully_evolved_species": fully_evolved_species(organisms),
            "season": self._state.environment.season.value,
        }

    # ------------------------------------------------------------------
    # Simulation loop
    # ------------------------------------------------------------------

    def step(self) -> Optional[TickResult]:
        """Run one tick and commit it; returns None while paused."""
        if self.paused:
            return None

        before = Counter(org.type for org in self._state.organisms)
        try:
            result = tick(self._state, self.config, self.rng)
        except EcosimError:
            raise
        except Exception as e:
            raise SimulationError(f"Tick {self._state.tick_count + 1} failed: {e}") from e
        self._state = result.state
        self._last_result = result

        after = Counter(org.type for org in result.state.organisms)
        for species in before:
            if species not in after:
                logger.info(f"Species extinct: {species} (tick {result.state.tick_count})")

        self.event_bus.emit_all(result.events)
        return result

    def run(self, ticks: int) -> int:
        """Run up to ``ticks`` ticks; returns how many actually ran."""
        ran = 0
        for _ in range(ticks):
            if self.step() is None:
                break
            ran += 1
        return ran

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def place_organism(self, organism_type: str, position: PositionLike) -> bool:
        """Insert a new organism if the placement gatekeeper accepts it."""
        pos = _to_position(position)
        state = self._state
        organism = try_place(
            organism_type,
            pos,
            state.organisms,
            state.environment.effective(),
            self.rng,
            now=state.time_ms,
            radius=self.config.ecosystem.placement_exclusion_radius,
        )
        if organism is None:
            return False
        self._state = replace(state, organisms=state.organisms + (organism,))
        logger.info(f"Placed {organism_type} at ({pos.x:.1f}, {pos.y:.1f})")
        return True

    def remove_organism(self, organism_id: str) -> None:
        state = self._state
        remaining = tuple(org for org in state.organisms if org.id != organism_id)
        if len(remaining) == len(state.organisms):
            logger.debug(f"remove_organism: no organism with id {organism_id}")
            return
        self._state = replace(state, organisms=remaining)
        logger.info(f"Removed organism {organism_id}")

    def _update_environment(self, **changes: Any) -> None:
        self._state = replace(self._state, environment=replace(self._state.environment, **changes))

    def set_water_level(self, level: float) -> None:
        self._update_environment(water_level=clamp(float(level), LEVEL_MIN, LEVEL_MAX))

    def set_sunlight_level(self, level: float) -> None:
        self._update_environment(sunlight_level=clamp(float(level), LEVEL_MIN, LEVEL_MAX))

    def set_simulation_speed(self, speed: int) -> None:
        speed = int(clamp(int(speed), MIN_SIMULATION_SPEED, MAX_SIMULATION_SPEED))
        self._update_environment(simulation_speed=speed)
        logger.info(f"Simulation speed set to {speed}x")

    def toggle_pause(self) -> bool:
        """Flip the paused flag; returns the new value."""
        paused = not self.paused
        self._update_environment(is_paused=paused)
        logger.info("Simulation paused" if paused else "Simulation resumed")
        return paused

    def force_season(self, season: Union[Season, str]) -> None:
        try:
            target = Season(season)
        except ValueError as e:
            raise CommandError(f"Unknown season: {season!r}") from e
        self._update_environment(season=target, season_progress=0.0)
        logger.info(f"Season forced to {target.value}")

    def set_season_length(self, milliseconds: float) -> None:
        if milliseconds <= 0:
            raise ConfigurationError(f"season length must be positive, got {milliseconds}")
        self._update_environment(season_length_ms=float(milliseconds))

    def set_biome_type(self, biome_type: str) -> None:
        biome = getattr(biome_type, "value", biome_type)
        if biome not in VALID_BIOMES:
            raise CommandError(f"Unknown biome type: {biome_type!r}")
        self._update_environment(biome_type=biome)
        logger.info(f"Biome changed to {biome}")

    def reset(self) -> None:
        """Discard the population and restore the configured environment."""
        self._state = self._initial_state()
        self._last_result = None
        logger.info("Simulation reset")
