"""The tick: a pure state-transition function.

``tick(state, config, rng)`` returns the next state and the events emitted
along the way. It never mutates its input: every phase reads the previous
phase's tuple of organisms and returns a new one, and the committed state is
a fresh ``SimulationState``.

Phase order is fixed (see ``UpdatePhase``):

    ENVIRONMENT -> VITALITY -> LIFECYCLE -> MOBILITY -> REPRODUCTION
                -> ECOSYSTEM -> TIME_UPDATE

Timestamps: a tick that starts at ``state.time_ms`` happens at
``now = state.time_ms + interval`` where ``interval`` is the tick interval at
the current speed. All events are stamped with ``now`` and the committed
clock is ``now``.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Tuple

from ecosim.config.simulation_config import SimulationConfig
from ecosim.environment import SeasonCycle, calculate_environment_factor
from ecosim.ecosystem_stats import calculate_biome_health
from ecosim.events.domain_events import FeedingEvent, MovementEvent, ReproductionEvent
from ecosim.simulation.state import SimulationState
from ecosim.systems.breeding import run_breeding_phase
from ecosim.systems.lifecycle import CAUSE_PREDATION, remove_dead
from ecosim.systems.mobility import run_mobility_phase
from ecosim.systems.vitality import run_vitality_phase
from ecosim.update_phases import UpdatePhase
from ecosim.util.rng import require_rng_param

logger = logging.getLogger(__name__)


@dataclass
class TickResult:
    """Output of one tick.

    Attributes:
        state: The committed next state
        events: All domain events in emission order
        details: Per-phase counts, keyed by UpdatePhase
    """

    state: SimulationState
    events: List[object] = field(default_factory=list)
    details: Dict[UpdatePhase, Dict[str, Any]] = field(default_factory=dict)
    skipped: bool = False

    def events_of(self, event_type: type) -> Tuple[Any, ...]:
        return tuple(e for e in self.events if isinstance(e, event_type))

    @property
    def reproduction_events(self) -> Tuple[ReproductionEvent, ...]:
        return self.events_of(ReproductionEvent)

    @property
    def feeding_events(self) -> Tuple[FeedingEvent, ...]:
        return self.events_of(FeedingEvent)

    @property
    def movement_events(self) -> Tuple[MovementEvent, ...]:
        return self.events_of(MovementEvent)


def tick_interval_ms(config: SimulationConfig, simulation_speed: float) -> float:
    return config.base_interval_ms / simulation_speed


def tick(state: SimulationState, config: SimulationConfig, rng: random.Random) -> TickResult:
    """Advance the simulation by one tick.

    A paused state is returned unchanged with no events.
    """
    rng = require_rng_param(rng, "tick")
    env_state = state.environment
    if env_state.is_paused:
        return TickResult(state=state, skipped=True)

    speed = env_state.simulation_speed
    interval = tick_interval_ms(config, speed)
    now = state.time_ms + interval
    events: List[object] = []
    details: Dict[UpdatePhase, Dict[str, Any]] = {}

    # ENVIRONMENT
    environment = env_state.effective()
    details[UpdatePhase.ENVIRONMENT] = {
        "water_level": environment.water_level,
        "sunlight_level": environment.sunlight_level,
        "growth_modifier": environment.growth_modifier,
    }

    # VITALITY
    vitality = run_vitality_phase(
        state.organisms, environment, rng, now, hunger_enabled=config.mobility.enabled
    )
    events.extend(vitality.events)
    details[UpdatePhase.VITALITY] = vitality.details

    # LIFECYCLE
    lifecycle = remove_dead(vitality.organisms, now)
    events.extend(lifecycle.events)
    details[UpdatePhase.LIFECYCLE] = lifecycle.details
    organisms = lifecycle.organisms

    # MOBILITY
    if config.mobility.enabled:
        mobility = run_mobility_phase(organisms, config.mobility, rng, now, speed, interval)
        events.extend(mobility.events)
        predation = remove_dead(mobility.organisms, now, cause=CAUSE_PREDATION)
        events.extend(predation.events)
        organisms = predation.organisms
        details[UpdatePhase.MOBILITY] = {**mobility.details, "deaths": predation.details["deaths"]}
    else:
        details[UpdatePhase.MOBILITY] = {"skipped": True}

    # REPRODUCTION
    environment_factor = calculate_environment_factor(
        environment.water_level, environment.sunlight_level, environment.season
    )
    breeding = run_breeding_phase(organisms, environment_factor, speed, config.ecosystem, rng, now)
    events.extend(breeding.events)
    details[UpdatePhase.REPRODUCTION] = {**breeding.details, "environment_factor": environment_factor}
    organisms = breeding.organisms

    # ECOSYSTEM
    biome_health = calculate_biome_health(organisms)
    details[UpdatePhase.ECOSYSTEM] = {"biome_health": biome_health, "population": len(organisms)}

    # TIME_UPDATE
    cycle = SeasonCycle(env_state.season, env_state.season_length_ms, env_state.season_progress)
    season_changed = cycle.advance(interval, speed)
    details[UpdatePhase.TIME_UPDATE] = {"season": cycle.season.value, "season_changed": season_changed}

    next_state = replace(
        state,
        organisms=organisms,
        environment=replace(env_state, season=cycle.season, season_progress=cycle.progress),
        biome_health=biome_health,
        time_ms=now,
        tick_count=state.tick_count + 1,
    )
    return TickResult(state=next_state, events=events, details=details)
