"""Vitality phase: per-organism health, adaptation and evolution.

Every organism is updated independently against the same population
snapshot, so the result does not depend on iteration order. The only shared
resource is the RNG, drawn once per organism in population order.
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from ecosim.config.ecosystem import (
    ADAPTATION_HEALTH_MAX,
    ADAPTATION_HEALTH_MIN,
    DEAD_MATTER_HEALTH,
    HEALTH_JITTER,
    HEALTH_MAX,
    HEALTH_MIN,
    SEASONAL_ADAPTATION_BONUS,
)
from ecosim.config.organisms import STARVATION_PENALTY, STARVING_THRESHOLD
from ecosim.entities.organism import Organism
from ecosim.environment import EffectiveEnvironment, Season
from ecosim.events.domain_events import EvolutionEvent
from ecosim.evolution.adaptation import calculate_adaptation_gain
from ecosim.evolution.stages import get_evolution_info, get_next_evolution_stage
from ecosim.math_utils import clamp
from ecosim.species import (
    is_decomposer,
    is_herbivore,
    is_mobile,
    is_predator,
    is_producer,
    native_biome,
)
from ecosim.systems.base import PhaseResult

logger = logging.getLogger(__name__)

HEAT_STRESS_SUNLIGHT = 85.0


@dataclass(frozen=True)
class PopulationContext:
    """Facts about the whole population that individual organisms react to."""

    has_producers: bool
    has_prey: bool
    has_dead_matter: bool

    @classmethod
    def from_population(cls, organisms: Sequence[Organism]) -> "PopulationContext":
        return cls(
            has_producers=any(is_producer(o.type) for o in organisms),
            has_prey=any(is_herbivore(o.type) for o in organisms),
            has_dead_matter=any(o.health < DEAD_MATTER_HEALTH for o in organisms),
        )


def calculate_health_change(
    organism: Organism,
    context: PopulationContext,
    environment: EffectiveEnvironment,
    hunger_enabled: bool = True,
) -> float:
    """Deterministic part of an organism's health change for one tick.

    The random jitter is added separately by :func:`update_organism`.
    """
    water = environment.water_level
    sunlight = environment.sunlight_level
    organism_type = organism.type
    traits = organism.traits
    change = 0.0

    if is_producer(organism_type):
        base = 0.0
        if sunlight > 70:
            base += 2
        elif sunlight < 30:
            base -= 2
        if water > 60:
            base += 2
        elif water < 30:
            base -= 3
        change += base * environment.growth_modifier
    elif is_herbivore(organism_type):
        change += 1 if context.has_producers else -3
        if water < 20:
            change -= 2
    elif is_predator(organism_type):
        change += 1 if context.has_prey else -2
    elif is_decomposer(organism_type):
        if context.has_dead_matter:
            change += 2
        if water > 40:
            change += 1

    if sunlight > HEAT_STRESS_SUNLIGHT and native_biome(organism_type) != "ocean":
        change -= 1

    # Trait bonuses
    if "drought-resistant" in traits and water < 30:
        change += 2
    if "heat-resistant" in traits and sunlight > HEAT_STRESS_SUNLIGHT:
        change += 1
    if "water-efficient" in traits and water < 40:
        change += 1
    if "fast-growing" in traits and organism.health < 50:
        change += 1

    if hunger_enabled and is_mobile(organism_type) and organism.hunger >= STARVING_THRESHOLD:
        change -= STARVATION_PENALTY

    return change


def seasonal_adaptation_multiplier(organism_type: str, season: Season) -> float:
    """Winter favours plant adaptation, summer favours rabbits and foxes."""
    if season == Season.WINTER and is_producer(organism_type):
        return SEASONAL_ADAPTATION_BONUS
    if season == Season.SUMMER and organism_type in ("rabbit", "fox"):
        return SEASONAL_ADAPTATION_BONUS
    return 1.0


def calculate_tick_adaptation(organism: Organism, environment: EffectiveEnvironment) -> float:
    """Adaptation gained this tick; only organisms with 20 < health < 80 adapt."""
    if not ADAPTATION_HEALTH_MIN < organism.health < ADAPTATION_HEALTH_MAX:
        return 0.0
    gain = calculate_adaptation_gain(
        organism,
        environment.water_level,
        environment.sunlight_level,
        environment.biome_type,
    )
    return gain * seasonal_adaptation_multiplier(organism.type, environment.season)


def update_organism(
    organism: Organism,
    context: PopulationContext,
    environment: EffectiveEnvironment,
    rng: random.Random,
    now: float,
    hunger_enabled: bool = True,
) -> Tuple[Organism, Optional[EvolutionEvent]]:
    """Apply one tick of health, adaptation and evolution to a single organism."""
    change = calculate_health_change(organism, context, environment, hunger_enabled)
    change += rng.uniform(-HEALTH_JITTER, HEALTH_JITTER)
    new_health = clamp(organism.health + change, HEALTH_MIN, HEALTH_MAX)

    new_points = organism.adaptation_points + calculate_tick_adaptation(organism, environment)

    new_stage = get_next_evolution_stage(organism.type, organism.stage, new_points)
    event = None
    traits = organism.traits
    if new_stage > organism.stage:
        info = get_evolution_info(organism.type, new_stage)
        traits = info.traits
        event = EvolutionEvent(
            organism_id=organism.id,
            type=organism.type,
            from_stage=organism.stage,
            to_stage=new_stage,
            stage_name=info.name,
            timestamp=now,
        )
        logger.debug(f"{organism.type} {organism.id[:8]} evolved to {info.name} (stage {new_stage})")

    updated = replace(
        organism,
        health=new_health,
        adaptation_points=new_points,
        stage=new_stage,
        traits=traits,
    )
    return updated, event


def run_vitality_phase(
    organisms: Sequence[Organism],
    environment: EffectiveEnvironment,
    rng: random.Random,
    now: float,
    hunger_enabled: bool = True,
) -> PhaseResult:
    """Update every organism against the same snapshot."""
    context = PopulationContext.from_population(organisms)
    updated = []
    events = []
    for organism in organisms:
        new_org, event = update_organism(organism, context, environment, rng, now, hunger_enabled)
        updated.append(new_org)
        if event is not None:
            events.append(event)
    return PhaseResult(
        organisms=tuple(updated),
        events=events,
        details={"updated": len(updated), "evolved": len(events)},
    )
