"""Mate selection, reproduction odds and offspring synthesis.

Pure functions only. Gating that needs population-level context (cooldowns
across the tick, species caps) is applied by the breeding phase in
``ecosim.systems.breeding``; this module just supplies the rules.

Randomness is always injected: ``create_offspring`` takes the simulation RNG
and ``reproduction_succeeds`` takes the uniform draw itself, so both are
reproducible under test.
"""

import random
from dataclasses import replace
from typing import Iterable, List, Optional

from ecosim.config.ecosystem import (
    MATING_DISTANCE,
    MAX_ADAPTATION_INHERITANCE,
    OFFSPRING_HEALTH,
    OFFSPRING_INHERITANCE_RATE,
    OFFSPRING_JITTER,
    OFFSPRING_POSITION_MAX,
    OFFSPRING_POSITION_MIN,
    OFFSPRING_STAGE_BONUS,
    REPRODUCTION_BASE_CHANCE,
    REPRODUCTION_COOLDOWN_MS,
    REPRODUCTION_HEALTH_COST,
    REPRODUCTION_HEALTH_FLOOR,
    REPRODUCTION_MIN_HEALTH,
    REPRODUCTION_SPEED_DIVISOR,
)
from ecosim.config.organisms import (
    FAST_BREEDER_MULTIPLIER,
    FAST_BREEDER_TYPES,
    PLANT_BREEDER_MULTIPLIER,
    PLANT_BREEDER_TYPES,
    SLOW_BREEDER_MULTIPLIER,
    SLOW_BREEDER_TYPES,
)
from ecosim.entities.organism import Organism
from ecosim.evolution.stages import traits_for
from ecosim.species import movement_speed
from ecosim.util.rng import new_organism_id, require_rng_param


def can_reproduce(organism1: Organism, organism2: Organism, max_distance: float = MATING_DISTANCE) -> bool:
    """Whether two organisms may mate: same species, both healthy, close together.

    The relation is symmetric.
    """
    if organism1.type != organism2.type:
        return False
    if organism1.health < REPRODUCTION_MIN_HEALTH or organism2.health < REPRODUCTION_MIN_HEALTH:
        return False
    return organism1.position.distance_to(organism2.position) <= max_distance


def find_potential_mates(
    organism: Organism,
    population: Iterable[Organism],
    max_distance: float = MATING_DISTANCE,
) -> List[Organism]:
    """All other organisms eligible to mate with ``organism``."""
    return [
        other
        for other in population
        if other.id != organism.id and can_reproduce(organism, other, max_distance)
    ]


def breeding_multiplier(organism_type: str) -> float:
    if organism_type in FAST_BREEDER_TYPES:
        return FAST_BREEDER_MULTIPLIER
    if organism_type in SLOW_BREEDER_TYPES:
        return SLOW_BREEDER_MULTIPLIER
    if organism_type in PLANT_BREEDER_TYPES:
        return PLANT_BREEDER_MULTIPLIER
    return 1.0


def calculate_reproduction_chance(organism: Organism, mate: Organism, environment_factor: float) -> float:
    """Per-pair reproduction probability before the speed scaling.

    Base 0.2, scaled by the pair's average health fraction, the environment
    factor and the species' breeding multiplier.
    """
    chance = REPRODUCTION_BASE_CHANCE
    health_factor = ((organism.health + mate.health) / 2) / 100
    chance *= health_factor
    chance *= environment_factor
    chance *= breeding_multiplier(organism.type)
    return chance


def reproduction_succeeds(chance: float, simulation_speed: float, draw: float) -> bool:
    """Compare a uniform ``draw`` in ``[0, 1)`` against the speed-scaled chance."""
    return draw < chance * (simulation_speed / REPRODUCTION_SPEED_DIVISOR)


def reproduction_cooldown_ms(simulation_speed: float, base_cooldown_ms: float = REPRODUCTION_COOLDOWN_MS) -> float:
    return base_cooldown_ms / simulation_speed


def is_in_cooldown(
    organism: Organism,
    now: float,
    simulation_speed: float,
    base_cooldown_ms: float = REPRODUCTION_COOLDOWN_MS,
) -> bool:
    """True until ``base_cooldown_ms / speed`` has passed since the last mating."""
    if organism.last_reproduction_time is None:
        return False
    return now - organism.last_reproduction_time < reproduction_cooldown_ms(simulation_speed, base_cooldown_ms)


def create_offspring(
    parent1: Organism,
    parent2: Organism,
    rng: Optional[random.Random] = None,
    now: float = 0.0,
) -> Organism:
    """Synthesize a stage-0 child of two parents.

    The child appears near the parents' midpoint (jitter of up to 3 units,
    clamped to ``[5, 95]``), starts at 80 health and inherits a randomised
    share of its parents' adaptation plus a bonus for their stages, capped
    at 100.
    """
    rng = require_rng_param(rng, "create_offspring")

    mid = parent1.position.midpoint(parent2.position)
    jitter_x = rng.uniform(-OFFSPRING_JITTER, OFFSPRING_JITTER)
    jitter_y = rng.uniform(-OFFSPRING_JITTER, OFFSPRING_JITTER)
    position = mid.offset(jitter_x, jitter_y).clamped(OFFSPRING_POSITION_MIN, OFFSPRING_POSITION_MAX)

    inheritance = (
        (parent1.adaptation_points + parent2.adaptation_points)
        * OFFSPRING_INHERITANCE_RATE
        * rng.uniform(0.8, 1.2)
    )
    stage_bonus = (parent1.stage + parent2.stage) * OFFSPRING_STAGE_BONUS

    organism_type = parent1.type
    return Organism(
        id=new_organism_id(rng),
        type=organism_type,
        position=position,
        health=OFFSPRING_HEALTH,
        adaptation_points=min(inheritance + stage_bonus, MAX_ADAPTATION_INHERITANCE),
        stage=0,
        traits=traits_for(organism_type, 0),
        birth_time=now,
        movement_speed=movement_speed(organism_type),
    )


def apply_parent_cost(parent: Organism, now: float) -> Organism:
    """Charge a parent the mating health cost and start its cooldown."""
    return replace(
        parent,
        health=max(REPRODUCTION_HEALTH_FLOOR, parent.health - REPRODUCTION_HEALTH_COST),
        last_reproduction_time=now,
    )
