"""Reproduction phase: mate finding, the reproduction draw and offspring.

Gates, in order, for each organism:
1. it has not already mated this tick
2. it is out of its reproduction cooldown
3. its species is below the population cap (offspring born earlier in the
   same tick count towards the cap)
4. an eligible mate that passes gates 1 and 2 exists

The nearest such mate is chosen and a single uniform draw decides success.
"""

import logging
import random
from collections import Counter
from typing import Dict, List, Sequence, Set

from ecosim.config.simulation_config import EcosystemConfig
from ecosim.entities.organism import Organism
from ecosim.events.domain_events import InteractionEvent, ReproductionEvent
from ecosim.reproduction import (
    apply_parent_cost,
    calculate_reproduction_chance,
    create_offspring,
    find_potential_mates,
    is_in_cooldown,
    reproduction_succeeds,
)
from ecosim.systems.base import PhaseResult

logger = logging.getLogger(__name__)


def run_breeding_phase(
    organisms: Sequence[Organism],
    environment_factor: float,
    simulation_speed: float,
    ecosystem: EcosystemConfig,
    rng: random.Random,
    now: float,
) -> PhaseResult:
    """Resolve reproduction for one tick.

    Returns:
        PhaseResult whose organisms are the (cost-adjusted) parents and
        bystanders followed by the new offspring
    """
    snapshot = tuple(organisms)
    current: Dict[str, Organism] = {org.id: org for org in snapshot}
    counts = Counter(org.type for org in snapshot)
    mated: Set[str] = set()
    offspring: List[Organism] = []
    events: List[object] = []
    attempts = 0

    def available(org: Organism) -> bool:
        return org.id not in mated and not is_in_cooldown(
            org, now, simulation_speed, ecosystem.reproduction_cooldown_ms
        )

    for organism in snapshot:
        if not available(organism):
            continue
        if counts[organism.type] >= ecosystem.cap_for(organism.type):
            continue

        mates = [
            m
            for m in find_potential_mates(organism, snapshot, ecosystem.mating_distance)
            if available(m)
        ]
        if not mates:
            continue
        mate = min(mates, key=lambda m: organism.position.distance_to(m.position))

        attempts += 1
        chance = calculate_reproduction_chance(organism, mate, environment_factor)
        if not reproduction_succeeds(chance, simulation_speed, rng.random()):
            continue

        child = create_offspring(organism, mate, rng, now)
        offspring.append(child)
        counts[child.type] += 1
        mated.update((organism.id, mate.id))
        current[organism.id] = apply_parent_cost(current[organism.id], now)
        current[mate.id] = apply_parent_cost(current[mate.id], now)

        events.append(
            ReproductionEvent(
                id=child.id,
                type=child.type,
                position=child.position,
                timestamp=now,
                parent_ids=(organism.id, mate.id),
            )
        )
        events.append(
            InteractionEvent(
                kind="mating",
                organisms=(organism.id, mate.id),
                position=child.position,
                timestamp=now,
                result=child.id,
            )
        )
        logger.debug(f"{child.type} born at ({child.position.x:.1f}, {child.position.y:.1f})")

    parents_and_rest = tuple(current[org.id] for org in snapshot)
    return PhaseResult(
        organisms=parents_and_rest + tuple(offspring),
        events=events,
        details={"attempts": attempts, "births": len(offspring)},
    )
