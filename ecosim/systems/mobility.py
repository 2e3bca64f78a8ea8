"""Mobility phase: hunger, feeding and movement for mobile species.

Feeding is resolved before movement and by role: predators hunt first, then
herbivores graze, then mobile decomposers scavenge. Within a role organisms
act in population order. All distances are measured on the positions the
phase started with, and each victim can be taken only once per tick.

Feeding rules:
- predator + herbivore in range: the prey is killed, the predator gains 25
- herbivore + producer in range: the producer loses 10, the grazer gains 15
- mobile decomposer + weak organism (health < 30) in range: gains 10, no harm
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Set

from ecosim.config.ecosystem import DEAD_MATTER_HEALTH, HEALTH_MAX
from ecosim.config.organisms import (
    GRAZING_DAMAGE,
    GRAZING_GAIN,
    HUNGER_MAX,
    HUNGRY_THRESHOLD,
    HUNTING_GAIN,
    SCAVENGING_GAIN,
    WANDER_MAX,
    WANDER_MIN,
)
from ecosim.config.simulation_config import MobilityConfig
from ecosim.entities.organism import Organism
from ecosim.events.domain_events import FeedingEvent, InteractionEvent, MovementEvent
from ecosim.math_utils import Position
from ecosim.species import is_decomposer, is_herbivore, is_mobile, is_predator, is_producer
from ecosim.systems.base import PhaseResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedingRule:
    result: str
    gain: float
    victim_damage: float
    kills: bool


HUNT = FeedingRule(result="hunted", gain=HUNTING_GAIN, victim_damage=0.0, kills=True)
GRAZE = FeedingRule(result="grazed", gain=GRAZING_GAIN, victim_damage=GRAZING_DAMAGE, kills=False)
SCAVENGE = FeedingRule(result="scavenged", gain=SCAVENGING_GAIN, victim_damage=0.0, kills=False)


def feeding_rule(organism_type: str) -> Optional[FeedingRule]:
    if is_predator(organism_type):
        return HUNT
    if is_herbivore(organism_type):
        return GRAZE
    if is_decomposer(organism_type) and is_mobile(organism_type):
        return SCAVENGE
    return None


def is_food_for(eater: Organism, candidate: Organism) -> bool:
    """Whether ``candidate`` is something ``eater`` can feed on."""
    if candidate.id == eater.id:
        return False
    if is_predator(eater.type):
        return is_herbivore(candidate.type)
    if is_herbivore(eater.type):
        return is_producer(candidate.type)
    if is_decomposer(eater.type):
        return candidate.health < DEAD_MATTER_HEALTH
    return False


def find_nearest_food(
    eater: Organism,
    candidates: Sequence[Organism],
    max_distance: float,
    excluded: Optional[Set[str]] = None,
) -> Optional[Organism]:
    """Closest food within ``max_distance`` of the eater, ignoring excluded ids."""
    best = None
    best_distance = max_distance
    for candidate in candidates:
        if excluded and candidate.id in excluded:
            continue
        if not is_food_for(eater, candidate):
            continue
        dist = eater.position.distance_to(candidate.position)
        if dist <= best_distance:
            best = candidate
            best_distance = dist
    return best


def pick_wander_target(position: Position, radius: float, rng: random.Random) -> Position:
    dx = rng.uniform(-radius, radius)
    dy = rng.uniform(-radius, radius)
    return position.offset(dx, dy).clamped(WANDER_MIN, WANDER_MAX)


def move_cooldown_elapsed(organism: Organism, now: float, cooldown_ms: float, simulation_speed: float) -> bool:
    if organism.last_move_time is None:
        return True
    return now - organism.last_move_time >= cooldown_ms / simulation_speed


def run_mobility_phase(
    organisms: Sequence[Organism],
    config: MobilityConfig,
    rng: random.Random,
    now: float,
    simulation_speed: float,
    tick_interval_ms: float,
) -> PhaseResult:
    """Resolve hunger, feeding and movement for one tick.

    Returns the population with victims' damage applied. Killed prey are left
    in place at zero health for the caller's death filter.
    """
    snapshot = tuple(organisms)
    current: Dict[str, Organism] = {}
    for org in snapshot:
        if is_mobile(org.type):
            org = replace(org, hunger=min(HUNGER_MAX, org.hunger + config.hunger_per_tick))
        current[org.id] = org

    events: List[object] = []
    taken: Set[str] = set()
    killed: Set[str] = set()
    damage: Dict[str, float] = {}
    fed: Set[str] = set()

    eaters = [o for o in snapshot if feeding_rule(o.type) is not None]
    eaters.sort(key=lambda o: (not is_predator(o.type), not is_herbivore(o.type)))

    for eater in eaters:
        if eater.id in killed:
            continue
        org = current[eater.id]
        if org.hunger < HUNGRY_THRESHOLD:
            continue
        food = find_nearest_food(org, snapshot, config.feeding_range, excluded=taken | killed)
        if food is None:
            continue
        rule = feeding_rule(org.type)
        taken.add(food.id)
        if rule.kills:
            killed.add(food.id)
        elif rule.victim_damage:
            damage[food.id] = damage.get(food.id, 0.0) + rule.victim_damage

        current[org.id] = replace(
            org,
            health=min(HEALTH_MAX, org.health + rule.gain),
            hunger=0.0,
            last_meal_time=now,
            target_position=None,
        )
        fed.add(org.id)
        events.append(
            FeedingEvent(
                predator_id=org.id,
                prey_id=food.id,
                position=food.position,
                timestamp=now,
                health_gained=rule.gain,
            )
        )
        events.append(
            InteractionEvent(
                kind="feeding",
                organisms=(org.id, food.id),
                position=food.position,
                timestamp=now,
                result=rule.result,
            )
        )

    moved = 0
    for original in snapshot:
        if original.id in killed or not is_mobile(original.type):
            continue
        org = current[original.id]
        if org.movement_speed <= 0:
            continue

        if move_cooldown_elapsed(org, now, config.move_cooldown_ms, simulation_speed) and org.id not in fed:
            target = None
            if org.hunger >= HUNGRY_THRESHOLD:
                food = find_nearest_food(org, snapshot, config.sense_radius, excluded=killed)
                if food is not None:
                    target = food.position
            if target is None:
                target = pick_wander_target(org.position, config.wander_radius, rng)
            ticks_needed = org.position.distance_to(target) / org.movement_speed
            events.append(
                MovementEvent(
                    organism_id=org.id,
                    start_position=org.position,
                    target_position=target,
                    start_time=now,
                    duration=ticks_needed * tick_interval_ms,
                )
            )
            org = replace(org, target_position=target, last_move_time=now)

        if org.target_position is not None:
            new_position = org.position.step_towards(org.target_position, org.movement_speed)
            reached = new_position == org.target_position
            org = replace(org, position=new_position, target_position=None if reached else org.target_position)
            moved += 1
        current[org.id] = org

    result = []
    for original in snapshot:
        org = current[original.id]
        if original.id in killed:
            org = replace(org, health=0.0)
        elif original.id in damage:
            org = replace(org, health=max(0.0, org.health - damage[original.id]))
        result.append(org)

    return PhaseResult(
        organisms=tuple(result),
        events=events,
        details={"fed": len(fed), "killed": len(killed), "moved": moved},
    )
