"""Placement gatekeeper for operator-added organisms.

A placement is rejected when the spot is crowded or when the species cannot
survive the current (seasonally modified) conditions. Rejection is a normal
outcome reported through :class:`PlacementDecision`, never an exception.
"""

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Optional

from ecosim.config.ecosystem import PLACEMENT_EXCLUSION_RADIUS
from ecosim.entities.organism import Organism, create_organism
from ecosim.environment import EffectiveEnvironment, Season
from ecosim.math_utils import Position

logger = logging.getLogger(__name__)

REASON_OCCUPIED = "occupied"
REASON_UNSUITABLE = "unsuitable"
REASON_OUT_OF_BOUNDS = "out_of_bounds"


@dataclass(frozen=True)
class PlacementDecision:
    """Outcome of a placement check."""

    accepted: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.accepted


def is_position_occupied(
    position: Position,
    population: Iterable[Organism],
    radius: float = PLACEMENT_EXCLUSION_RADIUS,
) -> bool:
    """True if any living organism lies strictly within ``radius`` of ``position``."""
    return any(org.is_alive and org.position.distance_to(position) < radius for org in population)


def can_survive(organism_type: str, environment: EffectiveEnvironment) -> bool:
    """Species-specific survivability preconditions against the effective environment."""
    water = environment.water_level
    sunlight = environment.sunlight_level

    if organism_type in ("tree", "flower"):
        if environment.season == Season.WINTER:
            return False
        return water >= 30 and sunlight >= 40
    if organism_type == "cactus":
        return water <= 50
    if organism_type == "coral":
        return water >= 70
    return True


def can_place(
    organism_type: str,
    position: Position,
    population: Iterable[Organism],
    environment: EffectiveEnvironment,
    radius: float = PLACEMENT_EXCLUSION_RADIUS,
) -> PlacementDecision:
    """Decide whether ``organism_type`` may be inserted at ``position``."""
    if not position.in_bounds():
        return PlacementDecision(False, REASON_OUT_OF_BOUNDS)
    if is_position_occupied(position, population, radius):
        return PlacementDecision(False, REASON_OCCUPIED)
    if not can_survive(organism_type, environment):
        return PlacementDecision(False, REASON_UNSUITABLE)
    return PlacementDecision(True)


def try_place(
    organism_type: str,
    position: Position,
    population: Iterable[Organism],
    environment: EffectiveEnvironment,
    rng: random.Random,
    now: float = 0.0,
    radius: float = PLACEMENT_EXCLUSION_RADIUS,
) -> Optional[Organism]:
    """Build the new organism if placement is allowed, else return None.

    The caller owns the population and inserts the returned organism.
    """
    decision = can_place(organism_type, position, population, environment, radius)
    if not decision:
        logger.debug(
            f"Placement rejected: {organism_type} at ({position.x:.1f}, {position.y:.1f}) ({decision.reason})"
        )
        return None
    return create_organism(organism_type, position, rng=rng, now=now)
