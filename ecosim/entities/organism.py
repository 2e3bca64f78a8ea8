"""The Organism record: the unit of simulation state.

Organisms are frozen dataclasses. The tick builds replacements with
:func:`dataclasses.replace`, so a snapshot handed to a consumer is never
changed underneath it.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ecosim.config.ecosystem import PLACED_ORGANISM_HEALTH
from ecosim.evolution.stages import traits_for
from ecosim.math_utils import Position
from ecosim.species import movement_speed
from ecosim.util.rng import new_organism_id, require_rng_param


@dataclass(frozen=True)
class Organism:
    """A single organism on the biome surface.

    Attributes:
        id: Unique id, fixed for the organism's lifetime
        type: Species identifier
        position: Location on the surface, in percent
        health: 0-100; the organism is removed at 0
        adaptation_points: Accumulated evolutionary pressure
        stage: Evolution stage 0-2, never decreases
        traits: Exactly the traits of ``(type, stage)`` in the evolution table
        birth_time: Simulation time (ms) of creation
        movement_speed: Surface units per tick (0 for sessile species)
        hunger: 0-100, rises every tick for mobile species
        target_position: Current wander/hunt destination
        last_meal_time: Simulation time of the last feeding
        last_move_time: Simulation time the current target was chosen
        last_reproduction_time: Simulation time of the last successful mating
    """

    id: str
    type: str
    position: Position
    health: float
    adaptation_points: float = 0.0
    stage: int = 0
    traits: Tuple[str, ...] = field(default_factory=tuple)
    birth_time: float = 0.0
    movement_speed: float = 0.0
    hunger: float = 0.0
    target_position: Optional[Position] = None
    last_meal_time: Optional[float] = None
    last_move_time: Optional[float] = None
    last_reproduction_time: Optional[float] = None

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def age_ms(self, now: float) -> float:
        return now - self.birth_time

    def to_dict(self) -> Dict[str, Any]:
        """Presentation-friendly dict (camelCase keys)."""
        return {
            "id": self.id,
            "type": self.type,
            "position": self.position.to_dict(),
            "health": self.health,
            "adaptationPoints": self.adaptation_points,
            "stage": self.stage,
            "traits": list(self.traits),
            "birthTime": self.birth_time,
            "movementSpeed": self.movement_speed,
            "hunger": self.hunger,
            "targetPosition": self.target_position.to_dict() if self.target_position else None,
            "lastMealTime": self.last_meal_time,
        }


def create_organism(
    organism_type: str,
    position: Position,
    *,
    rng: Optional[random.Random] = None,
    now: float = 0.0,
    health: float = PLACED_ORGANISM_HEALTH,
    adaptation_points: float = 0.0,
) -> Organism:
    """Build a stage-0 organism with a fresh id and stage-0 traits."""
    rng = require_rng_param(rng, "create_organism")
    return Organism(
        id=new_organism_id(rng),
        type=organism_type,
        position=position,
        health=health,
        adaptation_points=adaptation_points,
        stage=0,
        traits=traits_for(organism_type, 0),
        birth_time=now,
        movement_speed=movement_speed(organism_type),
    )
