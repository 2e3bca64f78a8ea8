"""Species catalogue lookups.

Species are identified by plain strings so that an unrecognised type never
crashes the simulation: it simply has no role, no native biome and no
special behaviour.
"""

from enum import Enum
from typing import Dict, List, Optional

from ecosim.config.organisms import (
    DECOMPOSER_TYPES,
    HERBIVORE_TYPES,
    MOVEMENT_SPEEDS,
    NATIVE_BIOMES,
    PREDATOR_TYPES,
    PRODUCER_TYPES,
)

__all__ = [
    "BiomeType",
    "TrophicRole",
    "ALL_SPECIES",
    "role_of",
    "is_producer",
    "is_herbivore",
    "is_predator",
    "is_consumer",
    "is_decomposer",
    "is_mobile",
    "native_biome",
    "movement_speed",
    "species_for_biome",
]


class BiomeType(str, Enum):
    """Habitat types the biome surface can take."""

    FOREST = "forest"
    DESERT = "desert"
    OCEAN = "ocean"


class TrophicRole(Enum):
    """Position of a species in the food web."""

    PRODUCER = "producer"
    HERBIVORE = "herbivore"
    PREDATOR = "predator"
    DECOMPOSER = "decomposer"


_ROLES: Dict[str, TrophicRole] = {}
for _t in PRODUCER_TYPES:
    _ROLES[_t] = TrophicRole.PRODUCER
for _t in HERBIVORE_TYPES:
    _ROLES[_t] = TrophicRole.HERBIVORE
for _t in PREDATOR_TYPES:
    _ROLES[_t] = TrophicRole.PREDATOR
for _t in DECOMPOSER_TYPES:
    _ROLES[_t] = TrophicRole.DECOMPOSER

ALL_SPECIES = tuple(_ROLES)


def role_of(organism_type: str) -> Optional[TrophicRole]:
    return _ROLES.get(organism_type)


def is_producer(organism_type: str) -> bool:
    return role_of(organism_type) is TrophicRole.PRODUCER


def is_herbivore(organism_type: str) -> bool:
    return role_of(organism_type) is TrophicRole.HERBIVORE


def is_predator(organism_type: str) -> bool:
    return role_of(organism_type) is TrophicRole.PREDATOR


def is_consumer(organism_type: str) -> bool:
    return role_of(organism_type) in (TrophicRole.HERBIVORE, TrophicRole.PREDATOR)


def is_decomposer(organism_type: str) -> bool:
    return role_of(organism_type) is TrophicRole.DECOMPOSER


def is_mobile(organism_type: str) -> bool:
    return organism_type in MOVEMENT_SPEEDS


def native_biome(organism_type: str) -> Optional[str]:
    return NATIVE_BIOMES.get(organism_type)


def movement_speed(organism_type: str) -> float:
    """Surface units per tick; 0 for sessile or unknown species."""
    return MOVEMENT_SPEEDS.get(organism_type, 0.0)


def species_for_biome(biome_type: str) -> Dict[str, List[str]]:
    """Return the species offered for placement in a biome, grouped by role.

    Unrecognised biomes fall back to the forest catalogue.

    Returns:
        Dict with ``producers``, ``consumers`` and ``decomposers`` lists
    """
    biome = biome_type if biome_type in {b.value for b in BiomeType} else BiomeType.FOREST.value
    natives = [t for t in ALL_SPECIES if NATIVE_BIOMES.get(t) == biome]
    return {
        "producers": [t for t in natives if is_producer(t)],
        "consumers": [t for t in natives if is_consumer(t)],
        "decomposers": [t for t in natives if is_decomposer(t)],
    }
