"""Aggregate ecosystem statistics.

Biome health blends the average organism health with a trophic balance
score. The balance score awards points for each role being present and for
the producer:consumer ratio; a consumer count between half the producer count
and the producer count earns neither the ratio bonus nor the penalty.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, NamedTuple, Sequence

from ecosim.config.ecosystem import (
    BALANCE_PRESENCE_POINTS,
    BALANCE_RATIO_POINTS,
    BIOME_HEALTH_AVERAGE_WEIGHT,
    BIOME_HEALTH_BALANCE_WEIGHT,
    BIOME_HEALTH_MAX,
    BIOME_HEALTH_MIN,
    PRODUCER_TO_CONSUMER_RATIO,
)
from ecosim.entities.organism import Organism
from ecosim.math_utils import clamp
from ecosim.species import is_consumer, is_decomposer, is_producer


class RoleCounts(NamedTuple):
    producers: int
    consumers: int
    decomposers: int


def count_roles(organisms: Iterable[Organism]) -> RoleCounts:
    producers = consumers = decomposers = 0
    for org in organisms:
        if is_producer(org.type):
            producers += 1
        elif is_consumer(org.type):
            consumers += 1
        elif is_decomposer(org.type):
            decomposers += 1
    return RoleCounts(producers, consumers, decomposers)


def calculate_balance_score(producer_count: int, consumer_count: int, decomposer_count: int) -> int:
    """Trophic balance score, 0-100."""
    score = 0
    if producer_count > 0:
        score += BALANCE_PRESENCE_POINTS
    if consumer_count > 0:
        score += BALANCE_PRESENCE_POINTS
    if decomposer_count > 0:
        score += BALANCE_PRESENCE_POINTS

    if producer_count >= consumer_count * PRODUCER_TO_CONSUMER_RATIO:
        score += BALANCE_RATIO_POINTS
    elif consumer_count > producer_count:
        score -= BALANCE_RATIO_POINTS
    return score


def average_health(organisms: Sequence[Organism]) -> float:
    if not organisms:
        return 0.0
    return sum(org.health for org in organisms) / len(organisms)


def calculate_biome_health(organisms: Sequence[Organism]) -> float:
    """Biome health in ``[10, 100]``; an empty biome still earns the ratio bonus."""
    counts = count_roles(organisms)
    balance = calculate_balance_score(*counts)
    raw = average_health(organisms) * BIOME_HEALTH_AVERAGE_WEIGHT + balance * BIOME_HEALTH_BALANCE_WEIGHT
    return clamp(raw, BIOME_HEALTH_MIN, BIOME_HEALTH_MAX)


def species_distribution(organisms: Iterable[Organism]) -> Dict[str, int]:
    return dict(Counter(org.type for org in organisms))


def average_adaptation(organisms: Sequence[Organism]) -> float:
    if not organisms:
        return 0.0
    return sum(org.adaptation_points for org in organisms) / len(organisms)


def stage_distribution(organisms: Iterable[Organism]) -> Dict[int, int]:
    """Organism count per evolution stage (always includes stages 0-2)."""
    counts = {0: 0, 1: 0, 2: 0}
    for org in organisms:
        counts[org.stage] = counts.get(org.stage, 0) + 1
    return counts


def fully_evolved_species(organisms: Iterable[Organism]) -> List[str]:
    """Species with at least one member at the final stage, sorted."""
    return sorted({org.type for org in organisms if org.stage >= 2})


@dataclass(frozen=True)
class StatPoint:
    """One sample of ecosystem statistics."""

    timestamp: float
    biome_health: float
    organism_count: int
    species_distribution: Dict[str, int] = field(default_factory=dict)
    average_adaptation: float = 0.0
    water_level: float = 0.0
    sunlight_level: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "biomeHealth": self.biome_health,
            "organismCount": self.organism_count,
            "speciesDistribution": dict(self.species_distribution),
            "averageAdaptation": self.average_adaptation,
            "waterLevel": self.water_level,
            "sunlightLevel": self.sunlight_level,
        }


def build_stat_point(
    organisms: Sequence[Organism],
    biome_health: float,
    water_level: float,
    sunlight_level: float,
    timestamp: float,
) -> StatPoint:
    return StatPoint(
        timestamp=timestamp,
        biome_health=biome_health,
        organism_count=len(organisms),
        species_distribution=species_distribution(organisms),
        average_adaptation=average_adaptation(organisms),
        water_level=water_level,
        sunlight_level=sunlight_level,
    )
