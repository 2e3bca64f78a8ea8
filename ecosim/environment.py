"""Seasonal environment model.

The operator sets base water and sunlight levels; the current season shifts
them and scales producer growth. Seasons advance on their own clock,
independent of the tick interval.

Architecture Notes:
- SeasonCycle is the only stateful piece; everything else is a pure function
- The tick reads the effective environment once, at tick start
- Progress is a percentage (0-100) of the current season's length
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ecosim.config.ecosystem import (
    ENVIRONMENT_FACTOR_BASE,
    ENVIRONMENT_SUNLIGHT_BAND,
    ENVIRONMENT_SUNLIGHT_PENALTY,
    ENVIRONMENT_WATER_BAND,
    ENVIRONMENT_WATER_PENALTY,
    LEVEL_MAX,
    LEVEL_MIN,
)
from ecosim.config.seasons import (
    DEFAULT_SEASON_LENGTH_MS,
    SEASON_MODIFIERS,
    SEASON_ORDER,
    SEASON_REPRODUCTION_FACTORS,
)
from ecosim.exceptions import ConfigurationError
from ecosim.math_utils import clamp

logger = logging.getLogger(__name__)


class Season(str, Enum):
    """The four seasons, in cycle order."""

    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"

    def next(self) -> "Season":
        index = SEASON_ORDER.index(self.value)
        return Season(SEASON_ORDER[(index + 1) % len(SEASON_ORDER)])


@dataclass(frozen=True)
class SeasonData:
    """Fixed modifiers for one season."""

    name: Season
    water_modifier: float
    sunlight_modifier: float
    growth_modifier: float
    icon: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name.value,
            "waterModifier": self.water_modifier,
            "sunlightModifier": self.sunlight_modifier,
            "growthModifier": self.growth_modifier,
            "icon": self.icon,
        }


SEASONS: Dict[Season, SeasonData] = {
    Season(name): SeasonData(Season(name), water, sun, growth, icon)
    for name, (water, sun, growth, icon) in SEASON_MODIFIERS.items()
}


@dataclass(frozen=True)
class EffectiveEnvironment:
    """Environment as organisms experience it during one tick."""

    water_level: float
    sunlight_level: float
    growth_modifier: float
    season: Season
    biome_type: str


def effective_environment(
    water_level: float,
    sunlight_level: float,
    season: Season,
    biome_type: str = "forest",
) -> EffectiveEnvironment:
    """Apply the season's modifiers to the operator-set base levels."""
    data = SEASONS[Season(season)]
    return EffectiveEnvironment(
        water_level=clamp(water_level + data.water_modifier, LEVEL_MIN, LEVEL_MAX),
        sunlight_level=clamp(sunlight_level + data.sunlight_modifier, LEVEL_MIN, LEVEL_MAX),
        growth_modifier=data.growth_modifier,
        season=Season(season),
        biome_type=getattr(biome_type, "value", biome_type),
    )


def calculate_environment_factor(water_level: float, sunlight_level: float, season: Season) -> float:
    """Reproduction suitability in ``[0, 1]``.

    Starts at 0.7, is cut when water or sunlight leave their comfortable band,
    then scaled by a per-season factor and capped at 1.0.
    """
    factor = ENVIRONMENT_FACTOR_BASE
    water_lo, water_hi = ENVIRONMENT_WATER_BAND
    if water_level < water_lo or water_level > water_hi:
        factor *= ENVIRONMENT_WATER_PENALTY
    sun_lo, sun_hi = ENVIRONMENT_SUNLIGHT_BAND
    if sunlight_level < sun_lo or sunlight_level > sun_hi:
        factor *= ENVIRONMENT_SUNLIGHT_PENALTY
    factor *= SEASON_REPRODUCTION_FACTORS[Season(season).value]
    return min(1.0, factor)


def environmental_suitability(organism: Any, water_level: float, sunlight_level: float) -> int:
    """Habitat fit score (0-100) for inspecting a single organism.

    Penalises water/sunlight outside the species' comfort range and credits
    matching traits. Informational only; the tick does not use it.
    """
    suitability = 100.0
    organism_type = organism.type
    traits = organism.traits

    if organism_type in ("tree", "grass", "flower"):
        if water_level < 30:
            suitability -= (30 - water_level) * 1.5
        if sunlight_level < 40:
            suitability -= (40 - sunlight_level) * 1.2
    elif organism_type in ("cactus", "bush"):
        if water_level > 60:
            suitability -= (water_level - 60) * 1.2
        if sunlight_level < 50:
            suitability -= 50 - sunlight_level
    elif organism_type in ("seaweed", "coral", "fish", "crab"):
        if water_level < 70:
            suitability -= (70 - water_level) * 2
    elif organism_type in ("rabbit", "fox"):
        if water_level < 20:
            suitability -= (20 - water_level) * 1.5
    elif organism_type in ("lizard", "snake"):
        if water_level > 50:
            suitability -= water_level - 50
        if sunlight_level < 40:
            suitability -= 40 - sunlight_level

    if "drought-resistant" in traits and water_level < 30:
        suitability += 20
    if "heat-resistant" in traits and sunlight_level > 80:
        suitability += 20
    if "water-efficient" in traits and water_level < 40:
        suitability += 15

    return int(clamp(round(suitability), 0, 100))


class SeasonCycle:
    """Tracks the current season and its progress.

    Attributes:
        season: Current season
        progress: Percent (0-100) of the current season elapsed
        season_length_ms: Length of one season at simulation speed 1
    """

    def __init__(
        self,
        season: Season = Season.SPRING,
        season_length_ms: float = DEFAULT_SEASON_LENGTH_MS,
        progress: float = 0.0,
    ) -> None:
        if season_length_ms <= 0:
            raise ConfigurationError(f"season_length_ms must be positive, got {season_length_ms}")
        self.season: Season = Season(season)
        self.progress: float = progress
        self.season_length_ms: float = season_length_ms
        self._seasons_elapsed: int = 0

    @property
    def data(self) -> SeasonData:
        return SEASONS[self.season]

    def advance(self, elapsed_ms: float, simulation_speed: float = 1.0) -> bool:
        """Advance progress by ``elapsed_ms`` of wall time.

        Higher speeds shorten the season proportionally. When progress reaches
        100% the cycle moves to the next season and progress resets to 0.

        Returns:
            True if the season changed
        """
        adjusted_length = self.season_length_ms / max(simulation_speed, 1e-9)
        self.progress += elapsed_ms * 100.0 / adjusted_length
        if self.progress >= 100.0:
            previous = self.season
            self.season = self.season.next()
            self.progress = 0.0
            self._seasons_elapsed += 1
            logger.info(f"Season changed: {previous.value} -> {self.season.value}")
            return True
        return False

    def force(self, season: Season) -> None:
        """Jump directly to ``season`` and restart its progress."""
        self.season = Season(season)
        self.progress = 0.0

    def set_season_length(self, milliseconds: float) -> None:
        if milliseconds <= 0:
            raise ConfigurationError(f"season length must be positive, got {milliseconds}")
        self.season_length_ms = milliseconds

    def get_debug_info(self, simulation_speed: Optional[float] = None) -> Dict[str, Any]:
        info = {
            "season": self.season.value,
            "progress": self.progress,
            "season_length_ms": self.season_length_ms,
            "seasons_elapsed": self._seasons_elapsed,
            **self.data.to_dict(),
        }
        if simulation_speed is not None:
            info["adjusted_length_ms"] = self.season_length_ms / simulation_speed
        return info
