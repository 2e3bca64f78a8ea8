"""Lightweight simulation configuration helpers."""

from dataclasses import dataclass, field, replace
from typing import Any, Dict

from ecosim.config.ecosystem import (
    BASE_TICK_INTERVAL_MS,
    DEFAULT_BIOME_HEALTH,
    DEFAULT_SPECIES_CAP,
    DEFAULT_SUNLIGHT_LEVEL,
    DEFAULT_WATER_LEVEL,
    MATING_DISTANCE,
    PLACEMENT_EXCLUSION_RADIUS,
    REPRODUCTION_COOLDOWN_MS,
)
from ecosim.config.organisms import (
    FEEDING_RANGE,
    HUNGER_PER_TICK,
    MOVE_COOLDOWN_MS,
    SENSE_RADIUS,
    SPECIES_POPULATION_CAPS,
    WANDER_RADIUS,
)
from ecosim.config.seasons import DEFAULT_SEASON_LENGTH_MS, SEASON_ORDER
from ecosim.exceptions import ConfigurationError

VALID_BIOMES = ("forest", "desert", "ocean")


@dataclass
class EcosystemConfig:
    """Population-related ecosystem configuration."""

    species_caps: Dict[str, int] = field(default_factory=lambda: dict(SPECIES_POPULATION_CAPS))
    default_species_cap: int = DEFAULT_SPECIES_CAP
    reproduction_cooldown_ms: float = REPRODUCTION_COOLDOWN_MS
    mating_distance: float = MATING_DISTANCE
    placement_exclusion_radius: float = PLACEMENT_EXCLUSION_RADIUS

    def cap_for(self, organism_type: str) -> int:
        return self.species_caps.get(organism_type, self.default_species_cap)


@dataclass
class SeasonConfig:
    """Season cycle configuration."""

    season_length_ms: float = DEFAULT_SEASON_LENGTH_MS
    initial_season: str = "spring"


@dataclass
class MobilityConfig:
    """Movement and feeding configuration.

    Attributes:
        enabled: When False the tick skips hunger, movement and feeding
            entirely, leaving the plain health/evolution/reproduction model.
    """

    enabled: bool = True
    hunger_per_tick: float = HUNGER_PER_TICK
    sense_radius: float = SENSE_RADIUS
    feeding_range: float = FEEDING_RANGE
    move_cooldown_ms: float = MOVE_COOLDOWN_MS
    wander_radius: float = WANDER_RADIUS


@dataclass
class SimulationConfig:
    """Configuration for one simulation engine instance.

    Attributes:
        base_interval_ms: Tick interval at speed 1; the effective interval is
            ``base_interval_ms / simulation_speed``.
        water_level: Initial operator water level.
        sunlight_level: Initial operator sunlight level.
        biome_type: Initial biome.
        biome_health: Biome health before the first tick.
    """

    base_interval_ms: float = BASE_TICK_INTERVAL_MS
    water_level: float = DEFAULT_WATER_LEVEL
    sunlight_level: float = DEFAULT_SUNLIGHT_LEVEL
    biome_type: str = "forest"
    biome_health: float = DEFAULT_BIOME_HEALTH
    simulation_speed: int = 1
    ecosystem: EcosystemConfig = field(default_factory=EcosystemConfig)
    seasons: SeasonConfig = field(default_factory=SeasonConfig)
    mobility: MobilityConfig = field(default_factory=MobilityConfig)

    def validate(self) -> None:
        """Raise ConfigurationError if any setting is out of range."""
        if self.base_interval_ms <= 0:
            raise ConfigurationError(f"base_interval_ms must be positive, got {self.base_interval_ms}")
        if self.seasons.season_length_ms <= 0:
            raise ConfigurationError(
                f"season_length_ms must be positive, got {self.seasons.season_length_ms}"
            )
        if self.seasons.initial_season not in SEASON_ORDER:
            raise ConfigurationError(f"Unknown initial season: {self.seasons.initial_season!r}")
        if self.biome_type not in VALID_BIOMES:
            raise ConfigurationError(f"Unknown biome type: {self.biome_type!r}")
        if not 1 <= self.simulation_speed <= 10:
            raise ConfigurationError(f"simulation_speed must be in 1..10, got {self.simulation_speed}")
        for name in ("water_level", "sunlight_level", "biome_health"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ConfigurationError(f"{name} must be in 0..100, got {value}")
        if self.ecosystem.reproduction_cooldown_ms < 0:
            raise ConfigurationError("reproduction_cooldown_ms must not be negative")
        if any(cap < 0 for cap in self.ecosystem.species_caps.values()):
            raise ConfigurationError("species caps must not be negative")
        if self.mobility.move_cooldown_ms < 0 or self.mobility.feeding_range < 0:
            raise ConfigurationError("mobility cooldown and feeding range must not be negative")

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Return a copy with top-level fields replaced."""
        unknown = [key for key in overrides if not hasattr(self, key)]
        if unknown:
            raise ConfigurationError(f"Unknown config fields: {unknown}")
        return replace(self, **overrides)
