"""Adaptation scoring from environmental stress.

Adaptation rewards organisms that survive moderate hardship. Thriving
organisms (health above 90) and dying ones gain nothing, and neither do
organisms that are comfortable (no stress) or overwhelmed (stress of 5 or
more).
"""

import math
from typing import Any

ADAPTATION_MAX_HEALTH = 90.0
STRESS_CEILING = 5.0
STRESS_TO_GAIN = 0.5


def calculate_stress(organism_type: str, water_level: float, sunlight_level: float, biome_type: str) -> float:
    """Species-specific environmental mismatch, including the non-native biome penalty."""
    stress = 0.0
    biome = getattr(biome_type, "value", biome_type)

    if organism_type in ("tree", "grass", "flower"):
        if water_level < 30:
            stress += (30 - water_level) / 10
        if sunlight_level < 30:
            stress += (30 - sunlight_level) / 10
        if sunlight_level > 80:
            stress += (sunlight_level - 80) / 10
        if biome != "forest":
            stress += 1
    elif organism_type in ("cactus", "bush"):
        # Desert plants suffer from too much water
        if water_level > 60:
            stress += (water_level - 60) / 10
        if sunlight_level < 50:
            stress += (50 - sunlight_level) / 10
        if biome != "desert":
            stress += 1
    elif organism_type in ("seaweed", "coral", "fish", "crab"):
        # Aquatic species suffer heavily out of water
        if water_level < 70:
            stress += (70 - water_level) / 5
        if biome != "ocean":
            stress += 2
    elif organism_type in ("rabbit", "fox"):
        if water_level < 20:
            stress += (20 - water_level) / 5
        if sunlight_level > 90:
            stress += (sunlight_level - 90) / 10
        if biome != "forest":
            stress += 1
    elif organism_type in ("lizard", "snake"):
        if water_level > 50:
            stress += (water_level - 50) / 10
        if sunlight_level < 40:
            stress += (40 - sunlight_level) / 10
        if biome != "desert":
            stress += 1
    elif organism_type in ("fungi", "beetle", "starfish"):
        home = {"fungi": "forest", "beetle": "desert", "starfish": "ocean"}[organism_type]
        if water_level < 20:
            stress += (20 - water_level) / 10
        if biome != home:
            stress += 1

    return stress


def calculate_adaptation_gain(
    organism: Any,
    water_level: float,
    sunlight_level: float,
    biome_type: str,
) -> float:
    """Adaptation points gained this tick, rounded to one decimal.

    Args:
        organism: Anything with ``type`` and ``health`` attributes
        water_level: Effective water level (0-100)
        sunlight_level: Effective sunlight level (0-100)
        biome_type: Current biome

    Returns:
        ``stress * 0.5`` for stress strictly between 0 and 5, else 0.0
    """
    if organism.health <= 0 or organism.health > ADAPTATION_MAX_HEALTH:
        return 0.0

    stress = calculate_stress(organism.type, water_level, sunlight_level, biome_type)

    gain = 0.0
    if 0 < stress < STRESS_CEILING:
        gain = stress * STRESS_TO_GAIN

    # Half-up rounding to one decimal
    return math.floor(gain * 10 + 0.5) / 10
