"""Seasonal modifier table and cycle timing.

Each season shifts the operator-set water and sunlight levels and scales
producer growth. The reproduction factor is a separate per-season multiplier.
"""

DEFAULT_SEASON_LENGTH_MS = 60 * 1000
SEASON_ORDER = ("spring", "summer", "autumn", "winter")

# name: (water_modifier, sunlight_modifier, growth_modifier, icon)
SEASON_MODIFIERS = {
    "spring": (15.0, 10.0, 1.5, "🌱"),
    "summer": (-10.0, 25.0, 1.2, "☀️"),
    "autumn": (5.0, -5.0, 0.8, "🍂"),
    "winter": (0.0, -20.0, 0.4, "❄️"),
}

SEASON_REPRODUCTION_FACTORS = {
    "spring": 1.5,
    "summer": 1.0,
    "autumn": 0.7,
    "winter": 0.4,
}
