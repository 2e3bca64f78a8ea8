"""Ecosystem and population management configuration constants."""

# Simulation cadence
BASE_TICK_INTERVAL_MS = 2000  # One tick every 2 seconds at speed 1
MIN_SIMULATION_SPEED = 1
MAX_SIMULATION_SPEED = 10

# Operator-set environment defaults
DEFAULT_WATER_LEVEL = 50.0
DEFAULT_SUNLIGHT_LEVEL = 60.0
DEFAULT_BIOME_HEALTH = 75.0
LEVEL_MIN = 0.0
LEVEL_MAX = 100.0

# Organism vitals
HEALTH_MIN = 0.0
HEALTH_MAX = 100.0
PLACED_ORGANISM_HEALTH = 100.0
HEALTH_JITTER = 1.0  # Uniform random variation in [-1, 1] per tick
DEAD_MATTER_HEALTH = 30.0  # Organisms below this count as food for decomposers

# Adaptation window: only organisms in this health band accumulate points
ADAPTATION_HEALTH_MIN = 20.0  # exclusive
ADAPTATION_HEALTH_MAX = 80.0  # exclusive
SEASONAL_ADAPTATION_BONUS = 1.5

# Reproduction
REPRODUCTION_MIN_HEALTH = 60.0
MATING_DISTANCE = 15.0
REPRODUCTION_BASE_CHANCE = 0.2
REPRODUCTION_SPEED_DIVISOR = 5.0  # Final draw uses chance * (speed / 5)
REPRODUCTION_COOLDOWN_MS = 10000.0  # Divided by simulation speed
REPRODUCTION_HEALTH_COST = 10.0
REPRODUCTION_HEALTH_FLOOR = 40.0
OFFSPRING_HEALTH = 80.0
OFFSPRING_JITTER = 3.0
OFFSPRING_POSITION_MIN = 5.0
OFFSPRING_POSITION_MAX = 95.0
OFFSPRING_INHERITANCE_RATE = 0.1
OFFSPRING_STAGE_BONUS = 5.0
MAX_ADAPTATION_INHERITANCE = 100.0

# Environment factor for reproduction
ENVIRONMENT_FACTOR_BASE = 0.7
ENVIRONMENT_WATER_BAND = (30.0, 70.0)
ENVIRONMENT_WATER_PENALTY = 0.7
ENVIRONMENT_SUNLIGHT_BAND = (40.0, 80.0)
ENVIRONMENT_SUNLIGHT_PENALTY = 0.8

# Placement
PLACEMENT_EXCLUSION_RADIUS = 10.0

# Biome health scoring
BIOME_HEALTH_MIN = 10.0
BIOME_HEALTH_MAX = 100.0
BIOME_HEALTH_AVERAGE_WEIGHT = 0.4
BIOME_HEALTH_BALANCE_WEIGHT = 0.6
BALANCE_PRESENCE_POINTS = 25
BALANCE_RATIO_POINTS = 25
PRODUCER_TO_CONSUMER_RATIO = 2

# Population cap applied to types missing from the species table
DEFAULT_SPECIES_CAP = 10

# Stats recording
STATS_RECORD_INTERVAL_MS = 10000
MAX_STAT_POINTS = 720  # Two hours of history at the default interval

# Event retention for presentation consumers
EVENT_DISPLAY_WINDOW_MS = 3000
