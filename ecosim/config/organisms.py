"""Species catalogue: trophic roles, native biomes and behaviour tunables."""

# Trophic membership. Herbivores and predators together make up consumers.
PRODUCER_TYPES = ("tree", "grass", "flower", "cactus", "bush", "seaweed", "coral")
HERBIVORE_TYPES = ("rabbit", "lizard", "fish")
PREDATOR_TYPES = ("fox", "snake", "crab")
DECOMPOSER_TYPES = ("fungi", "beetle", "starfish")

# Where each species is at home
NATIVE_BIOMES = {
    "tree": "forest",
    "grass": "forest",
    "flower": "forest",
    "rabbit": "forest",
    "fox": "forest",
    "fungi": "forest",
    "cactus": "desert",
    "bush": "desert",
    "lizard": "desert",
    "snake": "desert",
    "beetle": "desert",
    "seaweed": "ocean",
    "coral": "ocean",
    "fish": "ocean",
    "crab": "ocean",
    "starfish": "ocean",
}

# Reproduction is skipped once a species reaches its cap
SPECIES_POPULATION_CAPS = {
    "tree": 12,
    "grass": 25,
    "flower": 20,
    "cactus": 12,
    "bush": 15,
    "seaweed": 20,
    "coral": 15,
    "rabbit": 15,
    "lizard": 12,
    "fish": 20,
    "fox": 6,
    "snake": 6,
    "crab": 8,
    "fungi": 10,
    "beetle": 10,
    "starfish": 8,
}

# Reproduction chance multipliers by breeding class
FAST_BREEDER_TYPES = ("rabbit", "fish")
SLOW_BREEDER_TYPES = ("fox", "snake")
PLANT_BREEDER_TYPES = ("tree", "grass", "flower")
FAST_BREEDER_MULTIPLIER = 1.5
SLOW_BREEDER_MULTIPLIER = 0.7
PLANT_BREEDER_MULTIPLIER = 1.2

# Movement speed in surface units per tick. Species absent here never move.
MOVEMENT_SPEEDS = {
    "rabbit": 4.0,
    "lizard": 3.0,
    "fish": 4.0,
    "fox": 5.0,
    "snake": 3.0,
    "crab": 2.0,
    "beetle": 2.0,
    "starfish": 1.0,
}

# Hunger and feeding
HUNGER_PER_TICK = 4.0
HUNGER_MAX = 100.0
HUNGRY_THRESHOLD = 50.0
STARVING_THRESHOLD = 80.0
STARVATION_PENALTY = 2.0
SENSE_RADIUS = 25.0
FEEDING_RANGE = 6.0
GRAZING_GAIN = 15.0
GRAZING_DAMAGE = 10.0
HUNTING_GAIN = 25.0
SCAVENGING_GAIN = 10.0

# Wandering
MOVE_COOLDOWN_MS = 4000.0  # Divided by simulation speed
WANDER_RADIUS = 15.0
WANDER_MIN = 5.0
WANDER_MAX = 95.0
