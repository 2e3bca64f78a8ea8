"""Static evolution ladders, one per species.

Every species climbs the same three-stage ladder: a stage-0 base form and
two evolved forms gated by adaptation-point thresholds. Traits are looked up
from this table, never edited on an organism directly.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

MAX_STAGE = 2


@dataclass(frozen=True)
class EvolutionStage:
    """One rung of a species' evolution ladder."""

    stage: int
    threshold: float
    name: str
    icon: str
    traits: Tuple[str, ...]
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stage": self.stage,
            "threshold": self.threshold,
            "name": self.name,
            "icon": self.icon,
            "traits": list(self.traits),
            "description": self.description,
        }


def _ladder(*rungs: Tuple[float, str, str, Tuple[str, ...], str]) -> Tuple[EvolutionStage, ...]:
    return tuple(
        EvolutionStage(stage=i, threshold=t, name=n, icon=ic, traits=tr, description=d)
        for i, (t, n, ic, tr, d) in enumerate(rungs)
    )


EVOLUTION_PATHS: Dict[str, Tuple[EvolutionStage, ...]] = {
    # Forest producers
    "tree": _ladder(
        (0, "Sapling", "🌱", ("basic",), "A young tree, vulnerable but growing."),
        (50, "Mature Tree", "🌳", ("drought-resistant",),
         "A stronger tree with deeper roots, more resistant to drought."),
        (100, "Ancient Tree", "🌲", ("drought-resistant", "nutrient-rich"),
         "A massive tree that enhances soil fertility and withstands harsh conditions."),
    ),
    "grass": _ladder(
        (0, "Grass Sprout", "🌿", ("basic",), "Basic grass that provides food for herbivores."),
        (40, "Wild Grass", "🌾", ("fast-growing",),
         "Grass that grows quickly, recovering faster from being eaten."),
        (80, "Resilient Grass", "🌾", ("fast-growing", "heat-resistant"),
         "Hardy grass that thrives in heat and regrows quickly."),
    ),
    "flower": _ladder(
        (0, "Bud", "🌸", ("basic",), "A simple flower that attracts insects."),
        (45, "Vibrant Flower", "🌺", ("attractive",),
         "A colorful flower that attracts more pollinators."),
        (90, "Hardy Bloom", "🌹", ("attractive", "water-efficient"),
         "A beautiful flower that requires less water to thrive."),
    ),
    # Desert producers
    "cactus": _ladder(
        (0, "Small Cactus", "🌵", ("water-storing",), "A small desert plant that stores water."),
        (40, "Spiny Cactus", "🌵", ("water-storing", "defensive"),
         "A cactus with stronger protective spines."),
        (80, "Towering Cactus", "🌵", ("water-storing", "defensive", "shade-providing"),
         "A massive cactus that provides shade for other desert life."),
    ),
    "bush": _ladder(
        (0, "Desert Shrub", "🌿", ("water-storing",), "A low shrub that survives on little rain."),
        (40, "Thorny Bush", "🌿", ("water-storing", "drought-resistant"),
         "A bush with deep roots that endures long dry spells."),
        (80, "Sage Thicket", "🌳", ("water-storing", "drought-resistant", "heat-resistant"),
         "A dense thicket that shrugs off both drought and scorching sun."),
    ),
    # Aquatic producers
    "seaweed": _ladder(
        (0, "Seaweed Shoot", "🌱", ("oxygen-producing",), "Young seaweed that oxygenates water."),
        (45, "Kelp", "🌿", ("oxygen-producing", "habitat-forming"),
         "Larger seaweed that provides shelter for small sea creatures."),
        (90, "Kelp Forest", "🌿", ("oxygen-producing", "habitat-forming", "current-resistant"),
         "Dense seaweed that creates an entire underwater ecosystem."),
    ),
    "coral": _ladder(
        (0, "Coral Polyp", "🪸", ("filter-feeding",), "A tiny polyp anchored to the sea floor."),
        (50, "Coral Colony", "🪸", ("filter-feeding", "habitat-forming"),
         "A growing colony that shelters small fish."),
        (100, "Coral Reef", "🪸", ("filter-feeding", "habitat-forming", "heat-resistant"),
         "A sprawling reef that tolerates warmer, brighter water."),
    ),
    # Herbivores
    "rabbit": _ladder(
        (0, "Young Rabbit", "🐰", ("herbivore",), "A basic rabbit that eats plants."),
        (50, "Swift Rabbit", "🐇", ("herbivore", "fast"),
         "A quicker rabbit that can better escape predators."),
        (100, "Desert Hare", "🐇", ("herbivore", "fast", "water-efficient"),
         "A rabbit adapted to survive with minimal water."),
    ),
    "lizard": _ladder(
        (0, "Small Lizard", "🦎", ("heat-resistant",), "A lizard adapted to hot environments."),
        (50, "Desert Lizard", "🦎", ("heat-resistant", "water-efficient"),
         "A lizard that requires very little water."),
        (100, "Armored Lizard", "🦎", ("heat-resistant", "water-efficient", "protective-scales"),
         "A lizard with tough scales for protection and water conservation."),
    ),
    "fish": _ladder(
        (0, "Minnow", "🐟", ("herbivore",), "A small fish grazing on seaweed."),
        (45, "Schooling Fish", "🐠", ("herbivore", "fast"),
         "A fish that moves in schools to avoid predators."),
        (90, "Reef Fish", "🐠", ("herbivore", "fast", "camouflaged"),
         "A colourful fish that blends into the reef."),
    ),
    # Predators
    "fox": _ladder(
        (0, "Fox Kit", "🦊", ("predator",), "A young fox learning to hunt."),
        (60, "Cunning Fox", "🦊", ("predator", "efficient-hunter"),
         "A skilled hunter that wastes less energy when hunting."),
        (120, "Alpha Fox", "🦊", ("predator", "efficient-hunter", "adaptable-diet"),
         "A fox that can survive on various food sources when prey is scarce."),
    ),
    "snake": _ladder(
        (0, "Hatchling Snake", "🐍", ("predator",), "A young snake hunting small prey."),
        (60, "Sidewinder", "🐍", ("predator", "heat-resistant"),
         "A snake that crosses scorching sand with ease."),
        (120, "Venomous Viper", "🐍", ("predator", "heat-resistant", "efficient-hunter"),
         "A deadly ambush hunter that rarely misses."),
    ),
    "crab": _ladder(
        (0, "Hermit Crab", "🦀", ("predator",), "A small crab scavenging the shallows."),
        (55, "Shore Crab", "🦀", ("predator", "armored"),
         "A crab with a hardened shell."),
        (110, "King Crab", "🦀", ("predator", "armored", "efficient-hunter"),
         "A powerful crab that dominates the sea floor."),
    ),
    # Decomposers
    "fungi": _ladder(
        (0, "Mushroom", "🍄", ("decomposer",), "Basic fungi that breaks down dead matter."),
        (40, "Spread Fungi", "🍄", ("decomposer", "far-reaching"),
         "Fungi with an extensive mycelium network."),
        (80, "Robust Fungi", "🍄", ("decomposer", "far-reaching", "toxin-resistant"),
         "Fungi that can break down even toxic compounds."),
    ),
    "beetle": _ladder(
        (0, "Dung Beetle", "🪲", ("decomposer",), "A beetle recycling desert waste."),
        (40, "Scarab", "🪲", ("decomposer", "water-efficient"),
         "A beetle that draws moisture from what it eats."),
        (80, "Armored Scarab", "🪲", ("decomposer", "water-efficient", "heat-resistant"),
         "A tough beetle that works through the hottest days."),
    ),
    "starfish": _ladder(
        (0, "Sea Star", "⭐", ("decomposer",), "A starfish cleaning the sea floor."),
        (50, "Spiny Star", "⭐", ("decomposer", "regenerating"),
         "A starfish that regrows lost limbs."),
        (100, "Crown Star", "🌟", ("decomposer", "regenerating", "armored"),
         "A large starfish protected by thick spines."),
    ),
}

UNKNOWN_STAGE_ICON = "❓"


def stages(organism_type: str) -> Tuple[EvolutionStage, ...]:
    """Return the ordered stage ladder for a species (empty if unknown)."""
    return EVOLUTION_PATHS.get(organism_type, ())


def get_evolution_info(organism_type: str, stage: int) -> EvolutionStage:
    """Look up a stage descriptor, degrading to an "unknown" sentinel.

    Never raises: an unknown species or an out-of-range stage yields a
    placeholder named after the type with the single trait ``unknown``.
    """
    ladder = stages(organism_type)
    if 0 <= stage < len(ladder):
        return ladder[stage]
    return EvolutionStage(
        stage=0,
        threshold=0,
        name=organism_type,
        icon=UNKNOWN_STAGE_ICON,
        traits=("unknown",),
        description="Unknown species",
    )


def get_next_evolution_stage(organism_type: str, current_stage: int, adaptation_points: float) -> int:
    """Return the stage after at most one step up the ladder.

    The organism advances by exactly one stage when the next threshold is met,
    even if its points would also satisfy a later threshold.
    """
    ladder = stages(organism_type)
    if current_stage >= len(ladder) - 1:
        return current_stage
    if adaptation_points >= ladder[current_stage + 1].threshold:
        return current_stage + 1
    return current_stage


def traits_for(organism_type: str, stage: int) -> Tuple[str, ...]:
    return get_evolution_info(organism_type, stage).traits


def evolution_progress(organism_type: str, stage: int, adaptation_points: float) -> float:
    """Percent progress towards the next stage (100 at the top of the ladder)."""
    ladder = stages(organism_type)
    if stage >= len(ladder) - 1:
        return 100.0
    threshold = ladder[stage + 1].threshold
    if threshold <= 0:
        return 100.0
    return min(100.0, adaptation_points / threshold * 100.0)


def describe_ladder(organism_type: str) -> List[Dict[str, Any]]:
    """Serializable view of a species ladder for evolution panels."""
    return [s.to_dict() for s in stages(organism_type)]
