"""Evolution: the staged species ladders and the adaptation scorer.

- stages: static per-species stage table and lookup/transition functions
- adaptation: per-tick adaptation point gain from environmental stress
"""

from ecosim.evolution.adaptation import calculate_adaptation_gain, calculate_stress
from ecosim.evolution.stages import (
    EVOLUTION_PATHS,
    MAX_STAGE,
    EvolutionStage,
    evolution_progress,
    get_evolution_info,
    get_next_evolution_stage,
    stages,
    traits_for,
)

__all__ = [
    "EVOLUTION_PATHS",
    "MAX_STAGE",
    "EvolutionStage",
    "calculate_adaptation_gain",
    "calculate_stress",
    "evolution_progress",
    "get_evolution_info",
    "get_next_evolution_stage",
    "stages",
    "traits_for",
]
