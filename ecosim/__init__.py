"""Core simulation engine for the closed-ecosystem biome.

This package contains the pure simulation logic, with no UI or I/O
dependencies. Key modules include:

- simulation: the tick function and the SimulationEngine that owns state
- evolution: stage ladders and the adaptation scorer
- reproduction: mate eligibility, odds and offspring synthesis
- environment: seasons and effective environment
- placement: validation of operator-added organisms
- ecosystem_stats: biome health and population statistics
- events: domain events and the EventBus

Design note: this module exposes a small, explicit public API via ``__all__``.
Use direct imports from subpackages for internal helpers.
"""

from ecosim.config.simulation_config import SimulationConfig
from ecosim.entities import Organism
from ecosim.environment import Season
from ecosim.math_utils import Position
from ecosim.simulation import SimulationEngine, SimulationSnapshot, tick

__all__ = [
    "Organism",
    "Position",
    "Season",
    "SimulationConfig",
    "SimulationEngine",
    "SimulationSnapshot",
    "tick",
]
