"""Population engine: state, the pure tick function and the engine."""

from ecosim.simulation.engine import SimulationEngine
from ecosim.simulation.state import EnvironmentState, SimulationSnapshot, SimulationState
from ecosim.simulation.tick import TickResult, tick, tick_interval_ms

__all__ = [
    "EnvironmentState",
    "SimulationEngine",
    "SimulationSnapshot",
    "SimulationState",
    "TickResult",
    "tick",
    "tick_interval_ms",
]
