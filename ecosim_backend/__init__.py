"""Presentation-facing adapter around the ecosim engine.

Drives the engine on a timer, validates operator commands and turns
snapshots into JSON-ready payloads.
"""

from ecosim_backend.simulation_runner import SimulationRunner

__all__ = ["SimulationRunner"]
