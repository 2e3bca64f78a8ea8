"""Tick phases.

Each module implements one phase of the tick as pure functions over the
previous tick's population snapshot:

- vitality: health change, adaptation and evolution per organism
- mobility: hunger, wandering and feeding
- breeding: mate finding and offspring
"""

from ecosim.systems.base import PhaseResult

__all__ = ["PhaseResult"]
