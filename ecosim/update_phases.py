"""Update phase definitions for explicit execution ordering.

The tick runs its phases in the order declared here. Each phase reports a
small details dict (counts of what it did) keyed by the phase, which makes
a tick's work visible in logs and tests without stepping through it.

The phases are:

1. ENVIRONMENT: Apply seasonal modifiers to the operator-set levels
2. VITALITY: Health change, adaptation gain and evolution per organism
3. LIFECYCLE: Remove organisms whose health reached zero
4. MOBILITY: Hunger, wandering, hunting and grazing
5. REPRODUCTION: Mate finding and offspring creation
6. ECOSYSTEM: Recompute aggregate biome health
7. TIME_UPDATE: Advance the season cycle and the simulation clock
"""

from enum import Enum, auto
from typing import Dict

__all__ = [
    "UpdatePhase",
    "PHASE_DESCRIPTIONS",
]


class UpdatePhase(Enum):
    """Phases of a simulation tick, in execution order."""

    ENVIRONMENT = auto()
    VITALITY = auto()
    LIFECYCLE = auto()
    MOBILITY = auto()
    REPRODUCTION = auto()
    ECOSYSTEM = auto()
    TIME_UPDATE = auto()


# Human-readable descriptions for debugging
PHASE_DESCRIPTIONS: Dict[UpdatePhase, str] = {
    UpdatePhase.ENVIRONMENT: "Applying seasonal environment modifiers",
    UpdatePhase.VITALITY: "Updating health, adaptation and evolution",
    UpdatePhase.LIFECYCLE: "Removing dead organisms",
    UpdatePhase.MOBILITY: "Resolving movement and feeding",
    UpdatePhase.REPRODUCTION: "Handling reproduction",
    UpdatePhase.ECOSYSTEM: "Scoring ecosystem health",
    UpdatePhase.TIME_UPDATE: "Advancing season and clock",
}
