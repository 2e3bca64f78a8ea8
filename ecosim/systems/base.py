"""Shared result type for tick phases."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from ecosim.entities.organism import Organism

__all__ = ["PhaseResult"]


@dataclass
class PhaseResult:
    """Result of one phase of a tick.

    Attributes:
        organisms: Population after the phase
        events: Domain events emitted by the phase, in emission order
        details: Phase-specific counts (e.g. {"evolved": 2, "deaths": 1})

    Example:
        return PhaseResult(
            organisms=updated,
            events=events,
            details={"evolved": len(events)},
        )
    """

    organisms: Tuple[Organism, ...]
    events: List[object] = field(default_factory=list)
    details: Dict[str, Any] = field(default_factory=dict)
