"""Centralized math utilities for the simulation.

Positions live on the biome surface expressed as percentages, so both axes
run from 0 to 100 and distances are in the same percentage units.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` into ``[lo, hi]``."""
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class Position:
    """An immutable point on the biome surface."""

    x: float
    y: float

    def distance_to(self, other: "Position") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def midpoint(self, other: "Position") -> "Position":
        return Position((self.x + other.x) / 2, (self.y + other.y) / 2)

    def offset(self, dx: float, dy: float) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def clamped(self, lo: float = 0.0, hi: float = 100.0) -> "Position":
        """Return a copy with both coordinates clamped into ``[lo, hi]``."""
        return Position(clamp(self.x, lo, hi), clamp(self.y, lo, hi))

    def in_bounds(self, lo: float = 0.0, hi: float = 100.0) -> bool:
        return lo <= self.x <= hi and lo <= self.y <= hi

    def step_towards(self, target: "Position", max_step: float) -> "Position":
        """Move up to ``max_step`` units towards ``target`` without overshooting."""
        dist = self.distance_to(target)
        if dist <= max_step or dist == 0:
            return target
        ratio = max_step / dist
        return Position(
            self.x + (target.x - self.x) * ratio,
            self.y + (target.y - self.y) * ratio,
        )

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}
