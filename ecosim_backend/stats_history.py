"""Bounded history of ecosystem statistics for charting."""

import logging
from collections import deque
from typing import Deque, List, Optional

from ecosim.config.ecosystem import MAX_STAT_POINTS, STATS_RECORD_INTERVAL_MS
from ecosim.ecosystem_stats import StatPoint, build_stat_point
from ecosim.simulation.state import SimulationState

logger = logging.getLogger(__name__)


class StatsHistory:
    """Records one ``StatPoint`` per ``record_interval_ms`` of simulation time.

    The deque is bounded; the oldest points fall off once ``max_points`` is
    reached.
    """

    def __init__(
        self,
        record_interval_ms: float = STATS_RECORD_INTERVAL_MS,
        max_points: int = MAX_STAT_POINTS,
    ) -> None:
        self.record_interval_ms = record_interval_ms
        self._points: Deque[StatPoint] = deque(maxlen=max_points)
        self._last_record_time: Optional[float] = None

    def __len__(self) -> int:
        return len(self._points)

    @property
    def points(self) -> List[StatPoint]:
        return list(self._points)

    def record(self, state: SimulationState) -> StatPoint:
        env = state.environment
        point = build_stat_point(
            state.organisms,
            state.biome_health,
            env.water_level,
            env.sunlight_level,
            state.time_ms,
        )
        self._points.append(point)
        self._last_record_time = state.time_ms
        return point

    def maybe_record(self, state: SimulationState) -> Optional[StatPoint]:
        """Record if the interval has elapsed since the last point."""
        if self._last_record_time is not None and state.time_ms - self._last_record_time < self.record_interval_ms:
            return None
        return self.record(state)

    def recent(self, minutes: float) -> List[StatPoint]:
        """Points within the last ``minutes`` of simulation time."""
        if not self._points:
            return []
        cutoff = self._points[-1].timestamp - minutes * 60_000
        return [p for p in self._points if p.timestamp >= cutoff]

    def clear(self) -> None:
        self._points.clear()
        self._last_record_time = None
        logger.debug("StatsHistory cleared")
