"""Tests for payload building, event retention and stats history."""

from dataclasses import replace

import orjson
import pytest

from ecosim.events.domain_events import FeedingEvent, MovementEvent, ReproductionEvent
from ecosim.math_utils import Position
from ecosim.simulation.state import EnvironmentState, SimulationState
from ecosim_backend.event_log import EventLog
from ecosim_backend.state_payloads import StatePayload, StatsPayload
from ecosim_backend.stats_history import StatsHistory


def birth(timestamp: float) -> ReproductionEvent:
    return ReproductionEvent(
        id=f"child-{timestamp}",
        type="grass",
        position=Position(10, 10),
        timestamp=timestamp,
        parent_ids=("a", "b"),
    )


class TestEventLog:
    def test_prunes_outside_window(self) -> None:
        log = EventLog(window_ms=3000)
        log.add([birth(1000), birth(4000)])
        assert log.prune(now=5000) == 1
        assert [e.timestamp for e in log.all()] == [4000]

    def test_filters_by_type(self) -> None:
        log = EventLog()
        log.append(birth(0))
        log.append(
            FeedingEvent(predator_id="f", prey_id="r", position=Position(1, 1), timestamp=0, health_gained=25)
        )
        assert len(log.of_type(FeedingEvent)) == 1
        assert len(log.of_type(MovementEvent)) == 0

    def test_window_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            EventLog(window_ms=0)


class TestStatePayload:
    def test_snapshot_events_by_default(self, engine) -> None:
        engine.place_organism("rabbit", Position(50, 50))
        engine.step()
        data = StatePayload.from_snapshot(engine.snapshot()).to_dict()
        assert data["type"] == "update"
        assert len(data["movementEvents"]) == 1
        assert data["organisms"][0]["type"] == "rabbit"
        assert "stats" not in data

    def test_event_log_overrides_snapshot_events(self, engine) -> None:
        log = EventLog()
        log.append(birth(0))
        payload = StatePayload.from_snapshot(engine.snapshot(), event_log=log)
        data = payload.to_dict()
        assert data["reproductionEvents"][0]["parentIds"] == ["a", "b"]

    def test_json_round_trip(self, engine) -> None:
        engine.place_organism("fox", Position(50, 50))
        stats = StatsPayload.from_engine_stats(engine.get_stats())
        payload = StatePayload.from_snapshot(engine.snapshot(), stats=stats)
        decoded = orjson.loads(payload.to_json())
        assert decoded["currentSeason"] == "spring"
        assert decoded["stats"]["consumerCount"] == 1
        assert decoded["organisms"][0]["position"] == {"x": 50.0, "y": 50.0}


class TestStatsHistory:
    @staticmethod
    def state_at(time_ms: float) -> SimulationState:
        return SimulationState(
            organisms=(),
            environment=EnvironmentState(water_level=50, sunlight_level=60),
            biome_health=10,
            time_ms=time_ms,
        )

    def test_records_on_interval(self) -> None:
        history = StatsHistory(record_interval_ms=10000)
        assert history.maybe_record(self.state_at(2000)) is not None
        assert history.maybe_record(self.state_at(8000)) is None
        assert history.maybe_record(self.state_at(12000)) is not None
        assert len(history) == 2

    def test_bounded(self) -> None:
        history = StatsHistory(max_points=3)
        for i in range(5):
            history.record(self.state_at(i * 10000))
        assert [p.timestamp for p in history.points] == [20000, 30000, 40000]

    def test_recent(self) -> None:
        history = StatsHistory()
        for minute in range(10):
            history.record(self.state_at(minute * 60000))
        assert [p.timestamp for p in history.recent(2)] == [420000, 480000, 540000]

    def test_clear(self) -> None:
        history = StatsHistory()
        state = self.state_at(0)
        history.record(replace(state, biome_health=50))
        history.clear()
        assert len(history) == 0
        assert history.maybe_record(state) is not None
