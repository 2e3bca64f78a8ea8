"""Tests for the pure tick function."""

import pytest

from ecosim.config.simulation_config import MobilityConfig, SeasonConfig, SimulationConfig
from ecosim.environment import Season
from ecosim.events.domain_events import DeathEvent, MovementEvent
from ecosim.evolution.stages import traits_for
from ecosim.simulation.state import EnvironmentState, SimulationState
from ecosim.simulation.tick import tick, tick_interval_ms
from ecosim.update_phases import PHASE_DESCRIPTIONS, UpdatePhase
from ecosim.util.rng import MissingRNGError


def make_state(organisms=(), water_level=50.0, sunlight_level=60.0, **env):
    return SimulationState(
        organisms=tuple(organisms),
        environment=EnvironmentState(water_level=water_level, sunlight_level=sunlight_level, **env),
        biome_health=75.0,
    )


class TestTickBasics:
    def test_paused_tick_is_a_no_op(self, make_organism, seeded_rng) -> None:
        state = make_state([make_organism("rabbit")], is_paused=True)
        result = tick(state, SimulationConfig(), seeded_rng)
        assert result.skipped
        assert result.state is state
        assert result.events == []

    def test_clock_advances_by_interval(self, seeded_rng) -> None:
        result = tick(make_state(), SimulationConfig(), seeded_rng)
        assert result.state.time_ms == 2000
        assert result.state.tick_count == 1
        fast = tick(make_state(simulation_speed=10), SimulationConfig(), seeded_rng)
        assert fast.state.time_ms == pytest.approx(200)

    def test_interval_helper(self) -> None:
        assert tick_interval_ms(SimulationConfig(), 4) == 500

    def test_input_state_untouched(self, make_organism, seeded_rng) -> None:
        organisms = (make_organism("rabbit", 30, 30), make_organism("grass", 70, 70))
        state = make_state(organisms)
        tick(state, SimulationConfig(), seeded_rng)
        assert state.organisms == organisms
        assert state.tick_count == 0

    def test_requires_rng(self) -> None:
        with pytest.raises(MissingRNGError):
            tick(make_state(), SimulationConfig(), None)

    def test_details_cover_every_phase(self, seeded_rng) -> None:
        result = tick(make_state(), SimulationConfig(), seeded_rng)
        assert set(result.details) == set(UpdatePhase)
        assert set(PHASE_DESCRIPTIONS) == set(UpdatePhase)

    def test_empty_biome_keeps_running(self, seeded_rng) -> None:
        result = tick(make_state(), SimulationConfig(), seeded_rng)
        assert result.state.biome_health == pytest.approx(15)
        assert result.state.organisms == ()


class TestTickPhases:
    def test_environmental_death(self, make_organism, lucky_rng) -> None:
        tree = make_organism("tree", health=1)
        state = make_state([tree], water_level=0, season=Season.SUMMER)
        result = tick(state, SimulationConfig(), lucky_rng)
        assert result.state.organisms == ()
        deaths = result.events_of(DeathEvent)
        assert len(deaths) == 1
        assert deaths[0].organism_id == tree.id
        assert deaths[0].cause == "environment"

    def test_predation_death(self, make_organism, seeded_rng) -> None:
        fox = make_organism("fox", 50, 50, health=60, hunger=60)
        rabbit = make_organism("rabbit", 52, 50)
        result = tick(make_state([fox, rabbit]), SimulationConfig(), seeded_rng)
        assert [o.id for o in result.state.organisms] == [fox.id]
        assert result.events_of(DeathEvent)[0].cause == "predation"
        assert len(result.feeding_events) == 1

    def test_reproduction_in_tick(self, make_organism, lucky_rng) -> None:
        pair = [make_organism("rabbit", 40, 40), make_organism("rabbit", 44, 40)]
        result = tick(make_state(pair), SimulationConfig(), lucky_rng)
        assert len(result.reproduction_events) == 1
        assert len(result.state.organisms) == 3
        assert result.reproduction_events[0].timestamp == result.state.time_ms

    def test_mobility_can_be_disabled(self, make_organism, seeded_rng) -> None:
        config = SimulationConfig(mobility=MobilityConfig(enabled=False))
        rabbit = make_organism("rabbit", 30, 30)
        result = tick(make_state([rabbit]), config, seeded_rng)
        assert not result.events_of(MovementEvent)
        assert result.state.organisms[0].hunger == 0
        assert result.state.organisms[0].position == rabbit.position
        assert result.details[UpdatePhase.MOBILITY] == {"skipped": True}

    def test_season_advances(self, seeded_rng) -> None:
        config = SimulationConfig(seasons=SeasonConfig(season_length_ms=4000))
        state = make_state(season_length_ms=4000)
        first = tick(state, config, seeded_rng)
        assert first.state.environment.season is Season.SPRING
        assert first.state.environment.season_progress == pytest.approx(50)
        second = tick(first.state, config, seeded_rng)
        assert second.state.environment.season is Season.SUMMER
        assert second.state.environment.season_progress == 0


class TestInvariantsOverManyTicks:
    def test_population_invariants(self, make_organism, seeded_rng) -> None:
        organisms = [
            make_organism("grass", 20, 20),
            make_organism("grass", 26, 20),
            make_organism("tree", 60, 30),
            make_organism("rabbit", 40, 40),
            make_organism("rabbit", 45, 42),
            make_organism("fox", 80, 80),
            make_organism("fungi", 10, 90),
        ]
        state = make_state(organisms, water_level=25, sunlight_level=88)
        config = SimulationConfig()
        stages = {o.id: o.stage for o in organisms}
        for _ in range(60):
            state = tick(state, config, seeded_rng).state
            ids = [o.id for o in state.organisms]
            assert len(ids) == len(set(ids))
            for org in state.organisms:
                assert 0 < org.health <= 100
                assert org.stage - stages.get(org.id, 0) in (0, 1)
                assert org.traits == traits_for(org.type, org.stage)
                stages[org.id] = org.stage
            for species in ("grass", "rabbit"):
                assert sum(1 for o in state.organisms if o.type == species) <= config.ecosystem.cap_for(species)
            assert 10 <= state.biome_health <= 100
