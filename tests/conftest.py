"""Pytest configuration and fixtures for ecosim tests."""

import random
from dataclasses import replace

import pytest

from ecosim.entities.organism import create_organism
from ecosim.environment import EffectiveEnvironment, Season
from ecosim.evolution.stages import traits_for
from ecosim.math_utils import Position


class FixedDrawRandom(random.Random):
    """Random whose ``random()`` always returns ``value``.

    ``uniform`` draws collapse to their lower bound; ids still come from
    ``getrandbits`` and stay unique.
    """

    def __init__(self, value: float = 0.0, seed: int = 0) -> None:
        super().__init__(seed)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def lucky_rng():
    """RNG whose every draw succeeds (random() == 0.0)."""
    return FixedDrawRandom(0.0)


@pytest.fixture
def unlucky_rng():
    """RNG whose every probability draw fails."""
    return FixedDrawRandom(0.999999)


@pytest.fixture
def make_organism(seeded_rng):
    """Factory for organisms with overridable fields.

    Traits follow the requested stage unless given explicitly.
    """

    def _make(organism_type: str, x: float = 50.0, y: float = 50.0, **fields):
        org = create_organism(organism_type, Position(x, y), rng=seeded_rng)
        if "stage" in fields and "traits" not in fields:
            fields["traits"] = traits_for(organism_type, fields["stage"])
        return replace(org, **fields)

    return _make


@pytest.fixture
def make_environment():
    """Factory for an effective environment (defaults: mild summer forest)."""

    def _make(
        water_level: float = 50.0,
        sunlight_level: float = 60.0,
        season: Season = Season.SUMMER,
        growth_modifier: float = 1.0,
        biome_type: str = "forest",
    ) -> EffectiveEnvironment:
        return EffectiveEnvironment(
            water_level=water_level,
            sunlight_level=sunlight_level,
            growth_modifier=growth_modifier,
            season=season,
            biome_type=biome_type,
        )

    return _make


@pytest.fixture
def engine():
    """Setup a simulation engine for testing with deterministic seed."""
    from ecosim.simulation.engine import SimulationEngine

    return SimulationEngine(seed=42)
