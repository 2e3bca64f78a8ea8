"""Tests for the evolution ladders and stage lookup."""

import pytest

from ecosim.evolution.stages import (
    EVOLUTION_PATHS,
    MAX_STAGE,
    describe_ladder,
    evolution_progress,
    get_evolution_info,
    get_next_evolution_stage,
    traits_for,
)
from ecosim.species import ALL_SPECIES


class TestEvolutionTable:
    def test_every_species_has_a_full_ladder(self) -> None:
        for species in ALL_SPECIES:
            ladder = EVOLUTION_PATHS[species]
            assert len(ladder) == MAX_STAGE + 1
            assert ladder[0].threshold == 0
            assert [s.stage for s in ladder] == [0, 1, 2]
            assert ladder[0].threshold < ladder[1].threshold < ladder[2].threshold

    def test_known_traits(self) -> None:
        assert traits_for("tree", 1) == ("drought-resistant",)
        assert traits_for("tree", 2) == ("drought-resistant", "nutrient-rich")
        assert traits_for("grass", 2) == ("fast-growing", "heat-resistant")
        assert traits_for("rabbit", 0) == ("herbivore",)

    def test_unknown_species_degrades_to_sentinel(self) -> None:
        info = get_evolution_info("dragon", 0)
        assert info.name == "dragon"
        assert info.traits == ("unknown",)
        assert info.description == "Unknown species"

    def test_out_of_range_stage_degrades_to_sentinel(self) -> None:
        info = get_evolution_info("rabbit", 7)
        assert info.name == "rabbit"
        assert info.traits == ("unknown",)

    def test_describe_ladder_is_serializable(self) -> None:
        ladder = describe_ladder("fox")
        assert [entry["threshold"] for entry in ladder] == [0, 60, 120]
        assert isinstance(ladder[1]["traits"], list)


class TestNextStage:
    def test_rabbit_crosses_threshold(self) -> None:
        """49 points plus a gain of 2 reaches the 50-point threshold."""
        assert get_next_evolution_stage("rabbit", 0, 49 + 2) == 1

    def test_rabbit_just_below_threshold(self) -> None:
        assert get_next_evolution_stage("rabbit", 0, 49.9 + 0.05) == 0

    def test_advances_at_most_one_stage(self) -> None:
        assert get_next_evolution_stage("rabbit", 0, 500) == 1

    def test_final_stage_is_sticky(self) -> None:
        assert get_next_evolution_stage("rabbit", 2, 1000) == 2

    def test_unknown_species_never_advances(self) -> None:
        assert get_next_evolution_stage("dragon", 0, 1000) == 0

    @pytest.mark.parametrize("species", ALL_SPECIES)
    def test_never_decreases(self, species: str) -> None:
        for stage in range(MAX_STAGE + 1):
            assert get_next_evolution_stage(species, stage, 0) == stage


class TestProgress:
    def test_progress_towards_next_stage(self) -> None:
        assert evolution_progress("fox", 0, 30) == pytest.approx(50.0)

    def test_progress_capped(self) -> None:
        assert evolution_progress("fox", 0, 500) == 100.0

    def test_final_stage_is_complete(self) -> None:
        assert evolution_progress("fox", 2, 0) == 100.0
