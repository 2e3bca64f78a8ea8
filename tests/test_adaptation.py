"""Tests for the adaptation scorer."""

import pytest

from ecosim.evolution.adaptation import calculate_adaptation_gain, calculate_stress


class TestStress:
    def test_comfortable_tree_has_no_stress(self) -> None:
        assert calculate_stress("tree", 50, 60, "forest") == 0

    def test_dry_tree(self) -> None:
        assert calculate_stress("tree", 20, 60, "forest") == pytest.approx(1.0)

    def test_non_native_biome_penalty(self) -> None:
        assert calculate_stress("cactus", 50, 60, "forest") == pytest.approx(1.0)
        assert calculate_stress("seaweed", 80, 60, "forest") == pytest.approx(2.0)

    def test_aquatic_species_out_of_water(self) -> None:
        assert calculate_stress("fish", 60, 60, "ocean") == pytest.approx(2.0)

    def test_unknown_species_is_never_stressed(self) -> None:
        assert calculate_stress("dragon", 0, 100, "desert") == 0


class TestAdaptationGain:
    def test_gain_is_half_the_stress(self, make_organism) -> None:
        tree = make_organism("tree", health=50)
        assert calculate_adaptation_gain(tree, 20, 60, "forest") == pytest.approx(0.5)

    def test_thriving_organism_gains_nothing(self, make_organism) -> None:
        tree = make_organism("tree", health=95)
        assert calculate_adaptation_gain(tree, 20, 60, "forest") == 0.0

    def test_dead_organism_gains_nothing(self, make_organism) -> None:
        tree = make_organism("tree", health=0)
        assert calculate_adaptation_gain(tree, 20, 60, "forest") == 0.0

    def test_overwhelming_stress_gains_nothing(self, make_organism) -> None:
        tree = make_organism("tree", health=50)
        # 3.0 from water plus 3.0 from darkness
        assert calculate_adaptation_gain(tree, 0, 0, "forest") == 0.0

    def test_rounds_half_up(self, make_organism) -> None:
        tree = make_organism("tree", health=50)
        # stress 0.5 -> raw gain 0.25 -> 0.3
        assert calculate_adaptation_gain(tree, 25, 60, "forest") == pytest.approx(0.3)
