"""Tests for biome health and population statistics."""

import pytest

from ecosim.ecosystem_stats import (
    average_adaptation,
    build_stat_point,
    calculate_balance_score,
    calculate_biome_health,
    count_roles,
    fully_evolved_species,
    species_distribution,
    stage_distribution,
)


class TestBalanceScore:
    def test_ideal_balance(self) -> None:
        assert calculate_balance_score(3, 1, 1) == 100

    def test_missing_decomposers(self) -> None:
        assert calculate_balance_score(4, 2, 0) == 75

    def test_consumers_outnumber_producers(self) -> None:
        assert calculate_balance_score(1, 3, 1) == 50

    def test_between_ratios(self) -> None:
        """Neither twice as many producers nor more consumers: no ratio points."""
        assert calculate_balance_score(3, 2, 1) == 75


class TestBiomeHealth:
    def test_empty_population_scores_ratio_bonus(self) -> None:
        assert calculate_balance_score(0, 0, 0) == 25
        assert calculate_biome_health([]) == pytest.approx(15)

    def test_weighted_average(self, make_organism) -> None:
        organisms = [
            make_organism("grass", health=80),
            make_organism("grass", health=80),
            make_organism("tree", health=80),
            make_organism("rabbit", health=80),
            make_organism("fungi", health=80),
        ]
        assert calculate_biome_health(organisms) == pytest.approx(80 * 0.4 + 100 * 0.6)

    def test_stays_in_range(self, make_organism) -> None:
        lonely = [make_organism("fox", health=1)]
        assert calculate_biome_health(lonely) == 10


class TestDistributions:
    def test_counts(self, make_organism) -> None:
        organisms = [
            make_organism("grass"),
            make_organism("grass", stage=1),
            make_organism("fox", stage=2, adaptation_points=130),
            make_organism("beetle"),
        ]
        assert count_roles(organisms) == (2, 1, 1)
        assert species_distribution(organisms) == {"grass": 2, "fox": 1, "beetle": 1}
        assert stage_distribution(organisms) == {0: 2, 1: 1, 2: 1}
        assert fully_evolved_species(organisms) == ["fox"]
        assert average_adaptation(organisms) == pytest.approx(32.5)

    def test_stat_point(self, make_organism) -> None:
        point = build_stat_point([make_organism("grass")], 60.0, 40.0, 70.0, timestamp=10000)
        data = point.to_dict()
        assert data["organismCount"] == 1
        assert data["speciesDistribution"] == {"grass": 1}
        assert data["waterLevel"] == 40.0
        assert data["timestamp"] == 10000
