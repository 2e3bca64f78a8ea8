"""Tests for mate eligibility, odds and offspring synthesis."""

import itertools

import pytest

from ecosim.reproduction import (
    apply_parent_cost,
    calculate_reproduction_chance,
    can_reproduce,
    create_offspring,
    find_potential_mates,
    is_in_cooldown,
    reproduction_succeeds,
)
from ecosim.util.rng import MissingRNGError


class TestEligibility:
    def test_symmetric(self, make_organism) -> None:
        population = [
            make_organism("rabbit", 10, 10, health=80),
            make_organism("rabbit", 20, 10, health=80),
            make_organism("rabbit", 12, 12, health=55),
            make_organism("fox", 11, 11, health=90),
            make_organism("rabbit", 60, 60, health=90),
        ]
        for a, b in itertools.permutations(population, 2):
            assert can_reproduce(a, b) == can_reproduce(b, a)

    def test_requires_same_species(self, make_organism) -> None:
        assert not can_reproduce(make_organism("rabbit", 10, 10), make_organism("fox", 12, 10))

    def test_requires_health(self, make_organism) -> None:
        a = make_organism("rabbit", 10, 10, health=59)
        b = make_organism("rabbit", 12, 10, health=100)
        assert not can_reproduce(a, b)

    def test_distance_boundary_is_inclusive(self, make_organism) -> None:
        a = make_organism("rabbit", 10, 10)
        assert can_reproduce(a, make_organism("rabbit", 25, 10))
        assert not can_reproduce(a, make_organism("rabbit", 25.1, 10))

    def test_find_potential_mates_excludes_self(self, make_organism) -> None:
        a = make_organism("grass", 10, 10)
        b = make_organism("grass", 15, 10)
        assert find_potential_mates(a, [a, b]) == [b]


class TestChance:
    def test_fast_breeder_multiplier(self, make_organism) -> None:
        a = make_organism("rabbit")
        b = make_organism("rabbit")
        assert calculate_reproduction_chance(a, b, 1.0) == pytest.approx(0.3)

    def test_slow_breeder_multiplier(self, make_organism) -> None:
        a = make_organism("fox", health=80)
        b = make_organism("fox", health=60)
        assert calculate_reproduction_chance(a, b, 0.5) == pytest.approx(0.2 * 0.7 * 0.5 * 0.7)

    def test_draw_scaled_by_speed(self) -> None:
        assert reproduction_succeeds(0.3, 5, 0.29)
        assert not reproduction_succeeds(0.3, 5, 0.3)
        assert not reproduction_succeeds(0.3, 1, 0.07)


class TestOffspring:
    def test_offspring_starts_fresh(self, make_organism, seeded_rng) -> None:
        p1 = make_organism("tree", 40, 40, stage=1, adaptation_points=60)
        p2 = make_organism("tree", 44, 40, stage=2, adaptation_points=110)
        child = create_offspring(p1, p2, seeded_rng, now=4000)
        assert child.type == "tree"
        assert child.health == 80
        assert child.stage == 0
        assert child.traits == ("basic",)
        assert child.birth_time == 4000
        assert child.id not in (p1.id, p2.id)

    def test_adaptation_inheritance_capped(self, make_organism, seeded_rng) -> None:
        p1 = make_organism("tree", stage=2, adaptation_points=900)
        p2 = make_organism("tree", stage=2, adaptation_points=900)
        for _ in range(20):
            assert create_offspring(p1, p2, seeded_rng).adaptation_points <= 100

    def test_position_clamped_inside_margin(self, make_organism, seeded_rng) -> None:
        p1 = make_organism("grass", 0, 0)
        p2 = make_organism("grass", 2, 1)
        for _ in range(20):
            child = create_offspring(p1, p2, seeded_rng)
            assert 5 <= child.position.x <= 95
            assert 5 <= child.position.y <= 95

    def test_requires_rng(self, make_organism) -> None:
        with pytest.raises(MissingRNGError):
            create_offspring(make_organism("grass"), make_organism("grass"), None)


class TestCooldownAndCost:
    def test_cooldown_scales_with_speed(self, make_organism) -> None:
        fish = make_organism("fish", last_reproduction_time=0.0)
        assert is_in_cooldown(fish, 9999, 1)
        assert not is_in_cooldown(fish, 10000, 1)
        assert not is_in_cooldown(fish, 5000, 2)

    def test_never_mated_is_not_in_cooldown(self, make_organism) -> None:
        assert not is_in_cooldown(make_organism("fish"), 0, 1)

    def test_parent_cost_floors_at_forty(self, make_organism) -> None:
        assert apply_parent_cost(make_organism("fish", health=100), 10).health == 90
        costed = apply_parent_cost(make_organism("fish", health=45), 10)
        assert costed.health == 40
        assert costed.last_reproduction_time == 10
