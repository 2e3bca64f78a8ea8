"""Tests for the reproduction phase."""

from ecosim.config.simulation_config import EcosystemConfig
from ecosim.events.domain_events import InteractionEvent, ReproductionEvent
from ecosim.systems.breeding import run_breeding_phase

NOW = 20000.0


def breed(organisms, rng, now=NOW, speed=1, factor=1.0, ecosystem=None):
    return run_breeding_phase(organisms, factor, speed, ecosystem or EcosystemConfig(), rng, now)


class TestBreedingPhase:
    def test_successful_pair(self, make_organism, lucky_rng) -> None:
        a = make_organism("rabbit", 40, 40)
        b = make_organism("rabbit", 45, 40)
        result = breed([a, b], lucky_rng)
        assert len(result.organisms) == 3
        parent_a, parent_b, child = result.organisms
        assert parent_a.health == 90 and parent_b.health == 90
        assert parent_a.last_reproduction_time == NOW
        assert parent_b.last_reproduction_time == NOW
        assert child.type == "rabbit"
        assert child.birth_time == NOW
        births = [e for e in result.events if isinstance(e, ReproductionEvent)]
        assert len(births) == 1
        assert births[0].id == child.id
        assert set(births[0].parent_ids) == {a.id, b.id}
        mating = [e for e in result.events if isinstance(e, InteractionEvent)]
        assert mating[0].kind == "mating"

    def test_failed_draw(self, make_organism, unlucky_rng) -> None:
        a = make_organism("rabbit", 40, 40)
        b = make_organism("rabbit", 45, 40)
        result = breed([a, b], unlucky_rng)
        assert result.organisms == (a, b)
        assert result.details["births"] == 0
        assert result.details["attempts"] >= 1

    def test_each_organism_mates_once(self, make_organism, lucky_rng) -> None:
        rabbits = [make_organism("rabbit", 40 + i, 40) for i in range(4)]
        result = breed(rabbits, lucky_rng)
        assert result.details["births"] == 2

    def test_fish_cooldown(self, make_organism, lucky_rng) -> None:
        """Parents cannot breed again until 10000/speed ms have passed."""
        a = make_organism("fish", 40, 40)
        b = make_organism("fish", 45, 40)
        first = breed([a, b], lucky_rng, now=NOW)
        parents = first.organisms[:2]

        too_soon = breed(parents, lucky_rng, now=NOW + 9999)
        assert too_soon.details["births"] == 0

        faster = breed(parents, lucky_rng, now=NOW + 5000, speed=2)
        assert faster.details["births"] == 1

        later = breed(parents, lucky_rng, now=NOW + 10000)
        assert later.details["births"] == 1

    def test_species_cap(self, make_organism, lucky_rng) -> None:
        full = [make_organism("rabbit", 40 + (i % 5), 40 + (i // 5)) for i in range(15)]
        assert breed(full, lucky_rng).details["births"] == 0

    def test_offspring_count_towards_cap(self, make_organism, lucky_rng) -> None:
        almost = [make_organism("rabbit", 40 + (i % 5), 40 + (i // 5)) for i in range(14)]
        result = breed(almost, lucky_rng)
        assert result.details["births"] == 1
        assert sum(1 for o in result.organisms if o.type == "rabbit") == 15

    def test_custom_cap(self, make_organism, lucky_rng) -> None:
        ecosystem = EcosystemConfig(species_caps={"rabbit": 2})
        pair = [make_organism("rabbit", 40, 40), make_organism("rabbit", 42, 40)]
        assert breed(pair, lucky_rng, ecosystem=ecosystem).details["births"] == 0

    def test_unhealthy_pair(self, make_organism, lucky_rng) -> None:
        pair = [make_organism("rabbit", 40, 40, health=55), make_organism("rabbit", 42, 40)]
        assert breed(pair, lucky_rng).details["births"] == 0
