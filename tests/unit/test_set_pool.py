"""Tests for the preset set pool."""

import json

import numpy as np
import pytest

from randset.core.exceptions import SetPoolError
from randset.data.schemas import GeneratedSet
from randset.data.set_pool import SetPool


def make_set(species: str, item: str = "Leftovers") -> GeneratedSet:
    return GeneratedSet(
        species=species,
        ability="Pressure",
        item=item,
        moves=["Tackle", "Growl", "Quick Attack", "Scratch"],
        evs={"hp": 85, "atk": 85, "def": 85, "spa": 85, "spd": 85, "spe": 85},
        ivs={"hp": 31, "atk": 31, "def": 31, "spa": 31, "spd": 31, "spe": 31},
        nature="Hardy",
    )


@pytest.fixture
def pool():
    return SetPool([
        make_set("Garchomp"),
        make_set("Garchomp", item="Choice Scarf"),
        make_set("Rotom-Wash"),
        make_set("Mr. Mime"),
        make_set("Pikachu"),
    ])


class TestSetPoolLoading:
    """Tests for loading and indexing."""

    def test_empty_pool(self, rng):
        pool = SetPool()
        assert not pool.is_loaded
        assert len(pool) == 0
        assert pool.random_set(rng) is None
        assert pool.random_team(6, rng) == []

    def test_index_by_species(self, pool):
        assert pool.is_loaded
        assert len(pool) == 5
        assert pool.species_names() == ["garchomp", "rotomwash", "mrmime", "pikachu"]
        assert len(pool.sets_for_species("GARCHOMP")) == 2

    def test_statistics(self, pool):
        stats = pool.statistics()
        assert stats["total_sets"] == 5
        assert stats["unique_species"] == 4
        assert stats["sets_per_species"]["garchomp"] == 2

    def test_reload_replaces(self, pool):
        pool.load([make_set("Pikachu")])
        assert len(pool) == 1
        assert pool.species_names() == ["pikachu"]

    def test_from_json(self, pool, temp_dir):
        path = temp_dir / "sets.json"
        records = [s.model_dump() for s in pool.sets_for_species("garchomp")]
        records.append({"species": "Broken"})
        path.write_text(json.dumps(records))

        loaded = SetPool.from_json(path)
        assert len(loaded) == 2
        assert loaded.species_names() == ["garchomp"]

    def test_from_json_errors(self, temp_dir):
        with pytest.raises(SetPoolError):
            SetPool.from_json(temp_dir / "missing.json")

        path = temp_dir / "object.json"
        path.write_text(json.dumps({"species": "Garchomp"}))
        with pytest.raises(SetPoolError):
            SetPool.from_json(path)


class TestSetPoolDraws:
    """Tests for random draws and lookups."""

    def test_exact_find(self, pool, rng):
        found = pool.find("Mr. Mime", rng)
        assert found is not None
        assert found.species == "Mr. Mime"

    def test_find_ignores_formatting(self, pool, rng):
        assert pool.find("rotom wash", rng).species == "Rotom-Wash"

    def test_fuzzy_find(self, pool, rng):
        assert pool.find("chomp", rng).species == "Garchomp"
        assert pool.find("Pikachu-Original", rng).species == "Pikachu"

    def test_find_missing(self, pool, rng):
        assert pool.find("Snorlax", rng) is None
        assert pool.find("", rng) is None

    def test_random_team_distinct(self, pool, rng):
        team = pool.random_team(3, rng)
        assert len(team) == 3
        assert len({id(s) for s in team}) == 3

    def test_random_team_short_pool(self, pool, rng):
        assert len(pool.random_team(10, rng)) == 5
        with pytest.raises(SetPoolError):
            pool.random_team(10, rng, strict=True)

    def test_seeded_draws_repeat(self, pool):
        a = [pool.random_set(np.random.default_rng(3)).item for _ in range(3)]
        b = [pool.random_set(np.random.default_rng(3)).item for _ in range(3)]
        assert a == b
