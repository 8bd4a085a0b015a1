"""Tests for stat formulas and spread construction."""

import pytest

from randset.builder.counter import MoveCounter
from randset.builder.stat_optimizer import (
    StatOptimizer,
    balanced_effort_values,
    calculate_hp,
    calculate_stat,
    calculate_stats,
    clamp_effort_values,
    is_valid_ev_spread,
    is_valid_iv_spread,
)
from randset.data.natures import Nature


GARCHOMP_BASE = {"hp": 108, "atk": 130, "def": 95, "spa": 80, "spd": 85, "spe": 102}


@pytest.fixture
def optimizer():
    return StatOptimizer()


class TestStatFormulas:
    """Tests for the stat formulas."""

    def test_hp(self):
        assert calculate_hp(108, 31, 0, 100) == 357
        assert calculate_hp(108, 31, 252, 100) == 420

    def test_stat_with_nature(self):
        assert calculate_stat(130, 31, 252, 100, 1.1) == 394
        assert calculate_stat(130, 31, 252, 100) == 359

    def test_calculate_stats(self):
        evs = {"hp": 0, "atk": 252, "def": 0, "spa": 0, "spd": 4, "spe": 252}
        ivs = {s: 31 for s in GARCHOMP_BASE}
        stats = calculate_stats(GARCHOMP_BASE, evs, ivs, 100, Nature.JOLLY)
        assert stats["hp"] == 357
        assert stats["atk"] == 359
        assert stats["spe"] == 333


class TestSpreadValidation:
    """Tests for EV/IV validators and clamping."""

    def test_ev_bounds(self):
        assert is_valid_ev_spread(balanced_effort_values())
        assert not is_valid_ev_spread({"hp": 256})
        assert not is_valid_ev_spread({"hp": -4})

    def test_legacy_total(self):
        evs = {"hp": 252, "atk": 252, "def": 252, "spa": 0, "spd": 0, "spe": 0}
        assert is_valid_ev_spread(evs, generation=8)
        assert not is_valid_ev_spread(evs, generation=7)

    def test_iv_bounds(self):
        assert is_valid_iv_spread({s: 31 for s in GARCHOMP_BASE})
        assert not is_valid_iv_spread({"atk": 32})

    def test_clamp(self):
        evs = {"hp": 252, "atk": 252, "def": 252, "spa": 252, "spd": 0, "spe": 0}
        clamped = clamp_effort_values(evs)
        assert sum(clamped.values()) <= 510
        assert all(0 <= v <= 255 for v in clamped.values())

    def test_clamp_leaves_legal_spread(self):
        evs = balanced_effort_values()
        assert clamp_effort_values(evs) == evs


class TestEffortValues:
    """Tests for StatOptimizer.build_effort_values."""

    @pytest.mark.parametrize("role", ["Bulky Support", "Bulky Attacker", "Wall", "Physical Wall", "Tank", "Bulky Setup"])
    def test_bulky_roles(self, optimizer, analyzer, role):
        """Bulky roles get the fixed physically defensive spread."""
        counter = analyzer.analyze(["Earthquake", "Outrage", "Swords Dance", "Fire Fang"], ["Ground"], [])
        evs = optimizer.build_effort_values(counter, role)
        assert evs == {"hp": 252, "atk": 0, "def": 252, "spa": 0, "spd": 4, "spe": 0}

    def test_wallbreaker_is_offensive(self, optimizer, analyzer):
        counter = analyzer.analyze(["Earthquake", "Outrage", "Fire Fang", "Iron Head"], ["Ground"], [])
        evs = optimizer.build_effort_values(counter, "Wallbreaker")
        assert evs["atk"] == 252
        assert evs["spe"] == 252
        assert evs["def"] == 0

    def test_special_sweeper(self, optimizer, analyzer):
        counter = analyzer.analyze(["Thunderbolt", "Surf", "Calm Mind", "Knock Off"], ["Electric"], [])
        evs = optimizer.build_effort_values(counter, "Setup Sweeper")
        assert evs["spa"] == 252
        assert evs["atk"] == 0

    def test_no_role_balanced(self, optimizer, analyzer):
        counter = analyzer.analyze(["Earthquake"], ["Ground"], [])
        assert optimizer.build_effort_values(counter, None) == balanced_effort_values()


class TestIndividualValues:
    """Tests for StatOptimizer.build_individual_values."""

    def test_special_only_drops_attack(self, optimizer, analyzer):
        counter = analyzer.analyze(["Thunderbolt", "Surf"], ["Electric"], [])
        ivs = optimizer.build_individual_values(counter)
        assert ivs["atk"] == 0
        assert ivs["spa"] == 31

    def test_physical_keeps_attack(self, optimizer, analyzer):
        counter = analyzer.analyze(["Earthquake", "Thunderbolt"], ["Ground"], [])
        assert optimizer.build_individual_values(counter)["atk"] == 31


class TestHpParity:
    """Tests for StatOptimizer.optimize_hp_value."""

    def test_stealth_rock_wants_odd_hp(self, optimizer):
        counter = MoveCounter()
        counter.add("stealthrock")
        ev = optimizer.optimize_hp_value(85, counter, 108, 100)
        assert ev == 81
        assert calculate_hp(108, 31, ev, 100) % 2 == 1

    def test_substitute_wants_multiple_of_four(self, optimizer):
        counter = MoveCounter()
        counter.add("substitute")
        ev = optimizer.optimize_hp_value(85, counter, 108, 100)
        assert ev == 77
        assert calculate_hp(108, 31, ev, 100) % 4 == 0

    def test_belly_drum_parity(self, optimizer):
        counter = MoveCounter()
        counter.add("bellydrum")
        ev = optimizer.optimize_hp_value(85, counter, 100, 100)
        hp = calculate_hp(100, 31, ev, 100)
        assert hp % 2 == 0 and hp % 4 != 0

    def test_no_target_unchanged(self, optimizer):
        assert optimizer.optimize_hp_value(85, MoveCounter(), 108, 100) == 85

    def test_unreachable_target_falls_through(self, optimizer):
        """At level 1 HP stays 14 for every EV, so odd HP is out of reach and Belly Drum decides."""
        counter = MoveCounter()
        counter.add("stealthrock")
        counter.add("bellydrum")
        assert {calculate_hp(140, 31, ev, 1) for ev in range(1, 86, 4)} == {14}

        assert optimizer.optimize_hp_value(252, counter, 140, 1) == 85

    def test_no_reachable_target_unchanged(self, optimizer):
        counter = MoveCounter()
        counter.add("stealthrock")
        assert optimizer.optimize_hp_value(252, counter, 140, 1) == 252
