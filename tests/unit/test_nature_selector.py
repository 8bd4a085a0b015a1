"""Tests for nature selection and the nature catalog."""

import pytest

from randset.builder.nature_selector import NatureSelector
from randset.data.natures import (
    FALLBACK_NATURE,
    NEUTRAL_REPLACEMENT,
    Nature,
    get_nature,
    natures_boosting,
    natures_reducing,
    neutral_natures,
)


@pytest.fixture
def selector():
    return NatureSelector()


class TestNatureCatalog:
    """Tests for the nature table and helpers."""

    def test_catalog_size(self):
        assert len(Nature) == 25
        assert len(neutral_natures()) == 5

    def test_lookup(self):
        assert get_nature("adamant") is Nature.ADAMANT
        assert get_nature(" Timid ") is Nature.TIMID
        assert get_nature("Sturdy") is None

    def test_multiplier(self):
        assert Nature.ADAMANT.multiplier("atk") == pytest.approx(1.1)
        assert Nature.ADAMANT.multiplier("spa") == pytest.approx(0.9)
        assert Nature.ADAMANT.multiplier("spe") == 1.0
        assert Nature.HARDY.multiplier("atk") == 1.0

    def test_boosting_and_reducing(self):
        boosting = natures_boosting("spe")
        assert Nature.JOLLY in boosting
        assert Nature.TIMID in boosting
        assert all(not n.is_neutral for n in boosting)
        assert Nature.MODEST in natures_reducing("atk")

    def test_fallbacks_are_neutral(self):
        assert FALLBACK_NATURE.is_neutral
        assert NEUTRAL_REPLACEMENT.is_neutral


class TestRoleNatures:
    """Tests for role-driven natures."""

    def test_bulky_physical(self, selector, analyzer):
        counter = analyzer.analyze(["Earthquake", "Stealth Rock", "Roost", "Toxic"], ["Ground"], [])
        assert selector.select(counter, "Bulky Support") is Nature.IMPISH

    def test_bulky_special(self, selector, analyzer):
        counter = analyzer.analyze(["Scald", "Recover", "Toxic", "Protect"], ["Water"], [])
        assert selector.select(counter, "Bulky Support") is Nature.CALM

    def test_wallbreaker_not_bulky(self, selector, analyzer):
        counter = analyzer.analyze(["Earthquake", "Outrage", "Fire Fang", "Swords Dance"], ["Ground"], [])
        assert selector.select(counter, "Wallbreaker") is Nature.ADAMANT

    def test_fast_attacker_special(self, selector, analyzer):
        counter = analyzer.analyze(["Thunderbolt", "Surf", "Volt Switch", "Knock Off"], ["Electric"], [])
        assert selector.select(counter, "Fast Attacker") is Nature.TIMID

    def test_invalid_role_nature_replaced(self, selector, analyzer):
        """A nature boosting an unused attacking stat becomes neutral."""
        counter = analyzer.analyze(["Recover", "Protect", "Toxic", "Calm Mind"], ["Psychic"], [])
        assert selector.select(counter, "Wallbreaker") is NEUTRAL_REPLACEMENT


class TestMovesetNatures:
    """Tests for roleless nature selection."""

    def test_physical_without_priority(self, selector, analyzer):
        counter = analyzer.analyze(["Earthquake", "Outrage", "Fire Fang", "Swords Dance"], ["Ground"], [])
        assert selector.select(counter) is Nature.JOLLY

    def test_physical_with_priority(self, selector, analyzer):
        counter = analyzer.analyze(["Earthquake", "Outrage", "Extreme Speed", "Swords Dance"], ["Ground"], [])
        assert selector.select(counter) is Nature.ADAMANT

    def test_special(self, selector, analyzer):
        counter = analyzer.analyze(["Thunderbolt", "Surf", "Ice Beam", "Calm Mind"], ["Electric"], [])
        assert selector.select(counter) is Nature.TIMID

    def test_is_valid(self, selector, analyzer):
        special = analyzer.analyze(["Thunderbolt", "Surf"], ["Electric"], [])
        assert not selector.is_valid(Nature.ADAMANT, special)
        assert selector.is_valid(Nature.MODEST, special)
        assert selector.is_valid(Nature.HARDY, special)
