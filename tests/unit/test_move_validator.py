"""Tests for per-move culling and the coverage check."""

import pytest

from randset.builder.counter import CullAction
from randset.builder.move_validator import MoveValidator


@pytest.fixture
def validator():
    return MoveValidator()


def check(validator, analyzer, move, moves, types):
    counter = analyzer.analyze(moves, types, [])
    return validator.should_cull(move, counter, moves, types, [], "Testmon")


class TestSetupRules:
    """Tests for setup move support requirements."""

    def test_physical_setup_needs_two_attacks(self, validator, analyzer):
        """Swords Dance with a single physical attack is culled."""
        moves = ["Swords Dance", "Earthquake", "Recover", "Protect"]
        assert check(validator, analyzer, "Swords Dance", moves, ["Ground"]).should_cull

    def test_supported_setup_kept(self, validator, analyzer):
        moves = ["Swords Dance", "Earthquake", "Outrage", "Protect"]
        decision = check(validator, analyzer, "Swords Dance", moves, ["Ground"])
        assert not decision.should_cull
        assert decision.action is CullAction.KEEP_SETUP

    def test_special_setup_needs_special_attacks(self, validator, analyzer):
        moves = ["Calm Mind", "Earthquake", "Outrage", "Thunderbolt"]
        assert check(validator, analyzer, "Calm Mind", moves, ["Electric"]).should_cull

    def test_belly_drum_with_substitute(self, validator, analyzer):
        """Belly Drum and Substitute cull each other."""
        moves = ["Belly Drum", "Substitute", "Aqua Jet", "Play Rough"]
        assert check(validator, analyzer, "Belly Drum", moves, ["Water", "Fairy"]).should_cull
        assert check(validator, analyzer, "Substitute", moves, ["Water", "Fairy"]).should_cull


class TestSupportRules:
    """Tests for hazards, recovery, status and utility moves."""

    def test_knock_off_always_kept(self, validator, analyzer):
        moves = ["Knock Off", "Swords Dance", "Calm Mind", "Toxic"]
        assert not check(validator, analyzer, "Knock Off", moves, ["Fire"]).should_cull

    def test_weaker_hazard_culled(self, validator, analyzer):
        """Only the best hazard setter survives."""
        moves = ["Stealth Rock", "Spikes", "Earthquake", "Outrage"]
        assert check(validator, analyzer, "Spikes", moves, ["Ground"]).should_cull
        assert not check(validator, analyzer, "Stealth Rock", moves, ["Ground"]).should_cull

    def test_rest_needs_sleep_talk(self, validator, analyzer):
        alone = ["Rest", "Scald", "Ice Beam", "Toxic"]
        assert check(validator, analyzer, "Rest", alone, ["Water"]).should_cull

        paired = ["Rest", "Sleep Talk", "Scald", "Ice Beam"]
        assert not check(validator, analyzer, "Rest", paired, ["Water"]).should_cull
        assert not check(validator, analyzer, "Sleep Talk", paired, ["Water"]).should_cull

    def test_substitute_with_recoil(self, validator, analyzer):
        moves = ["Substitute", "Flare Blitz", "Earthquake", "Protect"]
        assert check(validator, analyzer, "Substitute", moves, ["Fire"]).should_cull

    def test_status_on_offensive_setup(self, validator, analyzer):
        moves = ["Swords Dance", "Earthquake", "Outrage", "Toxic"]
        assert check(validator, analyzer, "Toxic", moves, ["Ground"]).should_cull

    def test_pivot_on_physical_setup(self, validator, analyzer):
        moves = ["Swords Dance", "Earthquake", "Outrage", "Volt Switch"]
        assert check(validator, analyzer, "Volt Switch", moves, ["Ground"]).should_cull

    def test_protect_needs_recovery(self, validator, analyzer):
        without = ["Protect", "Scald", "Ice Beam", "Toxic"]
        assert check(validator, analyzer, "Protect", without, ["Water"]).should_cull

        with_recovery = ["Protect", "Recover", "Scald", "Ice Beam"]
        assert not check(validator, analyzer, "Protect", with_recovery, ["Water"]).should_cull

    def test_screen_needs_partner(self, validator, analyzer):
        moves = ["Reflect", "Psychic", "Recover", "Thunder Wave"]
        assert check(validator, analyzer, "Reflect", moves, ["Psychic"]).should_cull

        paired = ["Reflect", "Light Screen", "Psychic", "Recover"]
        assert not check(validator, analyzer, "Reflect", paired, ["Psychic"]).should_cull

    def test_second_removal_culled(self, validator, analyzer):
        moves = ["Defog", "Rapid Spin", "Scald", "Recover"]
        assert check(validator, analyzer, "Rapid Spin", moves, ["Water"]).should_cull
        assert not check(validator, analyzer, "Defog", moves, ["Water"]).should_cull

    def test_second_status_move_culled(self, validator, analyzer):
        moves = ["Toxic", "Will-O-Wisp", "Scald", "Recover"]
        assert check(validator, analyzer, "Toxic", moves, ["Water"]).should_cull

        single = ["Toxic", "Scald", "Recover", "Ice Beam"]
        assert not check(validator, analyzer, "Toxic", single, ["Water"]).should_cull

    def test_second_pivot_culled(self, validator, analyzer):
        moves = ["U-turn", "Volt Switch", "Thunderbolt", "Recover"]
        assert check(validator, analyzer, "Volt Switch", moves, ["Electric"]).should_cull

        single = ["Volt Switch", "Thunderbolt", "Recover", "Hydro Pump"]
        assert not check(validator, analyzer, "Volt Switch", single, ["Electric"]).should_cull


class TestSetupCompatibility:
    """Tests for moves that clash with a committed setup type."""

    @pytest.mark.parametrize("setup_move", ["Swords Dance", "Shell Smash"])
    def test_priority_on_physical_or_mixed_setup(self, validator, analyzer, setup_move):
        moves = [setup_move, "Aqua Jet", "Waterfall", "Earthquake"]
        assert check(validator, analyzer, "Aqua Jet", moves, ["Water"]).should_cull

    def test_priority_without_setup_kept(self, validator, analyzer):
        moves = ["Aqua Jet", "Waterfall", "Earthquake", "Recover"]
        assert not check(validator, analyzer, "Aqua Jet", moves, ["Water"]).should_cull

    def test_special_attacks_on_physical_setup(self, validator, analyzer):
        """A third special attack next to Swords Dance is culled."""
        moves = ["Swords Dance", "Thunderbolt", "Ice Beam", "Flamethrower"]
        assert check(validator, analyzer, "Thunderbolt", moves, ["Electric"]).should_cull

        two = ["Swords Dance", "Earthquake", "Thunderbolt", "Ice Beam"]
        assert not check(validator, analyzer, "Thunderbolt", two, ["Electric"]).should_cull

    def test_physical_attacks_on_special_setup(self, validator, analyzer):
        moves = ["Calm Mind", "Earthquake", "Close Combat", "Waterfall"]
        assert check(validator, analyzer, "Earthquake", moves, ["Water"]).should_cull


class TestRequiredCoverage:
    """Tests for the whole-set coverage check."""

    def test_no_stab_no_priority_no_knock_off(self, validator, analyzer):
        """A set without STAB, priority or Knock Off lacks coverage."""
        moves = ["Earthquake", "Surf", "Ice Beam", "Toxic"]
        counter = analyzer.analyze(moves, ["Fire"], [])
        assert counter.get("stab") == 0
        assert not validator.has_required_coverage(counter, moves, ["Fire"])

    def test_knock_off_exempts(self, validator, analyzer):
        moves = ["Earthquake", "Surf", "Knock Off", "Toxic"]
        counter = analyzer.analyze(moves, ["Fire"], [])
        assert validator.has_required_coverage(counter, moves, ["Fire"])

    def test_stab_passes(self, validator, analyzer):
        moves = ["Flamethrower", "Surf", "Ice Beam", "Toxic"]
        counter = analyzer.analyze(moves, ["Fire"], [])
        assert validator.has_required_coverage(counter, moves, ["Fire"])

    def test_unsupported_physical_setup(self, validator, analyzer):
        moves = ["Swords Dance", "Outrage", "Recover", "Protect"]
        counter = analyzer.analyze(moves, ["Dragon"], [])
        assert not validator.has_required_coverage(counter, moves, ["Dragon"])
