"""Nature selection from moveset shape and role."""

from typing import Optional

from loguru import logger

from randset.builder.counter import MoveCounter, SetupType
from randset.builder.roles import is_bulky_role, role_has
from randset.data.natures import NEUTRAL_REPLACEMENT, Nature


def _shape(counter: MoveCounter):
    physical = counter.get("physicalpool")
    special = counter.get("specialpool")
    is_physical = physical > special
    is_special = special > physical
    is_mixed = physical > 0 and special > 0 and abs(physical - special) <= 1
    return physical, special, is_physical, is_special, is_mixed


class NatureSelector:
    """Deterministic nature cascade."""

    def select(self, counter: MoveCounter, role: Optional[str] = None) -> Nature:
        """Pick a nature for the final moveset.

        Args:
            counter: Counter for the final moveset
            role: Role tag or None

        Returns:
            Selected Nature
        """
        nature = self._by_role(counter, role) if role else None
        if nature is None:
            nature = self._by_moveset(counter)

        if not self.is_valid(nature, counter):
            logger.debug(f"{nature.display_name} conflicts with moveset, using {NEUTRAL_REPLACEMENT.display_name}")
            return NEUTRAL_REPLACEMENT
        return nature

    def _by_role(self, counter: MoveCounter, role: str) -> Optional[Nature]:
        _, _, is_physical, is_special, _ = _shape(counter)
        if is_bulky_role(role):
            if is_physical:
                return Nature.IMPISH
            if is_special:
                return Nature.CALM
            return Nature.BOLD
        if role_has(role, "support"):
            return Nature.JOLLY if is_physical else Nature.TIMID
        if role_has(role, "fast attacker"):
            return Nature.JOLLY if is_physical else Nature.TIMID
        if role_has(role, "wallbreaker"):
            return Nature.ADAMANT if is_physical else Nature.MODEST
        if role_has(role, "setup", "sweeper"):
            return Nature.JOLLY if is_physical else Nature.TIMID
        return None

    def _by_moveset(self, counter: MoveCounter) -> Nature:
        physical, _, is_physical, is_special, is_mixed = _shape(counter)
        setup = counter.setup_type
        has_priority = counter.get("priority") > 0

        if setup is SetupType.PHYSICAL or is_physical:
            return Nature.ADAMANT if has_priority else Nature.JOLLY
        if setup is SetupType.SPECIAL or is_special:
            return Nature.MODEST if has_priority else Nature.TIMID
        if is_mixed or setup is SetupType.MIXED:
            return Nature.HASTY
        if counter.damaging_count <= 1:
            return Nature.BOLD
        return Nature.JOLLY if physical > 0 else Nature.TIMID

    def is_valid(self, nature: Nature, counter: MoveCounter) -> bool:
        """Reject natures that boost an unused stat or cut the main attacking stat."""
        if nature.is_neutral:
            return True

        physical = counter.get("physicalpool")
        special = counter.get("specialpool")

        if nature.boosted == "atk" and physical == 0:
            return False
        if nature.boosted == "spa" and special == 0:
            return False
        if nature.reduced == "atk" and physical > special:
            return False
        if nature.reduced == "spa" and special > physical:
            return False
        return True
