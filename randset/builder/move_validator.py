"""Per-move cull rules and the whole-set coverage check."""

from typing import Iterable, List, Optional, Set

from loguru import logger

from randset.builder.analyzer import MoveInfoResolver
from randset.builder.counter import (
    CullDecision, MoveCounter, SetupType, is_offensive,
)
from randset.data import move_classes as mc
from randset.data.moves import MoveCategory
from randset.data.names import to_id


# Minimum same-category damaging moves backing a setup move
MIN_SETUP_SUPPORT = 2

# Opposite-category damaging moves tolerated alongside a committed setup
MAX_OFF_CATEGORY_MOVES = 2


def _better_present(move_id: str, preference: tuple, accepted: Set[str]) -> bool:
    """Whether a move ranked above `move_id` in `preference` is already accepted."""
    if move_id not in preference:
        return False
    rank = preference.index(move_id)
    return any(other in accepted for other in preference[:rank])


class MoveValidator:
    """Decides which moves of a candidate moveset to keep.

    Args:
        resolver: Move lookup used for the category of damaging moves
    """

    def __init__(self, resolver: Optional[MoveInfoResolver] = None):
        self.resolver = resolver or MoveInfoResolver()

    def should_cull(
        self,
        move: str,
        counter: MoveCounter,
        accepted: Iterable[str],
        types: List[str],
        abilities: List[str],
        species: str,
    ) -> CullDecision:
        """Validate one accepted move against the rest of the moveset.

        Args:
            move: Move being checked
            counter: Counter for the current accepted moveset
            accepted: Every move currently held (including `move`)
            types: Creature types
            abilities: Candidate abilities
            species: Species name

        Returns:
            CullDecision; only `should_cull` matters for control flow
        """
        move_id = to_id(move)
        held = {to_id(m) for m in accepted}
        setup = counter.setup_type

        if move_id == mc.STAB_EXEMPT_SIGNATURE:
            return CullDecision.keep()

        decision = self._check_setup_move(move_id, counter, held)
        if decision is not None:
            return decision

        # Hazards
        if move_id in mc.HAZARDS and _better_present(move_id, mc.HAZARD_PREFERENCE, held):
            return CullDecision.cull("stronger hazard already present")

        # Sleep cycling
        if move_id == "rest" and "sleeptalk" not in held:
            return CullDecision.cull("rest without sleep talk")
        if move_id == "sleeptalk" and "rest" not in held:
            return CullDecision.cull("sleep talk without rest")

        if move_id == "substitute":
            if "bellydrum" in held:
                return CullDecision.cull("substitute with belly drum")
            if counter.get("recoil") > 0:
                return CullDecision.cull("substitute with recoil move")

        if move_id in mc.STATUS_INFLICTION:
            if is_offensive(setup):
                return CullDecision.cull("status move on offensive setup")
            if counter.get("statusmove") > 1:
                return CullDecision.cull("more than one status move")

        if move_id in mc.SETUP_INCOMPATIBLE_PRIORITY and setup in (SetupType.PHYSICAL, SetupType.MIXED):
            return CullDecision.cull("priority move on physical setup")

        if move_id in mc.VALIDATED_PIVOT:
            if setup in (SetupType.PHYSICAL, SetupType.MIXED):
                return CullDecision.cull("pivot move on physical setup")
            if counter.get("pivot") > 1:
                return CullDecision.cull("more than one pivot move")

        if move_id in mc.PROTECT:
            if setup is not SetupType.NONE or counter.get("recovery") == 0:
                return CullDecision.cull("protect without recovery")

        if move_id in mc.HAZARD_REMOVAL:
            if _better_present(move_id, mc.REMOVAL_PREFERENCE, held):
                return CullDecision.cull("preferred hazard removal present")

        if move_id in mc.SCREENS:
            if is_offensive(setup):
                return CullDecision.cull("screen on offensive setup")
            if move_id in mc.SCREEN_PAIR:
                partner = mc.SCREEN_PAIR[1] if move_id == mc.SCREEN_PAIR[0] else mc.SCREEN_PAIR[0]
                if partner not in held:
                    return CullDecision.cull("screen without its partner")

        if move_id in counter.damaging_moves:
            decision = self._check_off_category(move, counter, setup)
            if decision is not None:
                return decision

        return CullDecision.keep()

    def _check_setup_move(
        self, move_id: str, counter: MoveCounter, held: Set[str]
    ) -> Optional[CullDecision]:
        physical = counter.get("physicalpool")
        special = counter.get("specialpool")
        damaging = counter.damaging_count

        if move_id in mc.PHYSICAL_SETUP:
            if move_id == "bellydrum" and "substitute" in held:
                return CullDecision.cull("belly drum with substitute")
            if physical < MIN_SETUP_SUPPORT:
                return CullDecision.cull("physical setup without physical attacks")
            return CullDecision.keep_setup()
        if move_id in mc.SPECIAL_SETUP:
            if special < MIN_SETUP_SUPPORT:
                return CullDecision.cull("special setup without special attacks")
            return CullDecision.keep_setup()
        if move_id in mc.MIXED_SETUP:
            if damaging < MIN_SETUP_SUPPORT:
                return CullDecision.cull("mixed setup without attacks")
            return CullDecision.keep_setup()
        if move_id in mc.SPEED_SETUP:
            if counter.get("setup") > 1 or damaging < MIN_SETUP_SUPPORT:
                return CullDecision.cull("speed setup with other setup or few attacks")
            return CullDecision.keep_setup()
        return None

    def _check_off_category(
        self, move: str, counter: MoveCounter, setup: SetupType
    ) -> Optional[CullDecision]:
        category = self.resolver.resolve(move).category
        if (
            setup is SetupType.PHYSICAL
            and category is MoveCategory.SPECIAL
            and counter.get("specialpool") > MAX_OFF_CATEGORY_MOVES
        ):
            return CullDecision.cull("special attack on physical setup")
        if (
            setup is SetupType.SPECIAL
            and category is MoveCategory.PHYSICAL
            and counter.get("physicalpool") > MAX_OFF_CATEGORY_MOVES
        ):
            return CullDecision.cull("physical attack on special setup")
        return None

    def has_required_coverage(
        self,
        counter: MoveCounter,
        accepted: Iterable[str],
        types: List[str],
        setup_type: Optional[SetupType] = None,
    ) -> bool:
        """Whole-set viability check.

        A set needs STAB, or failing that a priority move or Knock Off.
        A committed physical or special setup needs two attacks to back it.
        """
        held = {to_id(m) for m in accepted}
        setup = counter.setup_type if setup_type is None else setup_type

        if counter.get("stab") == 0:
            if counter.get("priority") > 0 or mc.STAB_EXEMPT_SIGNATURE in held:
                return True
            logger.debug(f"No STAB, priority or Knock Off in {sorted(held)}")
            return False

        if setup is SetupType.PHYSICAL and counter.get("physicalpool") < MIN_SETUP_SUPPORT:
            return False
        if setup is SetupType.SPECIAL and counter.get("specialpool") < MIN_SETUP_SUPPORT:
            return False

        return True
