"""Moveset analysis.

Resolves each move's category/type/power and folds the whole candidate
moveset into a `MoveCounter` that the validators and selectors read.
"""

from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from loguru import logger

from randset.builder.counter import MoveCounter, SetupType, merge_setup
from randset.data import move_classes as mc
from randset.data.moves import MoveCategory, MoveData, get_move_data
from randset.data.names import to_id
from randset.data.registry import MoveRegistry


# ====================
# Name heuristics
# ====================

# Checked in order; first match wins
_TYPE_HINTS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("water", "aqua", "hydro"), "water"),
    (("thunder", "electric", "volt", "shock"), "electric"),
    (("fire", "flame", "blaze", "heat"), "fire"),
    (("ice", "frost", "freeze", "blizzard"), "ice"),
    (("leaf", "seed", "vine", "petal"), "grass"),
    (("psychic", "psych", "confusion"), "psychic"),
    (("dark", "bite", "crunch"), "dark"),
    (("dragon", "draco"), "dragon"),
    (("earth", "dig", "ground"), "ground"),
    (("rock", "stone"), "rock"),
    (("steel", "iron", "metal"), "steel"),
    (("punch", "kick", "combat", "chop"), "fighting"),
    (("poison", "toxic", "acid", "sludge"), "poison"),
    (("bug", "sting"), "bug"),
    (("shadow", "phantom", "hex", "curse"), "ghost"),
    (("wing", "aerial", "gust", "peck"), "flying"),
    (("fairy", "charm", "moon", "play"), "fairy"),
)

_SPECIAL_HINTS = ("beam", "bolt", "pulse", "blast", "ball", "wave", "burst", "breath", "spout", "storm")
_PHYSICAL_HINTS = ("punch", "kick", "claw", "fang", "strike", "slash")

GUESSED_POWER = 80


def guess_type_from_name(move_id: str) -> str:
    """Best-effort type from substrings of a move id, "normal" when nothing matches."""
    for hints, move_type in _TYPE_HINTS:
        if any(h in move_id for h in hints):
            return move_type
    return "normal"


def guess_category_from_name(move_id: str) -> Optional[MoveCategory]:
    """Category implied by the move name, or None if the name says nothing."""
    if any(h in move_id for h in _SPECIAL_HINTS):
        return MoveCategory.SPECIAL
    if any(h in move_id for h in _PHYSICAL_HINTS):
        return MoveCategory.PHYSICAL
    return None


class MoveInfoResolver:
    """Layered move lookup: registry, static table, name heuristics, default."""

    def __init__(self, registry: Optional[MoveRegistry] = None):
        self.registry = registry

    def resolve(self, move: str) -> MoveData:
        if self.registry is not None:
            info = self.registry.lookup_move_info(move)
            if info is not None:
                # registries may report display-case types ("Ground")
                if info.move_type != info.move_type.lower():
                    info = replace(info, move_type=info.move_type.lower())
                return info

        known = get_move_data(move)
        if known is not None:
            return known

        move_id = to_id(move)
        category = guess_category_from_name(move_id)
        if category is not None:
            logger.debug(f"Guessed {category.value} for unknown move {move!r}")
            return MoveData(move, GUESSED_POWER, guess_type_from_name(move_id), category)

        return MoveData(move, 0, "", MoveCategory.STATUS)


# ====================
# Analyzer
# ====================

def _setup_direction(move_id: str) -> SetupType:
    if move_id in mc.PHYSICAL_SETUP:
        return SetupType.PHYSICAL
    if move_id in mc.SPECIAL_SETUP:
        return SetupType.SPECIAL
    if move_id in mc.MIXED_SETUP:
        return SetupType.MIXED
    if move_id in mc.SPEED_SETUP:
        return SetupType.SPEED
    return SetupType.NONE


_SETUP_KEYS = {
    SetupType.PHYSICAL: "physicalsetup",
    SetupType.SPECIAL: "specialsetup",
    SetupType.MIXED: "mixedsetup",
    SetupType.SPEED: "speedsetup",
}

# (move class, counter key) pairs counted for every move
_CLASS_KEYS = (
    (mc.HAZARDS, "hazards"),
    (mc.RECOVERY, "recovery"),
    (mc.PRIORITY, "priority"),
    (mc.RECOIL, "recoil"),
    (mc.DRAIN, "drain"),
    (mc.PIVOT, "pivot"),
    (mc.SOUND, "sound"),
    (mc.HAZARD_REMOVAL, "hazardremoval"),
    (mc.SCREENS, "screens"),
    (mc.STATUS_INFLICTION, "statusmove"),
    (mc.PROTECT, "protect"),
    # ability synergy flags
    (mc.MULTI_HIT, "skilllink"),
    (mc.PUNCH, "ironfist"),
    (mc.BITE, "strongjaw"),
    (mc.PULSE, "megalauncher"),
    (mc.CONTRARY, "contrary"),
    (mc.SHEER_FORCE, "sheerforce"),
    (mc.CONTACT, "toughclaws"),
    (mc.RECOIL, "reckless"),
)

# Moves the validator looks up individually
_TRACKED_MOVES = frozenset(
    ("bellydrum", "substitute", "rest", "sleeptalk", "knockoff")
) | mc.HAZARDS


class MovesetAnalyzer:
    """Builds a `MoveCounter` for a candidate moveset."""

    def __init__(self, resolver: Optional[MoveInfoResolver] = None):
        self.resolver = resolver or MoveInfoResolver()

    def analyze(
        self,
        moves: Iterable[str],
        types: List[str],
        abilities: List[str],
    ) -> MoveCounter:
        """Count the properties of `moves` for a creature of `types`.

        Args:
            moves: Candidate move names
            types: The creature's types
            abilities: Candidate abilities (gates the technician and
                adaptability flags)

        Returns:
            Fresh MoveCounter
        """
        moves = list(moves)
        counter = MoveCounter()
        type_ids = {t.lower() for t in types}
        ability_ids = {to_id(a) for a in abilities}

        for move in moves:
            move_id = to_id(move)
            info = self.resolver.resolve(move)
            counter.add(info.category.value)

            if info.is_damaging:
                counter.mark_damaging(move_id)
                if info.move_type:
                    counter.add(info.move_type)
                if info.move_type in type_ids or move_id in mc.NO_STAB:
                    counter.add("stab")
                    if "adaptability" in ability_ids:
                        counter.add("adaptability")
                if info.category is MoveCategory.PHYSICAL:
                    counter.add("physicalpool")
                else:
                    counter.add("specialpool")
                if "technician" in ability_ids and 0 < info.power <= 60:
                    counter.add("technician")

            direction = _setup_direction(move_id)
            if direction is not SetupType.NONE:
                counter.add("setup")
                counter.add(_SETUP_KEYS[direction])
                counter.setup_type = merge_setup(counter.setup_type, direction)

            for members, key in _CLASS_KEYS:
                if move_id in members:
                    counter.add(key)

            if move_id in _TRACKED_MOVES:
                counter.add(move_id)

        logger.trace(f"Analyzed {moves}: {counter}")
        return counter
