"""Ability culling, rating and weighted selection."""

from typing import Dict, List, Optional, Sequence

import numpy as np
from loguru import logger

from randset.builder.counter import MoveCounter, SetupType
from randset.data.names import to_id
from randset.data.registry import SpeciesRegistry


NO_ABILITY = "No Ability"

# ====================
# Ability tables
# ====================

BAD_ABILITIES = frozenset((
    "defeatist", "emergencyexit", "klutz", "minus", "plus",
    "slowstart", "truant", "wimpout",
))

ALWAYS_CULLED = frozenset(("immunity", "waterveil", "magmaarmor", "normalize"))

DOUBLES_ONLY = frozenset((
    "friendguard", "healer", "telepathy", "symbiosis", "receiver",
    "powerofalchemy", "battery", "powerspot",
))

# Ability -> counter key that must be nonzero for the ability to be useful
SYNERGY_FLAGS: Dict[str, str] = {
    "contrary": "contrary",
    "skilllink": "skilllink",
    "ironfist": "ironfist",
    "strongjaw": "strongjaw",
    "megalauncher": "megalauncher",
    "sheerforce": "sheerforce",
    "technician": "technician",
    "toughclaws": "toughclaws",
    "reckless": "reckless",
    "rockhead": "recoil",
    "adaptability": "stab",
    "liquidvoice": "sound",
    "punkrock": "sound",
}

PHYSICAL_DOUBLERS = frozenset(("hugepower", "purepower", "gorillatactics"))

SWITCH_RECOVERY = frozenset(("regenerator", "naturalcure"))

SNOWBALL_ABILITIES = frozenset(("soulheart", "beastboost"))

ABSORB_ABILITIES = frozenset((
    "waterabsorb", "voltabsorb", "flashfire", "sapsipper", "stormdrain", "lightningrod",
))

WEATHER_SETTERS = frozenset(("drizzle", "drought", "sandstream", "snowwarning"))

# Static rating plus per-flag bonus: ability -> (base, counter key, bonus per count)
_SCALED_RATINGS = {
    "hugepower": (100, "physicalpool", 10),
    "purepower": (100, "physicalpool", 10),
    "prankster": (80, "status", 5),
    "adaptability": (70, "stab", 10),
    "sheerforce": (65, "sheerforce", 10),
    "technician": (60, "technician", 10),
    "skilllink": (55, "skilllink", 15),
    "ironfist": (50, "ironfist", 10),
    "strongjaw": (50, "strongjaw", 10),
    "megalauncher": (50, "megalauncher", 10),
    "reckless": (50, "reckless", 10),
    "contrary": (45, "contrary", 20),
    "toughclaws": (40, "toughclaws", 5),
}

_FLAT_RATINGS = {
    "magicguard": 90,
    "regenerator": 90,
    "speedboost": 85,
}

BAD_RATING = -100
WEATHER_RATING = 75
ABSORB_RATING = 50
DEFAULT_RATING = 30


def _has_weather_synergy(ability_id: str, moves: Sequence[str], types: Sequence[str]) -> bool:
    type_ids = {t.lower() for t in types}
    move_ids = [to_id(m) for m in moves]
    if ability_id == "drizzle":
        return "water" in type_ids or any(
            key in m for m in move_ids for key in ("water", "surf", "hydro")
        )
    if ability_id == "drought":
        return "fire" in type_ids or any(
            key in m for m in move_ids for key in ("fire", "flame", "blaze")
        )
    if ability_id == "sandstream":
        return bool(type_ids & {"rock", "ground", "steel"})
    if ability_id == "snowwarning":
        return "ice" in type_ids
    return True


class AbilitySelector:
    """Filters candidate abilities and picks one with a rank-weighted draw.

    Args:
        weights: Draw mass for the first three ranks, best first
        species_registry: Used when a candidate lists no abilities
    """

    def __init__(
        self,
        weights: Optional[Sequence[float]] = None,
        species_registry: Optional[SpeciesRegistry] = None,
    ):
        self.weights = list(weights) if weights is not None else [0.66, 0.24, 0.10]
        self.species_registry = species_registry

    def should_cull(
        self,
        ability: str,
        counter: MoveCounter,
        moves: Sequence[str],
        types: Sequence[str],
        species: str,
    ) -> bool:
        """Whether `ability` is useless or harmful for this moveset."""
        ability_id = to_id(ability)
        setup = counter.setup_type

        if ability_id in BAD_ABILITIES or ability_id in ALWAYS_CULLED or ability_id in DOUBLES_ONLY:
            return True

        flag = SYNERGY_FLAGS.get(ability_id)
        if flag is not None and counter.get(flag) == 0:
            return True

        if ability_id in PHYSICAL_DOUBLERS:
            return counter.get("physicalpool") < 2
        if ability_id in SNOWBALL_ABILITIES:
            return setup is SetupType.NONE and counter.damaging_count < 2
        if ability_id in SWITCH_RECOVERY:
            return setup in (SetupType.PHYSICAL, SetupType.SPECIAL)
        if ability_id in WEATHER_SETTERS:
            return not _has_weather_synergy(ability_id, moves, types)
        if ability_id == "quickfeet":
            return counter.get("statusmove") == 0
        if ability_id == "moxie":
            return counter.damaging_count < 2

        return False

    def rate(self, ability: str, counter: MoveCounter) -> int:
        """Heuristic score; higher is better."""
        ability_id = to_id(ability)

        if ability_id in BAD_ABILITIES:
            return BAD_RATING
        if ability_id in _SCALED_RATINGS:
            base, key, bonus = _SCALED_RATINGS[ability_id]
            return base + bonus * counter.get(key)
        if ability_id in _FLAT_RATINGS:
            return _FLAT_RATINGS[ability_id]
        if ability_id in WEATHER_SETTERS:
            return WEATHER_RATING
        if ability_id in ABSORB_ABILITIES:
            return ABSORB_RATING
        if ability_id == "moxie" or ability_id in SNOWBALL_ABILITIES:
            return 60 if counter.setup_type is not SetupType.NONE else 40
        return DEFAULT_RATING

    def _pick_rank(self, available: int, rng: np.random.Generator) -> int:
        roll = rng.random()
        cumulative = 0.0
        for rank, weight in enumerate(self.weights):
            cumulative += weight
            if roll < cumulative:
                return rank if rank < available else 0
        return 0

    def select(
        self,
        abilities: List[str],
        counter: MoveCounter,
        moves: Sequence[str],
        types: Sequence[str],
        species: str,
        rng: np.random.Generator,
    ) -> str:
        """Choose one ability for the final moveset.

        Args:
            abilities: Candidate abilities (empty -> species base abilities)
            counter: Counter for the final moveset
            moves: Final moves
            types: Creature types
            species: Species name
            rng: Random generator for the rank draw

        Returns:
            Selected ability name
        """
        if not abilities and self.species_registry is not None:
            abilities = self.species_registry.resolve_base_abilities(species)
        if not abilities:
            return NO_ABILITY

        viable = [a for a in abilities if not self.should_cull(a, counter, moves, types, species)]
        if not viable:
            logger.debug(f"Every ability culled for {species}; using full list")
            viable = list(abilities)

        # sorted() is stable, ties keep candidate order
        ranked = sorted(viable, key=lambda a: self.rate(a, counter), reverse=True)
        choice = ranked[self._pick_rank(len(ranked), rng)]
        logger.debug(f"{species}: abilities ranked {ranked}, chose {choice}")
        return choice
