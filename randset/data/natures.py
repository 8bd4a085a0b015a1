"""Nature catalog and lookup helpers."""

from enum import Enum
from typing import List, Optional

from randset.data.names import to_id


STATS = ("hp", "atk", "def", "spa", "spd", "spe")
NATURE_STATS = ("atk", "def", "spa", "spd", "spe")


class Nature(Enum):
    """Pokemon natures as (boosted stat, reduced stat).

    The five neutral natures boost and reduce the same stat.
    """
    HARDY = ("atk", "atk")
    LONELY = ("atk", "def")
    BRAVE = ("atk", "spe")
    ADAMANT = ("atk", "spa")
    NAUGHTY = ("atk", "spd")
    BOLD = ("def", "atk")
    DOCILE = ("def", "def")
    RELAXED = ("def", "spe")
    IMPISH = ("def", "spa")
    LAX = ("def", "spd")
    MODEST = ("spa", "atk")
    MILD = ("spa", "def")
    QUIET = ("spa", "spe")
    SERIOUS = ("spa", "spa")
    RASH = ("spa", "spd")
    CALM = ("spd", "atk")
    GENTLE = ("spd", "def")
    SASSY = ("spd", "spe")
    CAREFUL = ("spd", "spa")
    BASHFUL = ("spd", "spd")
    TIMID = ("spe", "atk")
    HASTY = ("spe", "def")
    JOLLY = ("spe", "spa")
    NAIVE = ("spe", "spd")
    QUIRKY = ("spe", "spe")

    @property
    def display_name(self) -> str:
        return self.name.title()

    @property
    def boosted(self) -> str:
        return self.value[0]

    @property
    def reduced(self) -> str:
        return self.value[1]

    @property
    def is_neutral(self) -> bool:
        return self.value[0] == self.value[1]

    def multiplier(self, stat: str) -> float:
        """Stat multiplier this nature applies to `stat`."""
        if self.is_neutral:
            return 1.0
        if stat == self.boosted:
            return 1.1
        if stat == self.reduced:
            return 0.9
        return 1.0


# Used when a set cannot be built or a selected nature fails validation
FALLBACK_NATURE = Nature.HARDY
NEUTRAL_REPLACEMENT = Nature.SERIOUS


def get_nature(name: str) -> Optional[Nature]:
    """Look up a nature by display name (case insensitive)."""
    return Nature.__members__.get(to_id(name).upper())


def natures_boosting(stat: str) -> List[Nature]:
    """Non-neutral natures that raise `stat`."""
    return [n for n in Nature if not n.is_neutral and n.boosted == stat]


def natures_reducing(stat: str) -> List[Nature]:
    """Non-neutral natures that lower `stat`."""
    return [n for n in Nature if not n.is_neutral and n.reduced == stat]


def neutral_natures() -> List[Nature]:
    return [n for n in Nature if n.is_neutral]
