"""Aggregate moveset counter and the small enums around it."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional


class SetupType(str, Enum):
    """Committed stat-boosting direction of a moveset."""
    NONE = ""
    PHYSICAL = "Physical"
    SPECIAL = "Special"
    MIXED = "Mixed"
    SPEED = "Speed"


def allows_physical(setup: SetupType) -> bool:
    return setup in (SetupType.PHYSICAL, SetupType.MIXED)


def allows_special(setup: SetupType) -> bool:
    return setup in (SetupType.SPECIAL, SetupType.MIXED)


def is_offensive(setup: SetupType) -> bool:
    """Physical, special or mixed; speed-only setup is not offensive."""
    return setup not in (SetupType.NONE, SetupType.SPEED)


def merge_setup(current: SetupType, new: SetupType) -> SetupType:
    """Fold another setup move's direction into the committed one.

    The first setup move decides. Physical plus special becomes mixed.
    Speed never overrides an offensive direction.
    """
    if current is SetupType.NONE:
        return new
    if new is current or new is SetupType.SPEED:
        return current
    if {current, new} == {SetupType.PHYSICAL, SetupType.SPECIAL}:
        return SetupType.MIXED
    return current


class MoveCounter:
    """Property counts for one candidate moveset.

    Absent keys read as zero. Built fresh on every analysis pass.
    """

    def __init__(self):
        self._counts: Dict[str, int] = {}
        self.setup_type: SetupType = SetupType.NONE
        # Insertion ordered so iteration is reproducible
        self._damaging: Dict[str, None] = {}

    def get(self, key: str) -> int:
        return self._counts.get(key, 0)

    def add(self, key: str, amount: int = 1) -> None:
        self._counts[key] = self._counts.get(key, 0) + amount

    def has(self, key: str) -> bool:
        return self.get(key) > 0

    def mark_damaging(self, move_id: str) -> None:
        self._damaging[move_id] = None

    @property
    def damaging_moves(self) -> List[str]:
        return list(self._damaging)

    @property
    def damaging_count(self) -> int:
        return len(self._damaging)

    def keys(self) -> Iterator[str]:
        return iter(self._counts)

    def as_dict(self) -> Dict[str, int]:
        return dict(self._counts)

    def __repr__(self) -> str:
        return (
            f"MoveCounter(setup={self.setup_type.name}, "
            f"damaging={self.damaging_moves}, counts={self._counts})"
        )


class CullAction(str, Enum):
    KEEP = "keep"
    KEEP_SETUP = "keep_setup"
    CULL = "cull"


@dataclass(frozen=True)
class CullDecision:
    """Outcome of validating one move. `reason` is diagnostic only."""
    action: CullAction
    reason: Optional[str] = None

    @property
    def should_cull(self) -> bool:
        return self.action is CullAction.CULL

    @classmethod
    def keep(cls) -> "CullDecision":
        return cls(CullAction.KEEP)

    @classmethod
    def keep_setup(cls) -> "CullDecision":
        return cls(CullAction.KEEP_SETUP)

    @classmethod
    def cull(cls, reason: str) -> "CullDecision":
        return cls(CullAction.CULL, reason)
