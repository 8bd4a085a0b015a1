"""Pydantic schemas for generation input and output.

`CandidateInput` is the boundary where caller-supplied data is validated;
`GeneratedSet` is the immutable record the engine returns.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from randset.data.names import to_id
from randset.data.natures import STATS, get_nature


# ====================
# Constants
# ====================

NUM_MOVES = 4
MAX_EV = 255
MAX_IV = 31
LEGACY_EV_TOTAL = 510

Gender = Literal["Male", "Female", "Genderless"]

_STAT_LABELS = {
    "hp": "HP", "atk": "Atk", "def": "Def",
    "spa": "SpA", "spd": "SpD", "spe": "Spe",
}


def _check_spread(v: Dict[str, int], upper: int, label: str) -> Dict[str, int]:
    missing = [s for s in STATS if s not in v]
    extra = [k for k in v if k not in STATS]
    if missing or extra:
        raise ValueError(f"{label} must have exactly the keys {STATS}, got {sorted(v)}")
    for stat, value in v.items():
        if not 0 <= value <= upper:
            raise ValueError(f"{label} {stat}={value} outside [0, {upper}]")
    return {s: int(v[s]) for s in STATS}


# ====================
# Input
# ====================

class CandidateInput(BaseModel):
    """Per-species pool the generator draws from."""

    model_config = ConfigDict(extra="forbid")

    species: str = Field(..., min_length=1, max_length=50)
    level: int = Field(default=100, ge=1, le=100)
    moves: List[str] = Field(default_factory=list)
    abilities: List[str] = Field(default_factory=list)
    items: List[str] = Field(default_factory=list)
    types: List[str] = Field(default_factory=list, max_length=2)
    role: Optional[str] = None

    @field_validator("moves", "abilities", "items")
    @classmethod
    def drop_blank_entries(cls, v: List[str]) -> List[str]:
        """Strip whitespace and drop empty identifiers."""
        return [name.strip() for name in v if name and name.strip()]

    @field_validator("types")
    @classmethod
    def normalize_types(cls, v: List[str]) -> List[str]:
        """Title-case type names ("fire" -> "Fire")."""
        return [t.strip().title() for t in v if t and t.strip()]

    @field_validator("role")
    @classmethod
    def blank_role_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def species_id(self) -> str:
        return to_id(self.species)


# ====================
# Output
# ====================

class GeneratedSet(BaseModel):
    """A complete generated set. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    species: str = Field(..., min_length=1)
    level: int = Field(default=100, ge=1, le=100)
    ability: str
    item: str
    moves: List[str] = Field(..., min_length=NUM_MOVES, max_length=NUM_MOVES)
    evs: Dict[str, int]
    ivs: Dict[str, int]
    nature: str
    gender: Gender = "Genderless"
    role: Optional[str] = None

    @field_validator("moves")
    @classmethod
    def moves_are_distinct(cls, v: List[str]) -> List[str]:
        ids = [to_id(m) for m in v]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate moves in set: {v}")
        return v

    @field_validator("evs")
    @classmethod
    def validate_evs(cls, v: Dict[str, int]) -> Dict[str, int]:
        return _check_spread(v, MAX_EV, "EV")

    @field_validator("ivs")
    @classmethod
    def validate_ivs(cls, v: Dict[str, int]) -> Dict[str, int]:
        return _check_spread(v, MAX_IV, "IV")

    @model_validator(mode="after")
    def validate_nature(self) -> "GeneratedSet":
        if get_nature(self.nature) is None:
            raise ValueError(f"Unknown nature: {self.nature}")
        return self

    @property
    def species_id(self) -> str:
        return to_id(self.species)

    @property
    def ev_total(self) -> int:
        return sum(self.evs.values())

    def to_showdown_paste(self) -> str:
        """Convert to Pokemon Showdown paste format."""
        lines = []

        header = self.species
        if self.gender != "Genderless":
            header += f" ({self.gender[0]})"
        if self.item:
            header += f" @ {self.item}"
        lines.append(header)

        if self.ability:
            lines.append(f"Ability: {self.ability}")

        if self.level != 100:
            lines.append(f"Level: {self.level}")

        ev_parts = [f"{self.evs[s]} {_STAT_LABELS[s]}" for s in STATS if self.evs[s] > 0]
        if ev_parts:
            lines.append(f"EVs: {' / '.join(ev_parts)}")

        lines.append(f"{self.nature} Nature")

        iv_parts = [f"{self.ivs[s]} {_STAT_LABELS[s]}" for s in STATS if self.ivs[s] < MAX_IV]
        if iv_parts:
            lines.append(f"IVs: {' / '.join(iv_parts)}")

        for move in self.moves:
            lines.append(f"- {move}")

        return "\n".join(lines)
