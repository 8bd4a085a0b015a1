"""Reference-data collaborators consumed by the generator.

The generator only reads from these. `StaticRegistry` is an in-memory
implementation suitable for tests and for callers that already hold the
data in dictionaries.
"""

from typing import Any, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from loguru import logger

from randset.data.moves import MoveCategory, MoveData
from randset.data.names import to_id


@runtime_checkable
class SpeciesRegistry(Protocol):
    """Species reference data."""

    def resolve_types(self, species: str) -> List[str]:
        ...

    def resolve_base_abilities(self, species: str) -> List[str]:
        ...

    def resolve_base_stats(self, species: str) -> Optional[Dict[str, int]]:
        ...


@runtime_checkable
class MoveRegistry(Protocol):
    """Structured move reference data."""

    def lookup_move_info(self, move: str) -> Optional[MoveData]:
        ...


class StaticRegistry:
    """Species and move registry backed by plain dictionaries.

    Example:
        registry = StaticRegistry.from_dict({
            "species": {"Garchomp": {"types": ["Dragon", "Ground"],
                                     "abilities": ["Rough Skin"],
                                     "base_stats": {"hp": 108, ...}}},
            "moves": {"Earthquake": {"category": "Physical",
                                     "type": "Ground", "power": 100}},
        })
    """

    def __init__(
        self,
        species: Optional[Mapping[str, Mapping[str, Any]]] = None,
        moves: Optional[Mapping[str, MoveData]] = None,
    ):
        self._species: Dict[str, Mapping[str, Any]] = {
            to_id(name): entry for name, entry in (species or {}).items()
        }
        self._moves: Dict[str, MoveData] = {
            to_id(name): data for name, data in (moves or {}).items()
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StaticRegistry":
        """Build a registry from a nested dictionary (e.g. parsed JSON).

        Malformed move entries are skipped with a warning.
        """
        moves: Dict[str, MoveData] = {}
        for name, entry in data.get("moves", {}).items():
            try:
                moves[name] = MoveData(
                    name=name,
                    power=int(entry.get("power", 0)),
                    move_type=str(entry.get("type", "")).lower(),
                    category=MoveCategory(str(entry.get("category", "status")).lower()),
                )
            except (ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping malformed move entry {name!r}: {e}")
        return cls(species=data.get("species", {}), moves=moves)

    def __len__(self) -> int:
        return len(self._species)

    # ====================
    # SpeciesRegistry
    # ====================

    def resolve_types(self, species: str) -> List[str]:
        entry = self._species.get(to_id(species), {})
        return [t.title() for t in entry.get("types", [])]

    def resolve_base_abilities(self, species: str) -> List[str]:
        entry = self._species.get(to_id(species), {})
        return list(entry.get("abilities", []))

    def resolve_base_stats(self, species: str) -> Optional[Dict[str, int]]:
        entry = self._species.get(to_id(species), {})
        stats = entry.get("base_stats")
        return dict(stats) if stats else None

    # ====================
    # MoveRegistry
    # ====================

    def lookup_move_info(self, move: str) -> Optional[MoveData]:
        return self._moves.get(to_id(move))
