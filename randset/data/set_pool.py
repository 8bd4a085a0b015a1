"""Pool of preset sets indexed by species."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np
from loguru import logger
from pydantic import ValidationError

from randset.core.exceptions import SetPoolError
from randset.data.names import to_id
from randset.data.schemas import GeneratedSet


class SetPool:
    """Ready-made sets to draw from instead of generating new ones.

    Sets are indexed by normalized species name, so lookups ignore case,
    spaces, hyphens and apostrophes.

    Example:
        pool = SetPool.from_json("data/sets.json")
        rng = np.random.default_rng(0)
        team = pool.random_team(6, rng)
        garchomp = pool.find("garchomp", rng)
    """

    def __init__(self, sets: Optional[Sequence[GeneratedSet]] = None):
        self._sets: List[GeneratedSet] = []
        self._by_species: Dict[str, List[GeneratedSet]] = {}
        if sets:
            self.load(sets)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "SetPool":
        """Load a pool from a JSON list of set records.

        Raises:
            SetPoolError: If the file is missing or is not a JSON list
        """
        path = Path(path)
        try:
            with open(path) as f:
                records = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SetPoolError(f"Cannot read set pool {path}: {e}") from e

        if not isinstance(records, list):
            raise SetPoolError(f"Set pool {path} must contain a JSON list")

        pool = cls()
        pool.load(cls._parse_records(records))
        return pool

    @staticmethod
    def _parse_records(records: List[Any]) -> List[GeneratedSet]:
        sets = []
        for i, record in enumerate(records):
            try:
                sets.append(GeneratedSet.model_validate(record))
            except ValidationError as e:
                logger.warning(f"Skipping invalid set #{i}: {e.error_count()} errors")
        return sets

    def load(self, sets: Sequence[GeneratedSet]) -> None:
        """Replace the pool contents with `sets`."""
        self._sets = []
        self._by_species = {}

        if not sets:
            logger.warning("No sets provided to pool")
            return

        for generated in sets:
            self._sets.append(generated)
            self._by_species.setdefault(generated.species_id, []).append(generated)

        logger.info(f"Set pool loaded {len(self._sets)} sets for {len(self._by_species)} species")

    # ====================
    # Draws
    # ====================

    def random_set(self, rng: np.random.Generator) -> Optional[GeneratedSet]:
        """Uniform draw from the whole pool, or None when empty."""
        if not self._sets:
            return None
        return self._sets[int(rng.integers(len(self._sets)))]

    def random_team(
        self,
        count: int,
        rng: np.random.Generator,
        strict: bool = False,
    ) -> List[GeneratedSet]:
        """Up to `count` distinct sets in random order.

        Args:
            count: Number of sets wanted
            rng: Random generator for the shuffle
            strict: Raise instead of returning fewer than `count` sets

        Raises:
            SetPoolError: In strict mode, if the pool holds fewer than `count` sets
        """
        if strict and len(self._sets) < count:
            raise SetPoolError(f"Requested {count} sets but pool holds {len(self._sets)}")
        if not self._sets:
            return []
        order = rng.permutation(len(self._sets))
        return [self._sets[int(i)] for i in order[:count]]

    def find(self, name: str, rng: np.random.Generator) -> Optional[GeneratedSet]:
        """Random set for a species, by exact then partial name match."""
        if not name:
            return None
        key = to_id(name)
        if not key:
            return None

        sets = self._by_species.get(key)
        if not sets:
            for species_id, candidates in self._by_species.items():
                if key in species_id or species_id in key:
                    logger.debug(f"Fuzzy match {name!r} -> {species_id}")
                    sets = candidates
                    break

        if not sets:
            return None
        return sets[int(rng.integers(len(sets)))]

    # ====================
    # Introspection
    # ====================

    def sets_for_species(self, name: str) -> List[GeneratedSet]:
        return list(self._by_species.get(to_id(name), []))

    def species_names(self) -> List[str]:
        return list(self._by_species)

    def statistics(self) -> Dict[str, Any]:
        """Pool size summary."""
        return {
            "total_sets": len(self._sets),
            "unique_species": len(self._by_species),
            "sets_per_species": {s: len(v) for s, v in self._by_species.items()},
        }

    @property
    def is_loaded(self) -> bool:
        return bool(self._sets)

    def __len__(self) -> int:
        return len(self._sets)
