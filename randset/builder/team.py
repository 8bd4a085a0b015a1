"""Team assembly and composition tracking."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np
from loguru import logger

from randset.builder.set_generator import SetGenerator
from randset.core.config_schema import TeamConfig
from randset.data import move_classes as mc
from randset.data.names import base_forme, to_id
from randset.data.schemas import CandidateInput, GeneratedSet
from randset.data.set_pool import SetPool
from randset.data.type_chart import TYPES, is_weak_to, resists


WEATHER_ABILITIES = {
    "drizzle": "Rain",
    "primordialsea": "Rain",
    "drought": "Sun",
    "desolateland": "Sun",
    "orichalcumpulse": "Sun",
    "sandstream": "Sand",
    "snowwarning": "Snow",
}


def _bump(counts: Dict[str, int], key: str) -> None:
    counts[key] = counts.get(key, 0) + 1


# ====================
# Team composition
# ====================

@dataclass
class TeamData:
    """Running composition counters for a team under construction."""

    type_count: Dict[str, int] = field(default_factory=dict)
    type_combo_count: Dict[str, int] = field(default_factory=dict)
    base_formes: Dict[str, int] = field(default_factory=dict)
    features: Dict[str, int] = field(default_factory=dict)
    weaknesses: Dict[str, int] = field(default_factory=dict)
    resistances: Dict[str, int] = field(default_factory=dict)
    weather: Optional[str] = None

    def add_member(self, generated: GeneratedSet, types: Sequence[str]) -> None:
        """Fold one member's types, moves and ability into the counters."""
        types = list(types)
        for t in types:
            _bump(self.type_count, t)
        _bump(self.type_combo_count, "/".join(types))
        _bump(self.base_formes, base_forme(generated.species))

        for move in generated.moves:
            move_id = to_id(move)
            if move_id in mc.HAZARDS:
                _bump(self.features, move_id)
            if move_id in mc.HAZARD_REMOVAL:
                _bump(self.features, "hazardremoval")
            if move_id in mc.SCREENS:
                _bump(self.features, "screens")
            if move_id in mc.PIVOT:
                _bump(self.features, "pivot")

        weather = WEATHER_ABILITIES.get(to_id(generated.ability))
        if weather and self.weather is None:
            self.weather = weather

        defend = [t.lower() for t in types]
        for attack in TYPES:
            if is_weak_to(attack, defend):
                _bump(self.weaknesses, attack)
            elif resists(attack, defend):
                _bump(self.resistances, attack)

    def has_base_forme(self, species: str) -> bool:
        return self.base_formes.get(base_forme(species), 0) > 0

    def has_feature(self, feature: str) -> bool:
        return self.features.get(feature, 0) > 0

    def weakness_count(self, attack_type: str) -> int:
        return self.weaknesses.get(attack_type.lower(), 0)

    def resistance_count(self, attack_type: str) -> int:
        return self.resistances.get(attack_type.lower(), 0)


@dataclass
class Team:
    """An assembled team and its composition data."""

    members: List[GeneratedSet] = field(default_factory=list)
    data: TeamData = field(default_factory=TeamData)

    def __len__(self) -> int:
        return len(self.members)

    @property
    def species(self) -> List[str]:
        return [m.species for m in self.members]

    def has_duplicate_species(self) -> bool:
        """Check if team violates species clause."""
        formes = [base_forme(s) for s in self.species]
        return len(formes) != len(set(formes))

    def to_showdown_paste(self) -> str:
        """Convert entire team to Showdown paste format."""
        return "\n\n".join(m.to_showdown_paste() for m in self.members)


# ====================
# Builder
# ====================

class TeamBuilder:
    """Assembles teams from candidate pools or a preset set pool.

    Args:
        generator: Set generator used for candidate pools
        config: Team size and species clause
    """

    def __init__(
        self,
        generator: Optional[SetGenerator] = None,
        config: Optional[TeamConfig] = None,
    ):
        self.generator = generator or SetGenerator()
        self.config = config or self.generator.config.team

    def build(
        self,
        candidates: Sequence[CandidateInput],
        rng: np.random.Generator,
        size: Optional[int] = None,
    ) -> Team:
        """Generate a team from candidates visited in random order.

        Candidates sharing a base forme with an existing member are skipped
        when the species clause is on.

        Args:
            candidates: Per-species candidate pools
            rng: Random generator shared by ordering and set generation
            size: Team size override

        Returns:
            Team with at most `size` members
        """
        size = size or self.config.team_size
        team = Team()

        for index in rng.permutation(len(candidates)):
            if len(team) >= size:
                break
            candidate = candidates[int(index)]
            if self.config.species_clause and team.data.has_base_forme(candidate.species):
                logger.debug(f"Skipping {candidate.species}: base forme already on team")
                continue

            generated = self.generator.generate_set(candidate, rng)
            types = self.generator.resolve_types(candidate.species, candidate.types)
            self._add(team, generated, types)

        self._report(team, size)
        return team

    def build_from_pool(
        self,
        pool: SetPool,
        rng: np.random.Generator,
        size: Optional[int] = None,
    ) -> Team:
        """Draw a team of preset sets, honouring the species clause."""
        size = size or self.config.team_size
        team = Team()

        for generated in pool.random_team(len(pool), rng):
            if len(team) >= size:
                break
            if self.config.species_clause and team.data.has_base_forme(generated.species):
                continue
            types = self.generator.resolve_types(generated.species, [])
            self._add(team, generated, types)

        self._report(team, size)
        return team

    def _add(self, team: Team, generated: GeneratedSet, types: List[str]) -> None:
        team.members.append(generated)
        team.data.add_member(generated, types)

    def _report(self, team: Team, size: int) -> None:
        if len(team) < size:
            logger.warning(f"Built team of {len(team)}/{size}: not enough distinct species")
        else:
            logger.info(f"Built team: {', '.join(team.species)}")
