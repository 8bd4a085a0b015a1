"""Set generation orchestrator.

Samples four moves from a candidate pool, culling and resampling until the
moveset passes per-move validation and the whole-set coverage check, then
picks ability, item, nature and stat spreads for the committed moves.

Example:
    generator = SetGenerator()
    rng = np.random.default_rng(42)
    candidate = CandidateInput(
        species="Garchomp",
        types=["Dragon", "Ground"],
        moves=["Earthquake", "Outrage", "Swords Dance", "Stealth Rock", "Fire Fang"],
        abilities=["Rough Skin"],
    )
    generated = generator.generate_set(candidate, rng)
    print(generated.to_showdown_paste())
"""

from typing import List, Optional

import numpy as np
from loguru import logger

from randset.builder.ability_selector import NO_ABILITY, AbilitySelector
from randset.builder.analyzer import MoveInfoResolver, MovesetAnalyzer
from randset.builder.counter import MoveCounter
from randset.builder.item_selector import ItemSelector
from randset.builder.move_validator import MoveValidator
from randset.builder.nature_selector import NatureSelector
from randset.builder.stat_optimizer import (
    StatOptimizer, balanced_effort_values, clamp_effort_values, perfect_individual_values,
)
from randset.core.config_schema import RandSetConfig
from randset.data import move_classes as mc
from randset.data.names import base_forme, to_id
from randset.data.natures import FALLBACK_NATURE
from randset.data.registry import MoveRegistry, SpeciesRegistry
from randset.data.schemas import CandidateInput, GeneratedSet


DEFAULT_TYPE = "Normal"
FALLBACK_ITEM = "Leftovers"
BASIC_MOVES = ("Tackle", "Growl", "Quick Attack", "Scratch")

GENDERLESS_SPECIES = frozenset((
    "magnemite", "magneton", "magnezone", "voltorb", "electrode",
    "staryu", "starmie", "porygon", "porygon2", "porygonz",
    "beldum", "metang", "metagross", "bronzor", "bronzong",
    "ditto", "shedinja", "rotom", "baltoy", "claydol", "cryogonal",
    "golett", "golurk", "klink", "klang", "klinklang", "carbink",
    "regirock", "regice", "registeel", "regigigas", "regieleki", "regidrago",
))


def _without_duplicates(moves: List[str]) -> List[str]:
    """Drop repeated moves (by normalized id), keeping first occurrence."""
    seen = {}
    for move in moves:
        seen.setdefault(to_id(move), move)
    return list(seen.values())


def _conflicts_with(move: str, held: List[str]) -> bool:
    move_id = to_id(move)
    held_ids = [to_id(m) for m in held]
    for pair in mc.HARD_CONFLICTS:
        if move_id in pair and any(other in pair and other != move_id for other in held_ids):
            return True
    return False


class SetGenerator:
    """Generates one competitive set per call.

    The generator holds only configuration and read-only collaborators, so
    a single instance can serve many calls. All randomness comes from the
    generator passed to `generate_set`.

    Args:
        config: Root configuration (generation bounds, item chances)
        species_registry: Resolves types, base abilities and base stats
        move_registry: Structured move data consulted before the static table
    """

    def __init__(
        self,
        config: Optional[RandSetConfig] = None,
        species_registry: Optional[SpeciesRegistry] = None,
        move_registry: Optional[MoveRegistry] = None,
    ):
        self.config = config or RandSetConfig()
        self.species_registry = species_registry

        resolver = MoveInfoResolver(move_registry)
        self.analyzer = MovesetAnalyzer(resolver)
        self.validator = MoveValidator(resolver)
        self.ability_selector = AbilitySelector(
            weights=self.config.generation.ability_weights,
            species_registry=species_registry,
        )
        self.item_selector = ItemSelector(self.config.items)
        self.nature_selector = NatureSelector()
        self.stat_optimizer = StatOptimizer()

    # ====================
    # Public API
    # ====================

    def generate_set(
        self,
        candidate: CandidateInput,
        rng: Optional[np.random.Generator] = None,
    ) -> GeneratedSet:
        """Generate a complete set for one candidate.

        Args:
            candidate: Validated candidate pool
            rng: Random source; a fresh unseeded generator when omitted

        Returns:
            Immutable GeneratedSet with exactly four distinct moves
        """
        if rng is None:
            rng = np.random.default_rng()

        species = candidate.species
        types = self.resolve_types(species, candidate.types)
        moves = _without_duplicates(candidate.moves)

        if not moves:
            logger.warning(f"No usable moves for {species}, returning fallback set")
            return self.fallback_set(candidate)

        abilities = list(candidate.abilities)
        if not abilities and self.species_registry is not None:
            abilities = self.species_registry.resolve_base_abilities(species)

        held = self.select_moves(moves, types, abilities, species, rng)
        return self.finalize(candidate, held, types, abilities, rng)

    def resolve_types(self, species: str, types: List[str]) -> List[str]:
        """Candidate types, or the registry's when absent or only the default."""
        if (not types or types == [DEFAULT_TYPE]) and self.species_registry is not None:
            fetched = self.species_registry.resolve_types(species)
            if fetched:
                return list(fetched)
        return list(types) if types else [DEFAULT_TYPE]

    # ====================
    # Move selection
    # ====================

    def select_moves(
        self,
        moves: List[str],
        types: List[str],
        abilities: List[str],
        species: str,
        rng: np.random.Generator,
    ) -> List[str]:
        """Sample, validate and retry until four moves survive.

        Each pass culls at most one move. Exhausting `max_attempts` falls
        through to backfill from the original pool and then basic moves.

        Returns:
            Four distinct moves in the order they were committed
        """
        gen_cfg = self.config.generation
        target = gen_cfg.moves_per_set
        pool = list(moves)
        rejected: List[str] = []
        held: List[str] = []

        attempts = 0
        while attempts < gen_cfg.max_attempts:
            attempts += 1

            while len(held) < target and pool:
                held.append(pool.pop(int(rng.integers(len(pool)))))
            while len(held) < target and rejected:
                held.append(rejected.pop(int(rng.integers(len(rejected)))))

            counter = self.analyzer.analyze(held, types, abilities)

            culled = self._first_culled(held, counter, types, abilities, species)
            if culled is not None:
                held.remove(culled)
                rejected.append(culled)
                continue

            if len(held) < target:
                continue

            if not self.validator.has_required_coverage(counter, held, types, counter.setup_type):
                evicted = held.pop(0)
                rejected.append(evicted)
                logger.debug(f"{species}: coverage check failed, evicted {evicted}")
                continue

            logger.debug(f"{species}: moveset {held} accepted after {attempts} attempts")
            return held

        logger.debug(f"{species}: no valid moveset in {gen_cfg.max_attempts} attempts, backfilling")
        return self._backfill(held, moves, species, rng)

    def _first_culled(
        self,
        held: List[str],
        counter: MoveCounter,
        types: List[str],
        abilities: List[str],
        species: str,
    ) -> Optional[str]:
        for move in held:
            decision = self.validator.should_cull(move, counter, held, types, abilities, species)
            if decision.should_cull:
                logger.debug(f"{species}: culled {move} ({decision.reason})")
                return move
        return None

    def _backfill(
        self,
        held: List[str],
        moves: List[str],
        species: str,
        rng: np.random.Generator,
    ) -> List[str]:
        target = self.config.generation.moves_per_set
        held = list(held)

        draws = 0
        while len(held) < target and draws < self.config.generation.backfill_draws:
            draws += 1
            move = moves[int(rng.integers(len(moves)))]
            if to_id(move) in (to_id(m) for m in held) or _conflicts_with(move, held):
                continue
            held.append(move)

        if len(held) < target:
            logger.warning(f"Could not generate {target} moves for {species}, padding with basics")
            for basic in BASIC_MOVES:
                if len(held) >= target:
                    break
                if to_id(basic) not in (to_id(m) for m in held):
                    held.append(basic)
        return held

    # ====================
    # Finalization
    # ====================

    def finalize(
        self,
        candidate: CandidateInput,
        moves: List[str],
        types: List[str],
        abilities: List[str],
        rng: np.random.Generator,
    ) -> GeneratedSet:
        """Pick ability, item, nature and spreads for a committed moveset."""
        species = candidate.species
        role = candidate.role
        counter = self.analyzer.analyze(moves, types, abilities)

        ability = self.ability_selector.select(abilities, counter, moves, types, species, rng)
        item = self.item_selector.select(moves, counter, ability, types, species, role, rng)
        nature = self.nature_selector.select(counter, role)

        evs = self.stat_optimizer.build_effort_values(counter, role)
        ivs = self.stat_optimizer.build_individual_values(counter)

        if not role and self.species_registry is not None:
            base_stats = self.species_registry.resolve_base_stats(species)
            if base_stats and "hp" in base_stats:
                evs["hp"] = self.stat_optimizer.optimize_hp_value(
                    evs["hp"], counter, base_stats["hp"], candidate.level, ivs["hp"]
                )

        if self.config.generation.legacy_ev_limit:
            evs = clamp_effort_values(evs)

        generated = GeneratedSet(
            species=species,
            level=candidate.level,
            ability=ability,
            item=item,
            moves=moves,
            evs=evs,
            ivs=ivs,
            nature=nature.display_name,
            gender=self.determine_gender(species, rng),
            role=role,
        )
        logger.debug(f"Generated {species}: {moves} @ {item} ({ability}, {nature.display_name})")
        return generated

    def determine_gender(self, species: str, rng: np.random.Generator) -> str:
        if base_forme(species) in GENDERLESS_SPECIES:
            return "Genderless"
        return "Male" if rng.integers(2) == 0 else "Female"

    def fallback_set(self, candidate: CandidateInput) -> GeneratedSet:
        """Placeholder set for a candidate with no usable moves."""
        return GeneratedSet(
            species=candidate.species,
            level=candidate.level,
            ability=candidate.abilities[0] if candidate.abilities else NO_ABILITY,
            item=candidate.items[0] if candidate.items else FALLBACK_ITEM,
            moves=list(BASIC_MOVES),
            evs=balanced_effort_values(),
            ivs=perfect_individual_values(),
            nature=FALLBACK_NATURE.display_name,
            gender="Genderless",
            role=candidate.role,
        )
