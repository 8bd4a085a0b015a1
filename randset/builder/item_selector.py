"""Held item selection.

Four tiers are tried in order (high, medium, low, default); the first
tier that returns an item wins.
"""

from typing import Callable, List, Optional, Sequence

import numpy as np
from loguru import logger

from randset.builder.counter import MoveCounter, SetupType
from randset.builder.roles import is_bulky_role, role_has
from randset.core.config_schema import ItemConfig
from randset.data import move_classes as mc
from randset.data.names import to_id
from randset.data.type_chart import is_weak_to


# ====================
# Species items
# ====================

PLATES = {
    "fighting": "Fist Plate", "flying": "Sky Plate", "poison": "Toxic Plate",
    "ground": "Earth Plate", "rock": "Stone Plate", "bug": "Insect Plate",
    "ghost": "Spooky Plate", "steel": "Iron Plate", "fire": "Flame Plate",
    "water": "Splash Plate", "grass": "Meadow Plate", "electric": "Zap Plate",
    "psychic": "Mind Plate", "ice": "Icicle Plate", "dragon": "Draco Plate",
    "dark": "Dread Plate", "fairy": "Pixie Plate",
}

DRIVES = {
    "burn": "Burn Drive", "chill": "Chill Drive",
    "douse": "Douse Drive", "shock": "Shock Drive",
}

SPECIES_ITEMS = {
    "pikachu": "Light Ball",
    "cubone": "Thick Club",
    "marowak": "Thick Club",
    "marowakalola": "Thick Club",
    "marowakalolatotem": "Thick Club",
    "farfetchd": "Leek",
    "farfetchdgalar": "Leek",
    "sirfetchd": "Leek",
    "clamperl": "DeepSeaTooth",
    "ditto": "Choice Scarf",
    "dialga": "Adamant Orb",
    "dialgaorigin": "Adamant Orb",
    "palkia": "Lustrous Orb",
    "palkiaorigin": "Lustrous Orb",
    "giratina": "Griseous Orb",
    "giratinaorigin": "Griseous Orb",
    "groudon": "Red Orb",
    "groudonprimal": "Red Orb",
    "kyogre": "Blue Orb",
    "kyogreprimal": "Blue Orb",
    "latios": "Soul Dew",
    "latias": "Soul Dew",
    "latiosmega": "Soul Dew",
    "latiasmega": "Soul Dew",
}

NOT_FULLY_EVOLVED = frozenset((
    "bulbasaur", "ivysaur", "charmander", "charmeleon", "squirtle", "wartortle",
    "pichu", "cleffa", "igglybuff", "togepi", "togetic", "azurill", "wynaut",
    "budew", "chingling", "bonsly", "munchlax", "riolu", "mantyke", "porygon2",
    "chansey", "scyther", "onix", "rhydon", "tangela", "electabuzz", "magmar",
    "dusclops", "roselia", "murkrow", "misdreavus", "gligar", "sneasel", "piloswine",
))

OFFENSIVE_ROLE_WORDS = ("setup", "sweeper", "attacker", "wallbreaker")


def species_item(species: str, types: Sequence[str]) -> Optional[str]:
    """Item a species is built around, if any."""
    species_id = to_id(species)
    first_type = types[0].lower() if types else "normal"

    if species_id.startswith("arceus"):
        forme = species_id[len("arceus"):]
        return PLATES.get(forme) or PLATES.get(first_type)
    if species_id.startswith("silvally"):
        forme = species_id[len("silvally"):] or first_type
        return f"{forme.title()} Memory" if forme in PLATES else None
    if species_id.startswith("genesect"):
        return DRIVES.get(species_id[len("genesect"):])
    return SPECIES_ITEMS.get(species_id)


class ItemSelector:
    """Picks a held item from the final moveset, ability, role and species.

    Args:
        config: Probabilities for the random branches
    """

    def __init__(self, config: Optional[ItemConfig] = None):
        self.config = config or ItemConfig()

    def select(
        self,
        moves: Sequence[str],
        counter: MoveCounter,
        ability: str,
        types: Sequence[str],
        species: str,
        role: Optional[str],
        rng: np.random.Generator,
    ) -> str:
        """Run the tier cascade.

        Args:
            moves: Final moves
            counter: Counter for the final moves
            ability: Chosen ability
            types: Creature types
            species: Species name
            role: Role tag or None
            rng: Random generator for the chance-based branches

        Returns:
            Item name
        """
        move_ids = [to_id(m) for m in moves]
        tiers: List[Callable[[], Optional[str]]] = [
            lambda: self.high_priority_item(move_ids, ability, types, species, role),
            lambda: self.medium_priority_item(move_ids, counter, role, rng),
            lambda: self.low_priority_item(counter, types, role, rng),
        ]
        for tier in tiers:
            item = tier()
            if item:
                return item
        return self.default_item(counter, role)

    # ====================
    # Tiers
    # ====================

    def high_priority_item(
        self,
        move_ids: Sequence[str],
        ability: str,
        types: Sequence[str],
        species: str,
        role: Optional[str],
    ) -> Optional[str]:
        item = species_item(species, types)
        if item:
            return item

        if role == "AV Pivot":
            return "Assault Vest"
        if role and ("Booster Energy" in role or role == "Fast Bulky Setup"):
            return "Booster Energy"
        if role == "Tera Blast user" and "terablast" in move_ids:
            return "Expert Belt"

        if to_id(species) in NOT_FULLY_EVOLVED:
            return "Eviolite"

        if "geomancy" in move_ids:
            return "Power Herb"
        if "fling" in move_ids:
            return "Iron Ball"

        if to_id(ability) == "unburden":
            return "Sitrus Berry"

        return None

    def medium_priority_item(
        self,
        move_ids: Sequence[str],
        counter: MoveCounter,
        role: Optional[str],
        rng: np.random.Generator,
    ) -> Optional[str]:
        physical = counter.get("physicalpool")
        special = counter.get("specialpool")
        damaging = counter.damaging_count
        all_damaging = damaging >= len(move_ids)

        if role_has(role, "wallbreaker") and damaging >= 3:
            if all_damaging and rng.random() >= self.config.wallbreaker_life_orb_chance:
                return self.choice_item(counter, rng)
            return "Life Orb"
        if role_has(role, "fast attacker") and all_damaging:
            return "Choice Scarf"
        if is_bulky_role(role, include_defensive=True):
            return None

        if counter.setup_type is not SetupType.NONE:
            return "Life Orb" if damaging >= 3 else None

        if all_damaging and not any(m in mc.CHOICE_INCOMPATIBLE for m in move_ids):
            if counter.get("priority") == 0 and rng.random() < self.config.choice_scarf_chance:
                return "Choice Scarf"
            if physical > special:
                return "Choice Band"
            if special > physical:
                return "Choice Specs"

        if counter.get("status") == 0 and damaging >= 3:
            return "Assault Vest"
        if physical > 0 and special > 0:
            return "Life Orb"
        return None

    def low_priority_item(
        self,
        counter: MoveCounter,
        types: Sequence[str],
        role: Optional[str],
        rng: np.random.Generator,
    ) -> Optional[str]:
        rock_weak = is_weak_to("rock", list(types))
        if is_bulky_role(role, include_defensive=True):
            return "Heavy-Duty Boots" if rock_weak else None

        if rock_weak:
            return "Heavy-Duty Boots"
        if counter.get("hazards") > 0:
            return "Focus Sash"
        if counter.get("stab") > 0 and counter.damaging_count >= 3:
            return "Expert Belt"
        if counter.setup_type is not SetupType.NONE and rng.random() < self.config.weakness_policy_chance:
            return "Weakness Policy"
        return None

    def default_item(self, counter: MoveCounter, role: Optional[str]) -> str:
        if is_bulky_role(role, include_defensive=True) or role_has(role, "support"):
            return "Leftovers"
        if role_has(role, *OFFENSIVE_ROLE_WORDS):
            return "Life Orb"
        if counter.get("recovery") > 0 or counter.damaging_count <= 2:
            return "Leftovers"
        return "Life Orb"

    def choice_item(self, counter: MoveCounter, rng: np.random.Generator) -> str:
        """Scarf, Band or Specs by category dominance."""
        physical = counter.get("physicalpool")
        special = counter.get("specialpool")
        if counter.get("priority") == 0 and rng.random() < self.config.choice_scarf_chance:
            return "Choice Scarf"
        if physical > special:
            return "Choice Band"
        if special > physical:
            return "Choice Specs"
        logger.trace("Even physical/special split, defaulting to Choice Scarf")
        return "Choice Scarf"
