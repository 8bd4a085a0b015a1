"""EV/IV spread construction and stat math."""

import math
from typing import Dict, Mapping, Optional

from loguru import logger

from randset.builder.counter import MoveCounter, SetupType, allows_physical, allows_special
from randset.builder.roles import is_bulky_role, role_has
from randset.data.natures import STATS, Nature
from randset.data.schemas import LEGACY_EV_TOTAL, MAX_EV, MAX_IV


BALANCED_EV = 85
EV_STEP = 4

# HP parity wanted per move, in priority order; later entries are tried
# when an earlier one has no reachable value
HP_PARITY_TARGETS = (
    ("stealthrock", lambda hp: hp % 2 == 1),
    ("substitute", lambda hp: hp % 4 == 0),
    ("bellydrum", lambda hp: hp % 2 == 0 and hp % 4 != 0),
)


# ====================
# Stat formulas
# ====================

def calculate_hp(base: int, iv: int, ev: int, level: int) -> int:
    """HP stat from base, IV, EV and level."""
    return math.floor((2 * base + iv + ev // 4) * level / 100) + level + 10


def calculate_stat(base: int, iv: int, ev: int, level: int, nature_multiplier: float = 1.0) -> int:
    """Non-HP stat from base, IV, EV, level and nature multiplier."""
    raw = math.floor((2 * base + iv + ev // 4) * level / 100) + 5
    return math.floor(raw * nature_multiplier)


def calculate_stats(
    base_stats: Mapping[str, int],
    evs: Mapping[str, int],
    ivs: Mapping[str, int],
    level: int,
    nature: Nature,
) -> Dict[str, int]:
    """All six final stats."""
    stats = {"hp": calculate_hp(base_stats["hp"], ivs["hp"], evs["hp"], level)}
    for stat in STATS[1:]:
        stats[stat] = calculate_stat(
            base_stats[stat], ivs[stat], evs[stat], level, nature.multiplier(stat)
        )
    return stats


# ====================
# Spread validation
# ====================

def is_valid_ev_spread(evs: Mapping[str, int], generation: int = 8) -> bool:
    """Every EV within 0-255; before generation 8 the total is capped at 510."""
    if any(not 0 <= evs.get(s, 0) <= MAX_EV for s in STATS):
        return False
    if generation < 8 and sum(evs.get(s, 0) for s in STATS) > LEGACY_EV_TOTAL:
        return False
    return True


def is_valid_iv_spread(ivs: Mapping[str, int]) -> bool:
    return all(0 <= ivs.get(s, 0) <= MAX_IV for s in STATS)


def balanced_effort_values() -> Dict[str, int]:
    return {s: BALANCED_EV for s in STATS}


def perfect_individual_values() -> Dict[str, int]:
    return {s: MAX_IV for s in STATS}


def clamp_effort_values(evs: Mapping[str, int], total: int = LEGACY_EV_TOTAL) -> Dict[str, int]:
    """Scale a spread down proportionally so it sums to at most `total`."""
    values = {s: min(MAX_EV, evs.get(s, 0)) for s in STATS}
    current = sum(values.values())
    if current <= total:
        return values
    scale = total / current
    return {s: int(v * scale) for s, v in values.items()}


# ====================
# Spread construction
# ====================

def _offense_stat(counter: MoveCounter, prefer_setup: bool = False) -> str:
    physical = counter.get("physicalpool")
    special = counter.get("specialpool")
    if prefer_setup and counter.setup_type is not SetupType.NONE:
        if allows_physical(counter.setup_type) and not allows_special(counter.setup_type):
            return "atk"
        if allows_special(counter.setup_type) and not allows_physical(counter.setup_type):
            return "spa"
    return "atk" if physical > special else "spa"


def _spread(**values: int) -> Dict[str, int]:
    spread = {s: 0 for s in STATS}
    spread.update(values)
    return spread


class StatOptimizer:
    """Builds EV/IV spreads for a finished moveset."""

    def build_effort_values(self, counter: MoveCounter, role: Optional[str] = None) -> Dict[str, int]:
        """EV spread from the role table, or 85 per stat without a role."""
        if not role:
            return balanced_effort_values()

        if is_bulky_role(role):
            return _spread(hp=252, **{"def": 252}, spd=4)
        if role_has(role, "fast attacker", "choice scarf", "wallbreaker"):
            return _spread(hp=4, spe=252, **{_offense_stat(counter): 252})
        if role_has(role, "setup", "sweeper"):
            return _spread(hp=4, spe=252, **{_offense_stat(counter, prefer_setup=True): 252})
        if role_has(role, "support", "pivot"):
            return _spread(hp=252, **{"def": 128}, spd=128)
        return _spread(hp=4, spe=252, **{_offense_stat(counter): 252})

    def build_individual_values(self, counter: MoveCounter) -> Dict[str, int]:
        """31 everywhere; Attack 0 on purely special sets to soften confusion and Foul Play."""
        ivs = perfect_individual_values()
        if counter.get("physicalpool") == 0 and counter.get("specialpool") > 0:
            ivs["atk"] = 0
        return ivs

    def optimize_hp_value(
        self,
        current_ev: int,
        counter: MoveCounter,
        base_hp: int,
        level: int,
        iv: int = MAX_IV,
    ) -> int:
        """Search HP EVs downward from 85 for a useful HP parity.

        Stealth Rock users want odd HP, Substitute users HP divisible by 4,
        Belly Drum users even HP not divisible by 4.

        Returns:
            The first matching EV value, or `current_ev` when nothing matches
            or no parity target applies
        """
        for key, target in HP_PARITY_TARGETS:
            if counter.get(key) == 0:
                continue
            ev = BALANCED_EV
            while ev > 0:
                if target(calculate_hp(base_hp, iv, ev, level)):
                    if ev != current_ev:
                        logger.debug(f"HP EVs {current_ev} -> {ev} for {key} parity")
                    return ev
                ev -= EV_STEP
        return current_ev
