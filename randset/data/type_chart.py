"""Type effectiveness chart (Gen 9).

Used for entry-hazard weakness checks during item selection and for
team weakness/resistance tracking.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping


TYPES = (
    "normal", "fire", "water", "electric", "grass", "ice",
    "fighting", "poison", "ground", "flying", "psychic", "bug",
    "rock", "ghost", "dragon", "dark", "steel", "fairy",
)

# attacking type -> (super effective against, resisted by, no effect on)
_MATCHUPS = {
    "normal":   ("", "rock steel", "ghost"),
    "fire":     ("grass ice bug steel", "fire water rock dragon", ""),
    "water":    ("fire ground rock", "water grass dragon", ""),
    "electric": ("water flying", "electric grass dragon", "ground"),
    "grass":    ("water ground rock", "fire grass poison flying bug dragon steel", ""),
    "ice":      ("grass ground flying dragon", "fire water ice steel", ""),
    "fighting": ("normal ice rock dark steel", "poison flying psychic bug fairy", "ghost"),
    "poison":   ("grass fairy", "poison ground rock ghost", "steel"),
    "ground":   ("fire electric poison rock steel", "grass bug", "flying"),
    "flying":   ("grass fighting bug", "electric rock steel", ""),
    "psychic":  ("fighting poison", "psychic steel", "dark"),
    "bug":      ("grass psychic dark", "fire fighting poison flying ghost steel fairy", ""),
    "rock":     ("fire ice flying bug", "fighting ground steel", ""),
    "ghost":    ("psychic ghost", "dark", "normal"),
    "dragon":   ("dragon", "steel", "fairy"),
    "dark":     ("psychic ghost", "fighting dark fairy", ""),
    "steel":    ("ice rock fairy", "fire water electric steel", ""),
    "fairy":    ("fighting dragon dark", "fire poison steel", ""),
}


def _build_chart() -> Mapping[str, Mapping[str, float]]:
    chart: Dict[str, Mapping[str, float]] = {}
    for attack, (strong, weak, immune) in _MATCHUPS.items():
        row: Dict[str, float] = {}
        for defend in strong.split():
            row[defend] = 2.0
        for defend in weak.split():
            row[defend] = 0.5
        for defend in immune.split():
            row[defend] = 0.0
        chart[attack] = MappingProxyType(row)
    return MappingProxyType(chart)


# effectiveness = TYPE_CHART[attack_type].get(defend_type, 1.0)
TYPE_CHART = _build_chart()


def get_type_effectiveness(attack_type: str, defend_types: List[str]) -> float:
    """Calculate type effectiveness multiplier.

    Args:
        attack_type: Type of the attacking move (case insensitive)
        defend_types: Defender's types (1-2)

    Returns:
        Effectiveness multiplier (0, 0.25, 0.5, 1, 2, or 4)
    """
    matchups = TYPE_CHART.get(attack_type.lower(), {})
    effectiveness = 1.0
    for def_type in defend_types:
        if not def_type:
            continue
        effectiveness *= matchups.get(def_type.lower(), 1.0)
    return effectiveness


def is_weak_to(attack_type: str, defend_types: List[str]) -> bool:
    """Whether the typing takes super effective damage from attack_type."""
    return get_type_effectiveness(attack_type, defend_types) > 1.0


def resists(attack_type: str, defend_types: List[str]) -> bool:
    """Whether the typing resists or is immune to attack_type."""
    return get_type_effectiveness(attack_type, defend_types) < 1.0
