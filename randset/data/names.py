"""Identifier normalization shared by every lookup table."""

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def to_id(name: str) -> str:
    """Normalize a display name into a lookup id.

    Lowercases and drops everything that is not a letter or digit, so
    "U-turn", "u turn" and "UTurn" all map to "uturn".
    """
    if not name:
        return ""
    return _NON_ALNUM.sub("", name.lower())


# Species whose hyphen is part of the base name rather than a forme suffix
HYPHENATED_SPECIES = frozenset((
    "hooh", "porygonz", "jangmoo", "hakamoo", "kommoo",
    "wochien", "chienpao", "tinglu", "chiyu", "mrmime", "mimejr",
))


def base_forme(species: str) -> str:
    """Normalized base species ("Rotom-Wash" -> "rotom")."""
    species_id = to_id(species)
    if species_id in HYPHENATED_SPECIES or "-" not in species:
        return species_id
    return to_id(species.split("-", 1)[0])
