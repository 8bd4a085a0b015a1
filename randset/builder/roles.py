"""Role tag matching.

Role tags are short archetype labels such as "Bulky Support" or
"Fast Attacker". Matching is case insensitive and word based, so
"Wallbreaker" is not read as a "Wall".
"""

import re
from typing import Optional

_BULKY = re.compile(r"\b(bulky|wall|tank)\b", re.IGNORECASE)
_BULKY_OR_DEFENSIVE = re.compile(r"\b(bulky|defensive|wall|tank)\b", re.IGNORECASE)


def role_has(role: Optional[str], *phrases: str) -> bool:
    """Whether any phrase appears in the role as whole words."""
    if not role:
        return False
    return any(
        re.search(rf"\b{re.escape(phrase)}\b", role, re.IGNORECASE) for phrase in phrases
    )


def is_bulky_role(role: Optional[str], include_defensive: bool = False) -> bool:
    if not role:
        return False
    pattern = _BULKY_OR_DEFENSIVE if include_defensive else _BULKY
    return pattern.search(role) is not None
