"""Set generation engine and team assembly."""

from .counter import MoveCounter, SetupType, CullDecision
from .analyzer import MovesetAnalyzer, MoveInfoResolver
from .move_validator import MoveValidator
from .ability_selector import AbilitySelector
from .item_selector import ItemSelector
from .nature_selector import NatureSelector
from .stat_optimizer import StatOptimizer
from .set_generator import SetGenerator
from .team import Team, TeamBuilder, TeamData

__all__ = [
    "MoveCounter",
    "SetupType",
    "CullDecision",
    "MovesetAnalyzer",
    "MoveInfoResolver",
    "MoveValidator",
    "AbilitySelector",
    "ItemSelector",
    "NatureSelector",
    "StatOptimizer",
    "SetGenerator",
    "Team",
    "TeamBuilder",
    "TeamData",
]
