"""Reference data, schemas and preset set pools."""

from .schemas import CandidateInput, GeneratedSet
from .natures import Nature, get_nature
from .moves import MoveCategory, MoveData, get_move_data
from .registry import SpeciesRegistry, MoveRegistry, StaticRegistry
from .set_pool import SetPool

__all__ = [
    "CandidateInput",
    "GeneratedSet",
    "Nature",
    "get_nature",
    "MoveCategory",
    "MoveData",
    "get_move_data",
    "SpeciesRegistry",
    "MoveRegistry",
    "StaticRegistry",
    "SetPool",
]
