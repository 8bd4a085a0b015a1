"""Configuration schemas for randset using Hydra and OmegaConf.

This module defines structured configs for the generation engine's
tunables: retry bounds, selection probabilities, team assembly and
logging.
"""

from dataclasses import dataclass, field
from typing import List, Optional


# ====================
# Generation Configuration
# ====================

@dataclass
class GenerationConfig:
    """Move sampling and set assembly configuration."""
    max_attempts: int = 100
    backfill_draws: int = 100
    moves_per_set: int = 4
    # Cumulative draw mass over the top three rated abilities
    ability_weights: List[float] = field(default_factory=lambda: [0.66, 0.24, 0.10])
    generation: int = 8
    default_level: int = 100

    @property
    def legacy_ev_limit(self) -> bool:
        """Whether the 510 total EV cap applies."""
        return self.generation < 8


# ====================
# Item Configuration
# ====================

@dataclass
class ItemConfig:
    """Probabilities used by the item cascade."""
    choice_scarf_chance: float = 0.3
    wallbreaker_life_orb_chance: float = 0.5
    weakness_policy_chance: float = 0.2


# ====================
# Team Configuration
# ====================

@dataclass
class TeamConfig:
    """Team assembly configuration."""
    team_size: int = 6
    species_clause: bool = True


# ====================
# Logging Configuration
# ====================

@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
    file: Optional[str] = None
    rotation: str = "100 MB"


# ====================
# Main Configuration
# ====================

@dataclass
class RandSetConfig:
    """Root configuration for randset."""
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    items: ItemConfig = field(default_factory=ItemConfig)
    team: TeamConfig = field(default_factory=TeamConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    seed: Optional[int] = None
    debug: bool = False
