"""Hydra utilities for loading and managing configurations.

This module provides helpers for loading configs with Hydra
and converting them to typed dataclasses.
"""

from pathlib import Path
from typing import Optional, Union

from omegaconf import DictConfig, OmegaConf
from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from loguru import logger

from .config_schema import (
    RandSetConfig, GenerationConfig, ItemConfig, TeamConfig, LoggingConfig,
)
from .exceptions import ConfigError


def get_config_dir() -> Path:
    """Get the config directory path."""
    possible_paths = [
        Path(__file__).parent.parent.parent / "config",  # From randset/core/
        Path.cwd() / "config",
    ]

    for path in possible_paths:
        if path.exists():
            return path.resolve()

    raise ConfigError(
        f"Could not find config directory. Searched: {possible_paths}"
    )


def load_config(
    config_name: str = "default",
    overrides: Optional[list] = None,
    return_dict: bool = False,
    config_dir: Optional[Path] = None,
) -> Union[RandSetConfig, DictConfig]:
    """Load configuration using Hydra.

    Args:
        config_name: Name of the config file (without .yaml)
        overrides: List of config overrides (e.g., ["generation.generation=7"])
        return_dict: If True, return DictConfig instead of dataclass
        config_dir: Directory to search instead of the default one

    Returns:
        Loaded configuration as RandSetConfig or DictConfig
    """
    config_dir = Path(config_dir) if config_dir else get_config_dir()

    # Clear any existing Hydra instance
    if GlobalHydra.instance().is_initialized():
        GlobalHydra.instance().clear()

    with initialize_config_dir(config_dir=str(config_dir.resolve()), version_base="1.3"):
        cfg = compose(config_name=config_name, overrides=overrides or [])

    if return_dict:
        return cfg

    return dict_to_config(cfg)


def dict_to_config(cfg: DictConfig) -> RandSetConfig:
    """Convert DictConfig to structured RandSetConfig.

    Missing keys fall back to the dataclass defaults.

    Args:
        cfg: OmegaConf DictConfig

    Returns:
        Structured RandSetConfig dataclass
    """
    # Helper to safely get nested values
    def get(d, *keys, default=None):
        for key in keys:
            if isinstance(d, (dict, DictConfig)) and key in d:
                d = d[key]
            else:
                return default
        return d if d is not None else default

    gen_defaults = GenerationConfig()
    generation = GenerationConfig(
        max_attempts=int(get(cfg, "generation", "max_attempts", default=gen_defaults.max_attempts)),
        backfill_draws=int(get(cfg, "generation", "backfill_draws", default=gen_defaults.backfill_draws)),
        moves_per_set=int(get(cfg, "generation", "moves_per_set", default=gen_defaults.moves_per_set)),
        ability_weights=[
            float(w) for w in get(cfg, "generation", "ability_weights", default=gen_defaults.ability_weights)
        ],
        generation=int(get(cfg, "generation", "generation", default=gen_defaults.generation)),
        default_level=int(get(cfg, "generation", "default_level", default=gen_defaults.default_level)),
    )

    item_defaults = ItemConfig()
    items = ItemConfig(
        choice_scarf_chance=float(get(cfg, "items", "choice_scarf_chance", default=item_defaults.choice_scarf_chance)),
        wallbreaker_life_orb_chance=float(
            get(cfg, "items", "wallbreaker_life_orb_chance", default=item_defaults.wallbreaker_life_orb_chance)
        ),
        weakness_policy_chance=float(
            get(cfg, "items", "weakness_policy_chance", default=item_defaults.weakness_policy_chance)
        ),
    )

    team = TeamConfig(
        team_size=int(get(cfg, "team", "team_size", default=6)),
        species_clause=bool(get(cfg, "team", "species_clause", default=True)),
    )

    log_defaults = LoggingConfig()
    logging = LoggingConfig(
        level=get(cfg, "logging", "level", default=log_defaults.level),
        format=get(cfg, "logging", "format", default=log_defaults.format),
        file=get(cfg, "logging", "file", default=None),
        rotation=get(cfg, "logging", "rotation", default=log_defaults.rotation),
    )

    return RandSetConfig(
        generation=generation,
        items=items,
        team=team,
        logging=logging,
        seed=get(cfg, "seed", default=None),
        debug=bool(get(cfg, "debug", default=False)),
    )


def save_config(cfg: Union[RandSetConfig, DictConfig], path: Path):
    """Save configuration to YAML file.

    Args:
        cfg: Configuration to save
        path: Output path
    """
    if isinstance(cfg, RandSetConfig):
        cfg = OmegaConf.structured(cfg)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    OmegaConf.save(cfg, path)
    logger.info(f"Saved config to {path}")


def print_config(cfg: Union[RandSetConfig, DictConfig]):
    """Pretty-print configuration."""
    if isinstance(cfg, RandSetConfig):
        cfg = OmegaConf.structured(cfg)
    print(OmegaConf.to_yaml(cfg))


# Global config instance
_global_config: Optional[RandSetConfig] = None


def get_global_config() -> RandSetConfig:
    """Get the global configuration instance.

    Falls back to the dataclass defaults when no config directory exists.

    Returns:
        Global RandSetConfig instance
    """
    global _global_config
    if _global_config is None:
        try:
            _global_config = load_config()
        except ConfigError as e:
            logger.debug(f"{e}; using built-in defaults")
            _global_config = RandSetConfig()
    return _global_config


def set_global_config(cfg: Optional[RandSetConfig]):
    """Set the global configuration instance.

    Args:
        cfg: Configuration to set as global (None resets it)
    """
    global _global_config
    _global_config = cfg
