"""Core infrastructure for randset."""

from .config_schema import (
    RandSetConfig,
    GenerationConfig,
    ItemConfig,
    TeamConfig,
    LoggingConfig,
)
from .exceptions import RandSetError, ConfigError, SetPoolError
from .logging_utils import setup_logging

__all__ = [
    "RandSetConfig",
    "GenerationConfig",
    "ItemConfig",
    "TeamConfig",
    "LoggingConfig",
    "RandSetError",
    "ConfigError",
    "SetPoolError",
    "setup_logging",
]
