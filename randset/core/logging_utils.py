"""Loguru sink setup driven by LoggingConfig."""

import sys
from typing import Optional

from loguru import logger

from .config_schema import LoggingConfig


def setup_logging(cfg: Optional[LoggingConfig] = None, debug: bool = False) -> None:
    """Replace loguru's default sink with configured ones.

    Args:
        cfg: Logging configuration (defaults used when None)
        debug: Force DEBUG level regardless of cfg.level
    """
    cfg = cfg or LoggingConfig()
    level = "DEBUG" if debug else cfg.level

    logger.remove()
    logger.add(sys.stderr, level=level, format=cfg.format)
    if cfg.file:
        logger.add(cfg.file, level=level, rotation=cfg.rotation)

    logger.debug(f"Logging configured at {level}")
