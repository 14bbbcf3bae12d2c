"""Logging setup for maze_search."""

import logging
from typing import Optional

from maze_search.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure root logging for applications embedding the engine.

    Args:
        level: Log level name. Defaults to the configured log_level.

    Returns:
        The package logger.
    """
    if level is None:
        level = get_settings().log_level

    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
    logger = logging.getLogger("maze_search")
    logger.setLevel(level.upper())
    return logger
