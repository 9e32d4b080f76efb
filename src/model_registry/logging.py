"""
Logger configuration for the model registry.
"""

import sys
from typing import Optional

from loguru import logger

from model_registry.config import LOG_LEVEL


def setup_logger(level: Optional[str] = None):
    """Configure the loguru logger.

    Args:
        level: Log level name. Defaults to LOG_LEVEL from config.

    Returns:
        Configured logger instance
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level or LOG_LEVEL,
        format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )
    return logger
