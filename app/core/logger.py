"""
Logger configuration.

Configures the loguru logger once at application startup.
"""

import sys

from loguru import logger

from app.core.config import settings


def setup_logger(level: str | None = None) -> None:
    """Configure loguru with a single console handler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to ``settings.LOG_LEVEL``.
    """
    level = (level or settings.LOG_LEVEL).upper()

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )
    logger.debug(f"Logger initialized with level={level}")
