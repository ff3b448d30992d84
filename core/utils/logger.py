"""Logging utility."""
import logging
import sys
from typing import Optional

from app.config import settings


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Set up and return a logger instance."""
    logger = logging.getLogger(name)

    if level is None:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))

    if not logger.handlers:
        logger.addHandler(handler)

    return logger


# Shared logger for the whole service
logger = setup_logger("bible_qa")
