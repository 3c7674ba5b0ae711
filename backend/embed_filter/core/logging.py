"""Loguru sink configuration."""
from __future__ import annotations
import sys

from loguru import logger

from embed_filter.core.config import LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> None:
    logger.remove()
    logger.add(
        sys.stdout,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} - {message}",
        backtrace=False,
        diagnose=False,
    )
