"""
Logging infrastructure.

Provides logging utilities for the ordering service.
"""
from typing import Optional
import logging

from ordering.settings import get_settings


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name or "ordering")
        level: Log level, defaults to ORDERING_LOG_LEVEL

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel((level or get_settings().log_level).upper())
    return logger


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach the handler to the package logger so every module logs through it."""
    return get_logger("ordering", level)
