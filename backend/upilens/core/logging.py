"""Logging configuration for the UPILens application."""

from __future__ import annotations

import logging
import sys

from upilens.core.config import get_settings
from upilens.core.exceptions import ConfigError


def setup_logging(level: int | None = None) -> logging.Logger:
    """Configure and return the application logger.

    Without an explicit level, LOG_LEVEL from the settings is used. An invalid
    LOG_LEVEL never stops the application from starting: the logger falls
    back to INFO and reports the problem as a warning.
    """
    logger = logging.getLogger("upilens")

    if logger.handlers:
        return logger

    config_problem = None
    if level is None:
        try:
            level = get_settings().log_level_value
        except ConfigError as e:
            level = logging.INFO
            config_problem = e.message

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    logger.addHandler(handler)
    logger.propagate = False

    if config_problem:
        logger.warning(f"{config_problem}, falling back to INFO")

    return logger


def get_logger(name: str = "upilens") -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


# Initialize default logger
logger = setup_logging()
