"""Centralized logging helpers."""

import logging
from typing import Optional

_LOGGER_NAME = "codonkit"


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """
    Get a codonkit logger, attaching a stream handler on first use.

    Args:
        component: Sub-logger name, e.g. "orf" gives "codonkit.orf"

    Returns:
        Configured logger
    """
    name = f"{_LOGGER_NAME}.{component}" if component else _LOGGER_NAME
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger
