"""Minimal logging utilities for hashlight.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from hashlight.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Loaded grammar %s", "source.ts")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "hashlight." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'hashlight.mymodule'
    """
    if not (name == "hashlight" or name.startswith("hashlight.")):
        name = f"hashlight.{name}"
    return logging.getLogger(name)
