"""Minimal logging utilities for tuimark.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from tuimark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Writing line")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tuimark." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'tuimark.mymodule'
    """
    if not (name == "tuimark" or name.startswith("tuimark.")):
        name = f"tuimark.{name}"
    return logging.getLogger(name)
