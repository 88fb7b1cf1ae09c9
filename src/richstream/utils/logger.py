"""Minimal logging utilities for richstream.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from richstream.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering stream")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "richstream." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("colors")
        >>> logger.name
        'richstream.colors'
    """
    if not (name == "richstream" or name.startswith("richstream.")):
        name = f"richstream.{name}"
    return logging.getLogger(name)
