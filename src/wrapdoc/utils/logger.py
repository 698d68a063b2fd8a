"""Minimal logging utilities for wrapdoc.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from wrapdoc.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "wrapdoc." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'wrapdoc.mymodule'
    """
    if not (name == "wrapdoc" or name.startswith("wrapdoc.")):
        name = f"wrapdoc.{name}"
    return logging.getLogger(name)
