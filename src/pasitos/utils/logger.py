"""Minimal logging utilities for Pasitos.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from pasitos.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Backtracking")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "pasitos." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'pasitos.mymodule'
    """
    if not (name == "pasitos" or name.startswith("pasitos.")):
        name = f"pasitos.{name}"
    return logging.getLogger(name)
