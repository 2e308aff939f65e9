"""Minimal logging utilities for marklite.

Example:
    >>> from marklite.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "marklite." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'marklite.mymodule'
    """
    if not (name == "marklite" or name.startswith("marklite.")):
        name = f"marklite.{name}"
    return logging.getLogger(name)
