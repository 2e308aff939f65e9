"""Shared utilities for marklite.

- logger: get_logger for namespaced logging
"""

from marklite.utils.logger import get_logger

__all__ = [
    "get_logger",
]
