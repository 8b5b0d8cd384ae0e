"""Minimal logging utilities for luaflow.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from luaflow.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("segmented %d lines", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under "luaflow".

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("mymodule").name
        'luaflow.mymodule'
    """
    if not (name == "luaflow" or name.startswith("luaflow.")):
        name = f"luaflow.{name}"
    return logging.getLogger(name)
