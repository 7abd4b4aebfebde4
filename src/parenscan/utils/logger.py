"""Minimal logging utilities for Parenscan.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from parenscan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("scan failed")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "parenscan." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'parenscan.mymodule'
    """
    if not (name == "parenscan" or name.startswith("parenscan.")):
        name = f"parenscan.{name}"
    return logging.getLogger(name)
