"""Minimal logging utilities for minilang.

Wraps the standard library logging so every logger lives under the
"minilang." namespace.

Example:
    >>> from minilang.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning file")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name, prefixed with "minilang."."""
    if not (name == "minilang" or name.startswith("minilang.")):
        name = f"minilang.{name}"
    return logging.getLogger(name)
