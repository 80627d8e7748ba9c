"""Logging helpers for verbfmt.

All verbfmt loggers live under the "verbfmt" namespace. The library only
emits DEBUG records and never configures handlers; applications opt in with
``logging.getLogger("verbfmt").setLevel(logging.DEBUG)``.

Example:
    >>> from verbfmt.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Compiling format prefix=%r", "%")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "verbfmt"

# Silence "no handler" warnings for applications that never configure logging.
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the verbfmt namespace.

    Args:
        name: Logger name (typically __name__); prefixed with "verbfmt."
            unless it already belongs to the namespace

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'verbfmt.mymodule'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
