"""
Preflight Logging Configuration

Logs go to stderr so the console report on stdout stays clean.
"""

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "keystone_preflight"


def is_debug_mode() -> bool:
    """Check whether PREFLIGHT_DEBUG asks for verbose logging."""
    return os.environ.get("PREFLIGHT_DEBUG", "").lower() in ("1", "true", "yes")


def setup_logging(level: Optional[int] = None) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        level: Logging level (default: DEBUG if PREFLIGHT_DEBUG, else WARNING)

    Returns:
        Configured logger
    """
    debug = is_debug_mode()
    if level is None:
        level = logging.DEBUG if debug else logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if debug or level <= logging.DEBUG:
        log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    else:
        log_format = "%(message)s"

    handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a logger under the package namespace.

    Args:
        name: Logger name (prefixed with 'keystone_preflight.' if needed)

    Returns:
        Logger instance
    """
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
