"""Opt-in logger configuration for applications and scripts using listy.

Importing listy never installs handlers; library modules only create child
loggers of ``listy`` with ``logging.getLogger(__name__)``.
"""

import logging
import os
import sys

__all__ = ["setup_logger"]


def setup_logger(
    name: str = "listy",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        name: Logger name, ``listy`` by default so module loggers
            (``listy.functional.sort`` etc.) inherit its level.
        level: Log level name; falls back to the LOG_LEVEL environment
            variable, then WARNING.
        format_string: Custom format string.

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("LOG_LEVEL", "WARNING")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # only configure once; repeated calls must not stack handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
        logger.propagate = False

    return logger
