"""Logger configuration for libext.

Library modules log through ``logging.getLogger(__name__)`` and never
install handlers themselves.  Applications that want to see libext's
debug output call :func:`setup_logger` once.
"""

from __future__ import annotations

import logging
import os
import sys

__all__ = ["LOG_LEVEL_ENV", "setup_logger"]

LOG_LEVEL_ENV = "LIBEXT_LOG_LEVEL"
"""Environment variable read for the default log level."""

_DEFAULT_LEVEL = "WARNING"


def setup_logger(
    name: str = "libext",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (``"libext"`` covers every module)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv(LOG_LEVEL_ENV, _DEFAULT_LEVEL)
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
        logger.propagate = False

    return logger
