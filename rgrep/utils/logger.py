"""
Logging utility for rgrep.

STDOUT carries search output only, so every log sink writes to STDERR.
Debug logging is enabled with ``--debug`` or ``RGREP_DEBUG=true``.
"""

import os
import sys

from loguru import logger as loguru_logger

from rgrep.constants import ENV_PREFIX

LOG_FORMAT = "<level>{level: <8}</level> | {name}:{function}:{line} - {message}"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get(f"{ENV_PREFIX}_DEBUG", "").lower() == "true"


def configure_logging(debug: bool = False) -> None:
    """Route loguru output to STDERR at the requested verbosity.

    Args:
        debug: Log at DEBUG level instead of WARNING.
    """
    level = "DEBUG" if debug or is_debug_enabled() else "WARNING"
    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=level, format=LOG_FORMAT)


# Export loguru logger for direct use
logger = loguru_logger
