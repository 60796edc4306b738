"""
rgrep utility modules.

- Logging (STDERR-only loguru sinks)
"""

from .logger import configure_logging, is_debug_enabled, logger

__all__ = [
    "configure_logging",
    "is_debug_enabled",
    "logger",
]
