"""
rgrep type definitions.

This module exports the error types shared across rgrep.
"""

from .errors import (
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    PatternCompileError,
    RecoveryAction,
    ResourceError,
    RgrepError,
)

__all__ = [
    "ErrorCode",
    "ErrorSeverity",
    "RecoveryAction",
    "ErrorContext",
    "RgrepError",
    "ConfigurationError",
    "PatternCompileError",
    "ResourceError",
]
