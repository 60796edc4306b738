"""
Structured error handling for rgrep.

Every error raised by the compiler, sources or service layers carries a
categorized code, a severity, a user-facing message and optional recovery
hints. The CLI is the only place these are turned into exit codes.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from rgrep.constants import utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # File System Errors (2000-2999)
    FILE_NOT_FOUND = 2001
    FILE_READ_FAILED = 2002
    PERMISSION_DENIED = 2005

    # Pattern Errors (3000-3999)
    PATTERN_COMPILE_FAILED = 3001

    # Configuration Errors (4000-4999)
    INVALID_CONFIG = 4001


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class RecoveryAction:
    """Suggested action to recover from an error."""

    description: str
    command: str | None = None


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    file_path: str | None = None
    query: str | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


class RgrepError(Exception):
    """Base error class for rgrep."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.recovery_actions = recovery_actions or []
        self.original_error = original_error

        self.context.timestamp = utcnow()

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.file_path:
            parts.append(f"   File: {self.context.file_path}")

        if self.recovery_actions:
            parts.append("")
            parts.append("Suggested actions:")
            for i, action in enumerate(self.recovery_actions, 1):
                parts.append(f"   {i}. {action.description}")
                if action.command:
                    parts.append(f"      Run: {action.command}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": self.severity,
            "context": {
                "operation": self.context.operation,
                "file_path": self.context.file_path,
                "query": self.context.query,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
            "recovery_actions": [
                {"description": a.description, "command": a.command}
                for a in self.recovery_actions
            ],
            "original_error": str(self.original_error) if self.original_error else None,
        }


class ConfigurationError(RgrepError):
    """Invalid or inconsistent search options."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            user_message=user_message or message,
            severity=ErrorSeverity.HIGH,
            context=context,
            recovery_actions=recovery_actions,
            original_error=original_error,
        )


class PatternCompileError(RgrepError):
    """The regex engine rejected a compiled query."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.PATTERN_COMPILE_FAILED,
            message=message,
            user_message=user_message or "Query could not be compiled.",
            severity=ErrorSeverity.HIGH,
            context=context,
            recovery_actions=recovery_actions,
            original_error=original_error,
        )


class ResourceError(RgrepError):
    """A target file or directory is missing or unreadable."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        code: ErrorCode = ErrorCode.FILE_READ_FAILED,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=user_message or "Resource access failed.",
            severity=ErrorSeverity.MEDIUM,
            context=context,
            recovery_actions=recovery_actions,
            original_error=original_error,
        )
