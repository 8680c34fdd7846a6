"""
Error taxonomy for the field validator.

Rule evaluation itself never fails: a value that does not satisfy its rule is
an expected outcome, reported through the validity flag. The errors below
cover the surrounding layers, such as settings that name an unknown rule or
mode, and unexpected failures reported through the ErrorHandler.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Error type categories."""

    CONFIG = "config"
    SYSTEM = "system"


class ErrorCode(Enum):
    """Specific error codes."""

    # Configuration errors
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"

    # System errors
    OS_ERROR = "OS_ERROR"
    MEMORY_ERROR = "MEMORY_ERROR"

    UNKNOWN = "UNKNOWN"


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class BaseAppError(Exception):
    """
    Root of all field validator errors.

    Carries a user-facing message plus the metadata the ErrorHandler logs.
    """

    type: ErrorType
    code: ErrorCode
    user_message: str
    technical_message: str | None = None
    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.user_message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message='{self.user_message}')"


class ConfigError(BaseAppError):
    """Settings name an unknown rule or mode, or cannot be read."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.CONFIG,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            context=context or {},
        )


class SystemError(BaseAppError):
    """Unexpected runtime failures."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.SYSTEM,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            context=context or {},
        )


_EXCEPTION_MAPPING: dict[type[Exception], tuple[type[BaseAppError], ErrorCode, str]] = {
    ValueError: (ConfigError, ErrorCode.CONFIG_PARSE_ERROR, "Invalid setting value"),
    TypeError: (ConfigError, ErrorCode.CONFIG_PARSE_ERROR, "Invalid setting value"),
    OSError: (SystemError, ErrorCode.OS_ERROR, "System error occurred"),
    MemoryError: (SystemError, ErrorCode.MEMORY_ERROR, "Insufficient memory"),
}


def map_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """
    Map a built-in exception to an application error.

    Args:
        exc: The exception to map
        context: Optional context information

    Returns:
        BaseAppError with matching type and code
    """
    context = context or {}

    if isinstance(exc, BaseAppError):
        return exc

    exc_type = type(exc)
    if exc_type in _EXCEPTION_MAPPING:
        error_class, error_code, default_message = _EXCEPTION_MAPPING[exc_type]
        return error_class(
            code=error_code,
            user_message=str(exc) or default_message,
            technical_message=f"{exc_type.__name__}: {exc}",
            context=context,
        )

    logger.warning(f"Unknown exception type: {exc_type.__name__}: {exc}")
    return SystemError(
        code=ErrorCode.UNKNOWN,
        user_message="An unexpected error occurred",
        technical_message=f"{exc_type.__name__}: {exc}",
        context=context,
    )
