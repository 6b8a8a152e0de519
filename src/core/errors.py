"""
Error taxonomy for the contact form application.

Validation failures reported by the form and unexpected exceptions caught by
the error hooks are both normalized to a BaseAppError before logging.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    VALIDATION = "validation"
    SYSTEM = "system"


class ErrorCode(Enum):
    # Form input
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_FORMAT = "INVALID_FORMAT"
    VALUE_OUT_OF_RANGE = "VALUE_OUT_OF_RANGE"
    REQUIRED_FIELD_MISSING = "REQUIRED_FIELD_MISSING"

    # Runtime
    OS_ERROR = "OS_ERROR"
    UNKNOWN = "UNKNOWN"


class ErrorSeverity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class BaseAppError(Exception):
    """Application error carrying a code, a user-facing message and log context."""

    type: ErrorType
    code: ErrorCode
    user_message: str
    technical_message: str | None = None
    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.user_message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.type.value}, code={self.code.value}, message='{self.user_message}')"


class ValidationError(BaseAppError):
    """A form field that failed validation."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        field: str | None = None,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.LOW,
        context: dict[str, Any] | None = None,
    ):
        context = context or {}
        if field:
            context["field"] = field

        super().__init__(
            type=ErrorType.VALIDATION,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            context=context,
        )

    @property
    def field(self) -> str | None:
        """Object name of the field that failed."""
        return self.context.get("field")


class SystemError(BaseAppError):
    """An unexpected runtime failure."""

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


def map_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """
    Map an exception to an application error.

    BaseAppErrors are returned unchanged. Any other exception reaching the
    error hooks is a runtime failure, reported as a SystemError.

    Args:
        exc: The exception to map
        context: Optional context information

    Returns:
        BaseAppError instance
    """
    if isinstance(exc, BaseAppError):
        return exc

    exc_name = type(exc).__name__
    if isinstance(exc, OSError):
        return SystemError(
            code=ErrorCode.OS_ERROR,
            user_message=str(exc) or "System error occurred",
            technical_message=f"{exc_name}: {exc}",
            context=context or {},
        )

    logger.debug(f"Unmapped exception type: {exc_name}: {exc}")
    return SystemError(
        code=ErrorCode.UNKNOWN,
        user_message="An unexpected error occurred",
        technical_message=f"{exc_name}: {exc}",
        context=context or {},
    )
