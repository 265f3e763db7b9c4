"""Error Hierarchy — typed, categorized exceptions for stella_nit failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation outcomes are NOT exceptions: validate_nit returns them as data.
      Exceptions only for assert_valid (opt-in) and misconfiguration
    - to_response() produces a JSON-ready envelope

Design Decisions:
    - Single hierarchy with StellaError base: callers catch one type
    - ErrorContext as dataclass: observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from stella_nit.core.domain_types import NITError


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"


@dataclass
class ErrorContext:
    """Context attached to an error for debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    value: str | None = None
    formatted: bool | None = None


class StellaError(Exception):
    """Base exception for all stella_nit errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "formatted": self.context.formatted,
                },
            }
        }


# ─── Validation Errors ──────────────────────────────────────────

class InvalidNITError(StellaError):
    """assert_valid called on a NIT that failed validation."""
    def __init__(
        self,
        errors: list[NITError],
        messages: list[str],
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Invalid NIT: {', '.join(messages)}",
            "INVALID_NIT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.errors = errors
        self.messages = messages

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["errors"] = [e.value for e in self.errors]
        response["error"]["messages"] = list(self.messages)
        return response


# ─── Configuration Errors ───────────────────────────────────────

class ConfigurationError(StellaError):
    """Settings hold a value the library cannot use."""
    def __init__(self, message: str, setting: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context,
        )
        self.setting = setting
