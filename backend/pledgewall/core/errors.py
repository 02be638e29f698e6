"""Error Hierarchy — typed, categorized exceptions for every pledge failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Submission errors (400-level) are user-correctable; store errors (500-level) are not
    - to_response() produces the flat REST envelope {error, code, category, severity, details?}
    - Store diagnostics are logged, never returned in the response body

Design Decisions:
    - Single hierarchy with PledgeWallError base: FastAPI global handler catches all
      (ADR: uniform error shape across submit/list/count)
    - MissingFieldsError carries every missing field, not the first one: one round-trip
      is enough for the form to highlight everything
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    PROTOCOL = "protocol"
    STORE = "store"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    debug_info: dict[str, Any] | None = None


class PledgeWallError(Exception):
    """Base exception for all pledge wall errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to the standardized REST error envelope."""
        body: dict[str, Any] = {
            "error": self.message,
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        if self.details:
            body["details"] = self.details
        return body


# ─── Submission Errors (400-level) ──────────────────────────────

class MissingFieldsError(PledgeWallError):
    """One or more required pledge fields are absent or empty."""
    def __init__(self, missing: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Missing fields: {', '.join(missing)}",
            "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
            details={"missing": list(missing)},
        )
        self.missing = list(missing)


class InvalidEnumError(PledgeWallError):
    """A value falls outside the closed taxonomy."""
    def __init__(
        self,
        field_name: str,
        value: object,
        allowed: list[str],
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Invalid {field_name}: {value!r}",
            "INVALID_ENUM", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
            details={"field": field_name, "value": value, "allowed": list(allowed)},
        )
        self.field_name = field_name
        self.value = value
        self.allowed = list(allowed)


class MalformedSubmissionError(PledgeWallError):
    """Request body is not a JSON object."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Malformed submission: {reason}",
            "MALFORMED_SUBMISSION", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class MethodNotSupportedError(PledgeWallError):
    """Boundary received an unsupported HTTP verb."""
    def __init__(self, method: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            "Method Not Allowed",
            "METHOD_NOT_ALLOWED", ErrorCategory.PROTOCOL,
            ErrorSeverity.WARNING, context, 405,
            details={"method": method, "path": path},
        )
        self.method = method


# ─── Store Errors (500-level) ───────────────────────────────────

class StoreUnavailableError(PledgeWallError):
    """Persistence layer could not be reached or an operation failed.

    The diagnostic reason is kept on the exception for logging only;
    the response carries a generic message.
    """
    def __init__(self, operation: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"operation": operation, "reason": reason}
        super().__init__(
            "Server error",
            "STORE_UNAVAILABLE", ErrorCategory.STORE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
        self.reason = reason

    def __str__(self) -> str:
        return f"Store {self.operation} failed: {self.reason}"
