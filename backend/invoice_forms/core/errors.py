"""Error Hierarchy — typed, categorized exceptions for configuration and API faults.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - HTTP status is derived from the category via _HTTP_STATUS (one table, no per-class switch)
    - Validation outcomes are NEVER raised: a failing rule returns a non-empty ErrorList
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with InvoiceFormsError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFIGURATION = "configuration"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


_HTTP_STATUS: dict[ErrorCategory, int] = {
    ErrorCategory.VALIDATION: 400,
    ErrorCategory.RESOURCE_NOT_FOUND: 404,
    ErrorCategory.CONFIGURATION: 500,
    ErrorCategory.TIMEOUT: 504,
    ErrorCategory.INTERNAL: 500,
}


def http_status_for(category: ErrorCategory) -> int:
    return _HTTP_STATUS[category]


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    form_id: str | None = None
    field: str | None = None
    rule: str | None = None
    debug_info: dict[str, Any] | None = None


class InvoiceFormsError(Exception):
    """Base exception for all invoice form engine errors."""

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

    @property
    def http_status(self) -> int:
        return http_status_for(self.category)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "form_id": self.context.form_id,
                    "field": self.context.field,
                    "rule": self.context.rule,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class UnknownFormTypeError(InvoiceFormsError):
    """Requested form type has no rule definition."""
    def __init__(self, form_type: str, known: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Unknown form type '{form_type}'. Known types: {', '.join(known)}",
            "UNKNOWN_FORM_TYPE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.form_type = form_type


class ResourceNotFoundError(InvoiceFormsError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context,
        )


# ─── Configuration Faults (500-level) ───────────────────────────

class MessageNotFoundError(InvoiceFormsError):
    """Neither the specific nor the generic message key is defined."""
    def __init__(self, specific_key: str, generic_key: str, context: ErrorContext | None = None):
        super().__init__(
            f"No message defined for '{specific_key}' or fallback '{generic_key}'",
            "MESSAGE_NOT_FOUND", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context,
        )
        self.specific_key = specific_key
        self.generic_key = generic_key


class RuleTimeoutError(InvoiceFormsError):
    """A validation rule did not complete within the configured bound."""
    def __init__(self, field: str, timeout_seconds: float, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            f"Validation of '{field}' exceeded {timeout_seconds:g}s",
            "RULE_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.timeout_seconds = timeout_seconds
