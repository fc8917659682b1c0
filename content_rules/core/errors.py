"""Error Hierarchy - typed, categorized exceptions for contract violations.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation failures are NEVER raised - they are returned as ValidationResult
    - Out-of-range version lookups are NEVER raised - they return None
    - to_response() produces a JSON-safe envelope for the caller's shell

Design Decisions:
    - Single hierarchy with ContentRulesError base: callers catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


def _raw(value: object) -> str:
    """Raw string form of an enum member or plain value."""
    return value.value if isinstance(value, Enum) else str(value)


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    LOOKUP = "lookup"
    AUTHORIZATION = "authorization"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    content_type: str | None = None
    role: str | None = None
    operation: str | None = None
    content_id: str | None = None
    debug_info: dict[str, Any] | None = None


class ContentRulesError(Exception):
    """Base exception for all content_rules errors."""

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
        """Convert to a standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "content_type": self.context.content_type,
                    "role": self.context.role,
                    "operation": self.context.operation,
                    "content_id": self.context.content_id,
                },
            }
        }


# ─── Lookup Errors ───────────────────────────────────────────────

class AccessRuleNotFoundError(ContentRulesError):
    """Role or operation outside the access table's closed enumeration."""
    def __init__(self, role: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.role = _raw(role)
        ctx.operation = _raw(operation)
        super().__init__(
            f"No access rule for role '{ctx.role}' and operation '{ctx.operation}'",
            "ACCESS_RULE_NOT_FOUND", ErrorCategory.LOOKUP,
            ErrorSeverity.ERROR, ctx,
        )
        self.role = role
        self.operation = operation


class UnknownContentTypeError(ContentRulesError):
    """Content type tag has no declared access table."""
    def __init__(self, content_type: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.content_type = _raw(content_type)
        super().__init__(
            f"Unknown content type '{ctx.content_type}'",
            "UNKNOWN_CONTENT_TYPE", ErrorCategory.LOOKUP,
            ErrorSeverity.ERROR, ctx,
        )
        self.content_type = content_type


# ─── Authorization Errors ────────────────────────────────────────

class PermissionDeniedError(ContentRulesError):
    """Access predicate evaluated to False for the requested operation."""
    def __init__(self, role: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.role = _raw(role)
        ctx.operation = _raw(operation)
        super().__init__(
            f"Role '{ctx.role}' is not allowed to {ctx.operation} this content",
            "PERMISSION_DENIED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, ctx,
        )
        self.role = role
        self.operation = operation
