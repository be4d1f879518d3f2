"""Error Hierarchy — typed, categorized exceptions for every classified failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are expected; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope: always carries "message" and "code"
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CertTrackError base: one handler classifies all of them
    - Store adapters raise these instead of letting callers inspect driver error codes
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
    DATABASE = "database"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Extra context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    table: str | None = None
    debug_info: dict[str, Any] | None = None


class CertTrackError(Exception):
    """Base exception for all classified certtrack errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to REST error body."""
        return {"message": self.message, "code": self.code}


# ─── Client Errors (400-level) ──────────────────────────────────

class RouteNotFoundError(CertTrackError):
    """No route matches the request method and path."""
    def __init__(self, method: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Route not found: {method} {path}",
            "ROUTE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.method = method
        self.path = path


class DuplicateEntryError(CertTrackError):
    """A unique constraint was violated on insert."""
    def __init__(self, detail: str = "", context: ErrorContext | None = None):
        super().__init__(
            "Duplicate entry detected",
            "DUPLICATE_ENTRY", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.detail = detail


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CertTrackError):
    """Database operation failed for a reason other than a duplicate."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
