"""Error Hierarchy — typed, categorized exceptions for all Product API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the exact JSON body the client receives
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ProductApiError base: FastAPI global handler catches all
    - Body shape varies per error ({errors: [...]} vs {message: ...}) because clients
      already branch on the presence of those keys; each subclass owns its shape
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from product_api.core.messages import Message, get_message


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    FORBIDDEN = "forbidden"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    product_id: int | None = None
    debug_info: dict[str, Any] | None = None


class ProductApiError(Exception):
    """Base exception for all Product API errors."""

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
        """Convert to the REST error body."""
        return {"message": self.message, "code": self.code}


# ─── Domain Errors (400-level) ──────────────────────────────────

class RequestValidationFailed(ProductApiError):
    """One or more declared field rules rejected the request."""
    def __init__(self, errors: list[dict], context: ErrorContext | None = None):
        super().__init__(
            f"{len(errors)} validation error(s)",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.errors = errors

    def to_response(self) -> dict:
        return {"errors": self.errors}


class ProductNotFoundError(ProductApiError):
    """No product row carries the requested id."""
    def __init__(
        self, product_id: int, message: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.product_id = product_id
        super().__init__(
            message or get_message(Message.PRODUCT_NOT_FOUND),
            "PRODUCT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.product_id = product_id

    def to_response(self) -> dict:
        return {"message": self.message}


class CorsRejectedError(ProductApiError):
    """Cross-origin request from an origin other than the configured one."""
    def __init__(
        self, origin: str, message: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message or get_message(Message.CORS_REJECTED),
            "CORS_REJECTED", ErrorCategory.FORBIDDEN,
            ErrorSeverity.WARNING, context, 403,
        )
        self.origin = origin

    def to_response(self) -> dict:
        return {"message": self.message}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ProductApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            get_message(Message.DATABASE_UNAVAILABLE),
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.detail = f"Database {operation} failed: {message}"
        self.operation = operation
