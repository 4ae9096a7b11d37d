"""Error Hierarchy — typed, categorized exceptions for all Catalog API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Each failure kind maps to exactly one HTTP status (no collapsing into 500)
    - to_response() produces the REST envelope used by every error response
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CatalogError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Auth failures split into three classes (missing / invalid / forbidden) so callers can
      tell them apart by status AND code
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error kinds surfaced to clients."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    resource_id: str | None = None


class CatalogError(Exception):
    """Base exception for all Catalog API errors."""

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
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource": self.context.resource,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class RequestValidationFailedError(CatalogError):
    """Request body, path or query failed schema validation."""
    def __init__(self, details: list[dict], context: ErrorContext | None = None):
        super().__init__(
            "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        body = super().to_response()
        body["error"]["details"] = self.details
        return body


class ResourceNotFoundError(CatalogError):
    """Requested row does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int | str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class ConstraintViolationError(CatalogError):
    """Write rejected by a storage constraint (unique key, foreign key, not-null)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONSTRAINT_VIOLATION", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class AuthenticationRequiredError(CatalogError):
    """No bearer token on a gated route."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Access denied. No token provided.",
            "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidCredentialsError(CatalogError):
    """Login failed. Same message for unknown user and wrong password."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid username or password",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidTokenError(CatalogError):
    """Token is malformed, badly signed, or expired."""
    def __init__(self, reason: str = "Invalid token", context: ErrorContext | None = None):
        super().__init__(
            reason, "INVALID_TOKEN", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 400,
        )


class ForbiddenError(CatalogError):
    """Valid token without the required role."""
    def __init__(self, required_role: str, context: ErrorContext | None = None):
        super().__init__(
            f"Access denied. Role '{required_role}' required.",
            "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.required_role = required_role


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CatalogError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class DatabaseConnectionError(CatalogError):
    """Database unreachable or connection dropped."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database unavailable during {operation}",
            "DATABASE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class InternalError(CatalogError):
    """Unhandled exception. The message never carries the original error text."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
