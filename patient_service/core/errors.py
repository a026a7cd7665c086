"""Error Hierarchy — typed, categorized exceptions for all patient service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PatientServiceError base: one global FastAPI handler catches all
    - ErrorContext as dataclass: identifiers travel with the error for logging
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Identifiers and debug data attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    patient_id: int | None = None
    medical_id: str | None = None
    device_id: int | None = None
    debug_info: dict[str, Any] | None = None


class PatientServiceError(Exception):
    """Base exception for all patient service errors."""

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

    def details(self) -> list[dict] | None:
        """Field-level details; only validation errors carry them."""
        return None

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "details": self.details(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationFailedError(PatientServiceError):
    """Request input is missing or has an invalid value."""
    def __init__(
        self,
        message: str,
        field_errors: list[dict] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field_errors = field_errors or []

    def details(self) -> list[dict]:
        return self.field_errors


class PatientNotFoundError(PatientServiceError):
    """No patient matches the requested key."""
    def __init__(
        self, lookup: str, value: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Patient not found with {lookup}: {value}",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.lookup = lookup
        self.value = value


class DuplicateMedicalIdError(PatientServiceError):
    """Medical ID already belongs to another patient."""
    def __init__(self, medical_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.medical_id = medical_id
        super().__init__(
            f"A patient with medical ID '{medical_id}' already exists",
            "DUPLICATE_MEDICAL_ID", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.medical_id = medical_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PatientServiceError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
