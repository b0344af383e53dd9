"""Error Hierarchy - typed, categorized exceptions for all SlotBoard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are not
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages
    - Capacity rejections and orphaned ledger records are NOT errors (never raised)

Design Decisions:
    - Single hierarchy with SlotBoardError base: the FastAPI global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
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
    DATABASE = "database"
    EXTERNAL_SOURCE = "external_source"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    project_id: str | None = None
    store_key: str | None = None
    source: str | None = None
    debug_info: dict[str, Any] | None = None


class SlotBoardError(Exception):
    """Base exception for all SlotBoard errors."""

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
                    "project_id": self.context.project_id,
                    "store_key": self.context.store_key,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class CatalogValidationError(SlotBoardError):
    """A project draft or catalog record failed validation."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CATALOG_VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ProjectNotFoundError(SlotBoardError):
    """Requested project is not in the current catalog."""
    def __init__(self, project_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.project_id = project_id
        super().__init__(
            f"Project '{project_id}' not found",
            "PROJECT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.project_id = project_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class LoadError(SlotBoardError):
    """Catalog document could not be fetched or parsed. Never retried."""
    def __init__(self, message: str, source: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.source = source
        super().__init__(
            f"Catalog load failed: {message}",
            "CATALOG_LOAD_ERROR", ErrorCategory.EXTERNAL_SOURCE,
            ErrorSeverity.CRITICAL, ctx, 502,
        )
        self.source = source


class PersistenceError(SlotBoardError):
    """Persisted store read/write failed. Accounting continues in memory."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.WARNING, context, 503,
        )
        self.operation = operation
