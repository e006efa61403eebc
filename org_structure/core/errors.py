"""Error Hierarchy — typed, categorized exceptions for all org-structure failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400/404/409) are deterministic and never retried internally
    - DatabaseError is opaque: storage details stay in logs, never in the response
    - to_response() produces the REST envelope used by every error handler

Design Decisions:
    - Single hierarchy with OrgStructureError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - SelfParent and CycleDetected are separate classes: callers distinguish
      "pointed at itself" from "pointed into its own subtree" without parsing messages
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    department_id: int | None = None
    employee_id: int | None = None
    debug_info: dict[str, Any] | None = None


class OrgStructureError(Exception):
    """Base exception for all org-structure errors."""

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
                    "department_id": self.context.department_id,
                    "employee_id": self.context.employee_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidInputError(OrgStructureError):
    """A field is malformed or out of range."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ResourceNotFoundError(OrgStructureError):
    """Referenced entity does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateNameError(OrgStructureError):
    """Name collides with a sibling under the same parent (or another root)."""
    def __init__(
        self, name: str, parent_id: int | None, context: ErrorContext | None = None,
    ):
        scope = f"department {parent_id}" if parent_id is not None else "root level"
        super().__init__(
            f"Department name '{name}' already exists at {scope}",
            "DUPLICATE_NAME", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )
        self.name = name
        self.parent_id = parent_id


class SelfParentError(OrgStructureError):
    """Department proposed as its own parent."""
    def __init__(self, department_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.department_id = department_id
        super().__init__(
            f"Department {department_id} cannot be its own parent",
            "SELF_PARENT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )


class CycleDetectedError(OrgStructureError):
    """Proposed parent lies inside the subject's own subtree."""
    def __init__(
        self, department_id: int, parent_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.department_id = department_id
        super().__init__(
            f"Department {parent_id} is a descendant of department {department_id}",
            "CYCLE_DETECTED", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.parent_id = parent_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(OrgStructureError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
