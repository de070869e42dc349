"""Error Hierarchy — typed, categorized exceptions for every task failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status it maps to
    - message is the user-facing text and becomes the plain-text response body
    - severity picks the log level the error is reported at; category and code
      travel into the log record via log_extra()

Design Decisions:
    - Single hierarchy with TodoError base: one FastAPI handler catches all
    - ErrorContext as dataclass: log fields travel with the error, not the logger
"""

from dataclasses import dataclass
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    PROTOCOL = "protocol"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    task_id: int | None = None
    operation: str | None = None


class TodoError(Exception):
    """Base exception for all task service errors."""

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

    def log_extra(self) -> dict:
        """Fields for logger.*(extra=...)."""
        return {
            "error_code": self.code,
            "error_category": self.category.value,
            "task_id": self.context.task_id,
            "operation": self.context.operation,
        }


# ─── Request Errors (400) ───────────────────────────────────────

class MalformedPayloadError(TodoError):
    """Request body cannot be decoded into a task."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "invalid JSON", "MALFORMED_PAYLOAD", ErrorCategory.PROTOCOL,
            ErrorSeverity.INFO, context, 400,
        )


class InvalidPathIdError(TodoError):
    """Path id segment is missing or not an integer."""
    def __init__(self, missing: bool = False, context: ErrorContext | None = None):
        super().__init__(
            "missing id" if missing else "invalid id",
            "INVALID_PATH_ID", ErrorCategory.PROTOCOL,
            ErrorSeverity.INFO, context, 400,
        )


class TaskValidationError(TodoError):
    """Task failed a validation rule."""
    def __init__(
        self, message: str, code: str, field: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class InvalidIdError(TaskValidationError):
    """Task id is zero or negative."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "id must be a positive integer", "INVALID_ID", "id", context,
        )


class EmptyTitleError(TaskValidationError):
    """Task title is empty after trimming."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "title cannot be empty", "EMPTY_TITLE", "title", context,
        )


class InvalidStatusError(TaskValidationError):
    """Task status is not one of the enumerated values."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "invalid status", "INVALID_STATUS", "status", context,
        )


class DuplicateIdError(TodoError):
    """A task with the same id already exists."""
    def __init__(self, task_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.task_id = task_id
        super().__init__(
            f"task with id {task_id} already exists",
            "DUPLICATE_ID", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 400,
        )


# ─── Lookup / Routing Errors ────────────────────────────────────

class TaskNotFoundError(TodoError):
    """Requested task does not exist."""
    def __init__(self, task_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.task_id = task_id
        super().__init__(
            f"task with id {task_id} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )


class UnsupportedMethodError(TodoError):
    """HTTP method not allowed on a known route."""
    def __init__(self, allowed: list[str], context: ErrorContext | None = None):
        super().__init__(
            "method not allowed", "METHOD_NOT_ALLOWED", ErrorCategory.PROTOCOL,
            ErrorSeverity.INFO, context, 405,
        )
        self.allowed = allowed

    @property
    def headers(self) -> dict[str, str]:
        return {"Allow": ", ".join(self.allowed)}
