"""Error Hierarchy: typed, categorized exceptions for all Postboard failure modes.

Invariants:
    - Every error has a message (str), code (str), category (ErrorCategory), http_status (int)
    - to_response() produces the REST envelope {"error": {"message", "status"}}
    - Lookups that find nothing are 404; storage failures are 500
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories, surfaced in logs."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class PostboardError(Exception):
    """Base exception for all Postboard errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return error_body(self.message, self.http_status)


def error_body(message: str, status: int | None) -> dict:
    """Error envelope shared by every handler; status defaults to 500."""
    return {
        "error": {
            "message": message,
            "status": status or 500,
        }
    }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(PostboardError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.resource_type = resource_type


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PostboardError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, code: str = "DATABASE_ERROR"):
        super().__init__(
            f"Database {operation} failed: {message}",
            code, ErrorCategory.DATABASE, 500,
        )
        self.operation = operation


class RecordNotFoundError(DatabaseError):
    """A write referenced a record that does not exist (update, delete, connect)."""
    def __init__(self, message: str, operation: str):
        super().__init__(message, operation, code="RECORD_NOT_FOUND")
