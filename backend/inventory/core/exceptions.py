"""
Custom exception hierarchy for structured error handling.

WHY: Custom exceptions provide:
1. A single, explicit mapping from error kind to HTTP status code
2. A uniform failure envelope ({"success": false, "error": ...})
3. Contextual data for logging without string matching on messages

IMPORTANT: Services raise these exceptions; routes never build error
responses by hand. The exception handlers translate them.
"""

import enum
from typing import Any, Dict, Optional


class ErrorKind(str, enum.Enum):
    """
    Classification of every failure the service layer can report.

    WHY: Status codes are chosen from the kind, never from message text.
    """

    NOT_FOUND = "NOT_FOUND"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    DUPLICATE_NAME = "DUPLICATE_NAME"
    CATEGORY_IN_USE = "CATEGORY_IN_USE"
    VALIDATION = "VALIDATION"
    STORAGE = "STORAGE"
    INTERNAL = "INTERNAL"


# Kind -> HTTP status.
# CATEGORY_NOT_FOUND is a client error (400): it is raised when a product
# write references a missing category. A missing category on the
# category-filtered listing is reported as NOT_FOUND (404) instead.
ERROR_STATUS_CODES: Dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CATEGORY_NOT_FOUND: 400,
    ErrorKind.DUPLICATE_NAME: 409,
    ErrorKind.CATEGORY_IN_USE: 409,
    ErrorKind.VALIDATION: 400,
    ErrorKind.STORAGE: 500,
    ErrorKind.INTERNAL: 500,
}


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    WHY: Centralizing exception handling in a base class ensures consistent
    error responses and status code mapping.

    All custom exceptions should inherit from this class and set ``kind``.
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, **context: Any):
        """
        Initialize exception with message and context.

        Args:
            message: Human-readable error message
            **context: Additional context for logging (resource ids etc.)
        """
        self.message = message or self.default_message
        self.context = context
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        """HTTP status code for this error's kind."""
        return ERROR_STATUS_CODES[self.kind]

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize exception to the failure envelope.

        Returns:
            Dictionary with ``success`` set to False and the error message
        """
        return {
            "success": False,
            "error": self.message,
        }


# ============================================================================
# Validation & Input Exceptions
# ============================================================================


class ValidationError(AppException):
    """
    Raised when field validation fails (length, bounds, type).

    HTTP Status: 400 Bad Request
    """

    kind = ErrorKind.VALIDATION
    default_message = "Validation failed"


# ============================================================================
# Resource Exceptions
# ============================================================================


class ResourceNotFoundError(AppException):
    """
    Raised when a requested resource doesn't exist.

    WHY: 404 Not Found is the standard HTTP status for missing resources.
    Including resource type and ID in context helps debugging.

    HTTP Status: 404 Not Found
    """

    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"


class CategoryNotFoundError(AppException):
    """
    Raised when a product references a category that doesn't exist.

    WHY: The client supplied a bad foreign key in the request body, so this
    is reported as a client error rather than a missing resource.

    HTTP Status: 400 Bad Request
    """

    kind = ErrorKind.CATEGORY_NOT_FOUND
    default_message = "Category not found"


class DuplicateNameError(AppException):
    """
    Raised when a category name collides with an existing one.

    HTTP Status: 409 Conflict
    """

    kind = ErrorKind.DUPLICATE_NAME
    default_message = "Category name already exists"


class CategoryInUseError(AppException):
    """
    Raised when deleting a category that products still reference.

    WHY: Deleting it would orphan products; the caller must move or delete
    them first.

    HTTP Status: 409 Conflict
    """

    kind = ErrorKind.CATEGORY_IN_USE
    default_message = "Category has products and cannot be deleted"


# ============================================================================
# Database Exceptions
# ============================================================================


class DatabaseError(AppException):
    """
    Raised for store faults that are not a business-rule violation.

    HTTP Status: 500 Internal Server Error
    """

    kind = ErrorKind.STORAGE
    default_message = "Database operation failed"
