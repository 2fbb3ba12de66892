"""
Employee API: Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the two failure kinds the service knows.
How:   Each exception carries a client-safe message and an optional context
       dict. Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by the validation dependency, the Record Service, and the Store.

Exception Hierarchy:
    EmployeeAPIError (base)      → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    └── PersistenceError         → 500 Internal Server Error

"Not found" is deliberately absent: the Store returns None for a missing row
and the get-one handler turns that into a 404 itself.
"""

from typing import Any, Dict, Optional


class EmployeeAPIError(Exception):
    """
    Base exception for all Employee API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where noted)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(EmployeeAPIError):
    """
    Raised when client input is malformed or incomplete.

    When:    Request body is not a JSON object, a field is missing/empty/too long,
             the email is malformed, or the Record Service's presence rule fails.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid employee payload",
            "details": {"fields": {"email": "must be a valid email address"}}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class PersistenceError(EmployeeAPIError):
    """
    Raised when the relational backend fails.

    When:    Connection refused or lost, statement failed, constraint violated.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. The driver
        error type, operation name, and employee id live in `context` and are
        logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
