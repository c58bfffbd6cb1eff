"""
Board Gateway - Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the error scenarios of the gateway.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) map them to
       HTTP status codes and the uniform `{"error": message}` body.
Who:   Raised by services; caught by the global handlers.

Exception Hierarchy:
    GatewayError (base)                 → 500
    ├── ValidationError                 → 400 Bad Request (client can fix)
    │   └── LimitReachedError           → 400 Bad Request (row-count ceiling hit)
    ├── WriteError                      → 400 Bad Request (insert/update/delete rejected)
    ├── NotFoundError                   → 404 Not Found
    ├── AuthenticationError             → 401 Unauthorized
    └── DatabaseError                   → 500 Internal Server Error (read failures)
"""

from typing import Any, Dict, Optional


class GatewayError(Exception):
    """
    Base exception for all gateway application errors.

    Attributes:
        message:      User-facing error description (safe to return in API response)
        context:      Additional debug info (logged but NOT returned to client)
        status_code:  HTTP status the global handler responds with
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(GatewayError):
    """
    Raised when client input fails a business rule.

    When:  Missing id in an update body, missing password, empty id list.
    HTTP:  400 Bad Request

    Schema-level problems (wrong types, unknown fields) are raised by FastAPI
    as RequestValidationError and mapped to the same 400 response.
    """

    status_code = 400

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


class LimitReachedError(ValidationError):
    """
    Raised when an insert would push a table past its row-count ceiling.

    HTTP:  400 Bad Request
    """

    def __init__(
        self,
        message: str,
        limit: int,
        current: int,
        requested: int = 1,
    ):
        super().__init__(
            message=message,
            context={"limit": limit, "current": current, "requested": requested},
        )
        self.limit = limit


class WriteError(GatewayError):
    """
    Raised when the database rejects an insert, update, or delete.

    When:  Unique constraint violations, bad column values, lost connections
           during a write.
    HTTP:  400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "The write operation could not be completed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(GatewayError):
    """
    Raised when a single-resource lookup finds no row.

    HTTP:  404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource.capitalize()} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class AuthenticationError(GatewayError):
    """
    Raised when login credentials do not match a stored user.

    The message is identical for unknown emails and wrong passwords so the
    response does not reveal which accounts exist.

    HTTP:  401 Unauthorized
    """

    status_code = 401

    def __init__(
        self,
        message: str = "Invalid email or password.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(GatewayError):
    """
    Raised when a read or count query fails unexpectedly.

    HTTP:  500 Internal Server Error

    The client message stays generic; the SQL error is logged server-side only.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
