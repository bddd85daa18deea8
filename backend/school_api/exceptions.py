"""
School Records API: Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the three failure classes.
Why:   Repositories raise typed errors; global handlers registered in
       main.py turn them into JSON responses with the right status code.
How:   Each exception carries a message and an optional context dict.

Exception Hierarchy:
    SchoolApiError (base)
    ├── ValidationError   → 400 Bad Request (malformed id or body)
    ├── NotFoundError     → 404 Not Found (no active row for the id)
    └── DatabaseError     → 500 Internal Server Error (any store failure)
"""

from typing import Any, Dict, Optional


class SchoolApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (returned in the response)
        context:  Additional debug info (logged, returned as `details` for 400s)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(SchoolApiError):
    """
    Raised when client input cannot be decoded.

    When:    Path identifier is not an unsigned integer, or the JSON body
             does not match the entity shape.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Invalid input",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(SchoolApiError):
    """
    Raised when no active row matches the requested identifier.

    SQLAlchemy returns None for missing rows; repositories convert that
    into this exception so the route layer never checks for None.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        if resource_id is not None:
            message = f"{resource.capitalize()} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(SchoolApiError):
    """
    Raised when a query or write fails in the relational store.

    The message carries the driver's error text so the caller can see what
    went wrong; the original exception is kept on `__cause__`.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
