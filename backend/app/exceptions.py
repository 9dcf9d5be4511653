"""
Community Board Backend — Custom Exception Hierarchy
======================================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and user-friendly messages.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    CommunityError (base)
    ├── NotFoundError            → 404 Not Found
    └── DatabaseError            → 500 Internal Server Error

NotFoundError is the only error a caller is expected to act on. Everything
else (constraint violations such as a duplicate email, lost connections)
surfaces as a generic 500.
"""

from typing import Any, Dict, Optional


class CommunityError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(CommunityError):
    """
    Raised when a lookup by identity fails.

    When:    GET/PUT/DELETE on an unknown id, or a create request whose
             userId / boardId does not resolve to an existing record.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing records; the service layer converts
    None into this exception so routes stay free of existence checks.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(CommunityError):
    """
    Raised when database operations fail unexpectedly.

    When:    Constraint violation (duplicate email), lost connection, deadlock.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. Constraint
        names and SQL text are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
