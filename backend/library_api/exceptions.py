"""
Library API Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the book service.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by the book service; caught by global handlers.

Exception Hierarchy:
    LibraryError (base)      → 500 Internal Server Error
    ├── ValidationError      → 400 Bad Request (client can fix)
    ├── NotFoundError        → 404 Not Found
    └── DatabaseError        → 500 Internal Server Error

Storage failures surface as DatabaseError, so a caller can always tell
"the book does not exist" (404) and "the shelf is empty" (204) apart from
"the store failed" (500).
"""

from typing import Any, Dict, Optional


class LibraryError(Exception):
    """
    Base exception for all Library API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned for server errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(LibraryError):
    """
    Raised when a book payload is rejected.

    When:    The store refuses the record (e.g. duplicate ISBN).
    HTTP:    400 Bad Request

    Schema-level problems (missing title, malformed id) are raised by FastAPI
    as RequestValidationError and are mapped to 400 by the same handler family.
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


class NotFoundError(LibraryError):
    """
    Raised when a requested book does not exist.

    When:    GET, DELETE or PATCH on /books/{id} with an unknown id.
    HTTP:    404 Not Found

    The repository returns None for missing rows; the service converts that
    None into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource.capitalize()} with ID {resource_id} not found."
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class DatabaseError(LibraryError):
    """
    Raised when a storage operation fails unexpectedly.

    When:    Connection lost mid-query, deadlock, driver error, etc.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the operation
    and the original error type are kept in `context` for the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
