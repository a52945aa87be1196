"""
Resource API - Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions mapped to HTTP status codes.
How:   Each exception carries a message and an optional context dict. Global
       exception handlers (registered in main.py) turn them into JSON error
       responses; `context` is logged but only returned for client errors.
Who:   Raised by services; caught by the global handlers in main.py.

Exception Hierarchy:
    ResourceAPIError (base)
    ├── ValidationError     → 400 Bad Request (constraint / data errors)
    ├── NotFoundError       → 404 Not Found
    ├── DatabaseError       → 500 Internal Server Error
    └── NotificationError   → never returned; logged by the notifier
"""

from typing import Any, Dict, Optional


class ResourceAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ResourceAPIError):
    """
    Raised when the database rejects client-supplied data.

    When:  Foreign key to a missing resource/user, NOT NULL column left out,
           value of the wrong type for the column.
    HTTP:  400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(ResourceAPIError):
    """
    Raised when a requested row does not exist.

    HTTP:  404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(ResourceAPIError):
    """
    Raised when a database operation fails for reasons the client cannot fix.

    When:  Connection lost mid-query, pool exhausted, bad SQL.
    HTTP:  500 Internal Server Error (generic message; details are logged only)
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotificationError(ResourceAPIError):
    """
    Raised inside the notifier when the webhook rejects a message.

    Never reaches a client: the notifier retries, then logs and drops it.
    """

    def __init__(
        self,
        message: str = "Webhook notification failed",
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message=message, context=ctx)
        self.status_code = status_code
