"""
Feedback Tracker Backend — Custom Exception Hierarchy
======================================================

What:  Application-specific exceptions for the error scenarios of the API.
Why:   Global exception handlers (registered in main.py) map each type to a
       status code, so routes and services never build error responses by hand.
How:   Each exception class carries a message and optional context dict.
       The context is logged server-side and never returned to the client.

Exception Hierarchy:
    FeedbackError (base)
    ├── BadRequestAlertError  → 400 Bad Request (empty body, alert headers)
    ├── NotFoundError         → 404 Not Found (empty body)
    ├── AuthenticationError   → 401 Unauthorized
    └── DatabaseError         → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class FeedbackError(Exception):
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


class BadRequestAlertError(FeedbackError):
    """
    Raised when a request is rejected for a business-rule reason the client can fix.

    HTTP:    400 Bad Request with an empty body. The reason travels in the
             alert headers instead:
                 X-<app>-error:  error.<error_key>
                 X-<app>-params: <entity_name>

    Example:
        POST /api/weights with {"id": 5, ...}
        → 400, X-feedbackApp-error: error.idexists, X-feedbackApp-params: weight
    """

    def __init__(
        self,
        message: str,
        entity_name: str,
        error_key: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx.update(entity_name=entity_name, error_key=error_key)
        super().__init__(message=message, context=ctx)
        self.entity_name = entity_name
        self.error_key = error_key


class NotFoundError(FeedbackError):
    """
    Raised at the HTTP boundary when a lookup by id yields nothing.

    Services return None for missing rows; resources convert that None into
    this exception so the handler can answer 404 with an empty body.
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


class AuthenticationError(FeedbackError):
    """
    Raised when the caller cannot be identified.

    When:    Missing or malformed Authorization header, invalid or expired
             token, or a token whose login has no user row.
    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Full authentication is required to access this resource",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(FeedbackError):
    """
    Raised when database operations fail unexpectedly.

    Security Note:
        The message returned to the client is always generic. The SQL
        error type is kept in the context and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
