"""
Chirpy Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the error scenarios of the service.
How:   Each exception carries a message and optional context dict. Global
       exception handlers (registered in main.py) map them to HTTP responses.
Who:   Raised by services and route adapters; caught by global handlers.

Exception Hierarchy:
    ChirpyError (base)            → 500
    ├── ValidationError           → 400 Bad Request (client can fix)
    │   └── ChirpTooLongError     → 400 "Chirp is too long"
    ├── RequestDecodeError        → 500 (malformed JSON payload)
    └── DatabaseError             → 500 (details logged, never returned)

A chirp containing banned words is NOT an error: ChirpModerator reports it
as a flag on a successful result.
"""

from typing import Any, Dict, Optional


class ChirpyError(Exception):
    """
    Base exception for all Chirpy application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "Something went wrong",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ChirpyError):
    """
    Raised when client input fails a business rule.

    HTTP:    400 Bad Request
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


class ChirpTooLongError(ValidationError):
    """
    Raised when a chirp body exceeds the configured maximum length.

    Moderation stops at the length check; no redaction is attempted.
    """

    def __init__(self, length: int, max_length: int):
        super().__init__(
            message="Chirp is too long",
            field="body",
            context={"length": length, "max_length": max_length},
        )
        self.length = length
        self.max_length = max_length


class RequestDecodeError(ChirpyError):
    """
    Raised when a request body cannot be decoded into the expected parameters.

    HTTP:    500 Internal Server Error (fatal to the request, never retried)
    """

    def __init__(
        self,
        message: str = "Something went wrong",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(ChirpyError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error
    The message returned to the client is always generic; the underlying
    driver error is only logged server-side.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
