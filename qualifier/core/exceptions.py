"""
Custom Exceptions - Application-specific error classes.

This module defines a hierarchy of exceptions for clean error handling:
- Each exception carries an ErrorKind and the HTTP status it maps to
- The API layer renders every one of them into the same envelope
- Underlying causes are logged, never returned to the caller
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of failure kinds a request can end in."""
    INVALID_REQUEST = "invalid_request"
    AI_UNAVAILABLE = "ai_unavailable"
    INTERNAL_ERROR = "internal_error"


class QualifierException(Exception):
    """
    Base exception for all API errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_envelope(self, official_email: str) -> dict:
        """Convert to the error response envelope."""
        return {
            "is_success": False,
            "official_email": official_email,
            "error": self.message,
        }


class InvalidRequest(QualifierException):
    """Raised when the request body or an operation input is invalid."""
    status_code = 400
    kind = ErrorKind.INVALID_REQUEST

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class AIUnavailable(QualifierException):
    """Raised when the AI service cannot be reached or its answer parsed."""
    status_code = 503
    kind = ErrorKind.AI_UNAVAILABLE

    def __init__(self, message: str = "AI service unavailable"):
        super().__init__(message)


class InternalError(QualifierException):
    """Raised for any other unexpected failure."""
    status_code = 500
    kind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
