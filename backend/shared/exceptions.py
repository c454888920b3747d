"""
Base exception classes for the Argue backend.

Each module defines its own exceptions on top of these bases. Every class
carries the HTTP status it maps to, so routes can translate any ArgueError
with `HTTPException(status_code=e.status_code, detail=e.to_dict())`.
"""

from typing import Optional, Any


class ArgueError(Exception):
    """
    Base exception for all Argue errors.

    All custom exceptions should inherit from this class. Subclasses
    override `status_code`; anything left at the base value is a server
    fault.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(ArgueError):
    """Resource not found."""

    status_code = 404


class ValidationError(ArgueError):
    """Input validation failed."""

    status_code = 400


class ConflictError(ArgueError):
    """Request conflicts with the current state of a resource."""

    status_code = 409


class ExternalServiceError(ArgueError):
    """Error communicating with an external service (a model provider)."""

    status_code = 500

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
