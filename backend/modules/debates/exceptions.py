"""
Debates module exceptions.
"""

from typing import Any, Optional

from shared.exceptions import (
    ArgueError,
    NotFoundError,
    ValidationError,
    ConflictError,
    ExternalServiceError,
)


class DebateError(ArgueError):
    """Base exception for debate-related errors."""

    pass


class InvalidDilemmaError(ValidationError):
    """Raised when a debate references a dilemma that does not exist."""

    def __init__(self, dilemma_id: Any):
        super().__init__(
            "Invalid dilemma ID",
            code="INVALID_DILEMMA",
            details={"dilemma_id": dilemma_id},
        )


class InvalidCustomCaseError(ValidationError):
    """Raised when a custom case is missing its title, description or positions."""

    def __init__(self, reason: Optional[str] = None):
        super().__init__(
            "Invalid custom case data",
            code="INVALID_CUSTOM_CASE",
            details={"reason": reason} if reason else None,
        )


class InvalidSideError(ValidationError):
    """Raised when the requested side is not prosecution or defense."""

    def __init__(self, side: Any):
        super().__init__(
            "playerSide must be 'prosecution' or 'defense'",
            code="INVALID_SIDE",
            details={"player_side": side},
        )


class InvalidArgumentError(ValidationError):
    """Raised when a submitted argument is empty or too long."""

    def __init__(self, reason: str):
        super().__init__(
            f"Invalid argument: {reason}",
            code="INVALID_ARGUMENT",
            details={"reason": reason},
        )


class DebateNotFoundError(NotFoundError):
    """Raised when a debate is looked up for reading and does not exist."""

    def __init__(self, debate_id: str):
        super().__init__(
            "Debate not found",
            code="DEBATE_NOT_FOUND",
            details={"debate_id": debate_id},
        )


class InvalidSessionError(NotFoundError):
    """Raised when a turn or verdict is requested for an unknown session."""

    status_code = 400

    def __init__(self, session_id: str):
        super().__init__(
            "Invalid or expired session",
            code="INVALID_SESSION",
            details={"session_id": session_id},
        )


class SessionEndedError(ValidationError):
    """Raised when an operation is not allowed in the debate's current status."""

    def __init__(self, session_id: str, status: str):
        super().__init__(
            "Debate has ended",
            code="SESSION_ENDED",
            details={"session_id": session_id, "status": status},
        )


class SessionBusyError(ConflictError):
    """Raised when an AI call for the session is already in flight."""

    def __init__(self, session_id: str):
        super().__init__(
            "A response for this debate is already being generated",
            code="SESSION_BUSY",
            details={"session_id": session_id},
        )


class UpstreamGenerationError(ExternalServiceError):
    """Raised when the opponent or judge model call fails."""

    def __init__(
        self,
        role: str,
        message: str,
        original_error: Optional[str] = None,
    ):
        super().__init__(
            f"Failed to generate {role} response: {message}",
            service=role,
            code="UPSTREAM_GENERATION_FAILED",
            details={"original_error": original_error},
        )
        self.role = role


class DataIntegrityError(DebateError):
    """Raised when persisted debate state cannot be read back consistently."""

    def __init__(self, debate_id: str, reason: str):
        super().__init__(
            f"Stored debate is inconsistent: {reason}",
            code="DATA_INTEGRITY",
            details={"debate_id": debate_id, "reason": reason},
        )
