"""
Debates module interface.

This is the core business logic interface for Argue Against the Machine.
The API layer depends on IDebateService for all debate operations; the
service depends on the storage and AI collaborators defined below.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    ArgueResponse,
    CreateDebateRequest,
    DebateRecord,
    DebateStatus,
    FullDebate,
    StartDebateResponse,
    Turn,
    Verdict,
)
from .session import DebateSession


@runtime_checkable
class IDebateService(Protocol):
    """
    Interface for debate operations.

    This protocol defines the contract that the debates module exposes
    to the API layer.
    """

    async def create_debate(self, request: CreateDebateRequest) -> StartDebateResponse:
        """
        Start a new debate.

        Args:
            request: Dilemma reference, side, and optional difficulty/model

        Returns:
            Session ID, case facts, and both positions

        Raises:
            InvalidDilemmaError: If the dilemma ID is unknown
            InvalidCustomCaseError: If a custom case is malformed
            InvalidSideError: If the side is not prosecution or defense
        """
        ...

    async def submit_argument(self, session_id: str, argument: str) -> ArgueResponse:
        """
        Submit the player's argument and get the opponent's counter-argument.

        Raises:
            InvalidArgumentError: If the argument is empty or too long
            InvalidSessionError: If the session does not exist
            SessionEndedError: If the debate no longer accepts arguments
            SessionBusyError: If a turn for this session is in flight
            UpstreamGenerationError: If the opponent call fails
        """
        ...

    async def request_verdict(self, session_id: str) -> Verdict:
        """
        Judge the debate, or return the stored verdict if already judged.

        Raises:
            InvalidSessionError: If the session does not exist
            SessionBusyError: If an AI call for this session is in flight
            UpstreamGenerationError: If the judge call fails
        """
        ...

    async def get_full_debate(self, debate_id: str) -> FullDebate:
        """
        Read-only snapshot of a debate with turns and verdict.

        Raises:
            DebateNotFoundError: If the debate does not exist
        """
        ...


@runtime_checkable
class IDebateRepository(Protocol):
    """
    Persistence for debates, turns, and verdicts.

    Methods are synchronous, matching the Supabase client.

    Implementations must reject duplicate (debate_id, turn_number) pairs and
    keep at most one verdict per debate.
    """

    def create_debate(self, record: DebateRecord) -> DebateRecord:
        ...

    def get_debate(self, debate_id: str) -> Optional[DebateRecord]:
        ...

    def update_status(self, debate_id: str, status: DebateStatus) -> None:
        """Move a debate forward to status; never moves it backward."""
        ...

    def add_turn(self, debate_id: str, turn: Turn) -> Turn:
        """
        Raises:
            DataIntegrityError: If the turn number is already taken
        """
        ...

    def get_turns(self, debate_id: str) -> list[Turn]:
        """Turns ordered by turn number."""
        ...

    def save_verdict(self, debate_id: str, verdict: Verdict) -> Verdict:
        """
        Store a verdict unless one exists.

        Returns:
            The verdict actually stored (the existing one on conflict)
        """
        ...

    def get_verdict(self, debate_id: str) -> Optional[Verdict]:
        ...


@runtime_checkable
class IOpponentResponder(Protocol):
    """Generates the AI opponent's counter-argument for a turn."""

    async def respond(self, session: DebateSession, argument: str) -> str:
        """
        Raises:
            UpstreamGenerationError: If the model call fails
        """
        ...


@runtime_checkable
class IJudge(Protocol):
    """Evaluates a finished transcript and rules on the debate."""

    async def judge(self, session: DebateSession) -> Verdict:
        """
        Malformed model output yields a fallback verdict rather than an error.

        Raises:
            UpstreamGenerationError: If the model call fails
        """
        ...
