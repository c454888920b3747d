"""
Debates module.

Handles the debate lifecycle: creation, turns against the AI opponent,
judging, and replay.

Public API:
- IDebateService: Interface for debate operations
- IDebateRepository: Persistence contract (Supabase or in-memory)
- IOpponentResponder / IJudge: AI collaborators
- Verdict: The judge's structured ruling
- FullDebate: Snapshot of a debate for replay
"""

from .interfaces import IDebateService, IDebateRepository, IOpponentResponder, IJudge
from .models import (
    MAX_TURNS,
    MAX_ARGUMENT_LENGTH,
    DebateStatus,
    Winner,
    ScoreCard,
    Verdict,
    Turn,
    DebateRecord,
    CreateDebateRequest,
    StartDebateResponse,
    SubmitArgumentRequest,
    ArgueResponse,
    JudgeRequest,
    FullDebate,
)
from .difficulty import (
    DIFFICULTIES,
    MODELS,
    AppConfigResponse,
    DifficultyLevel,
    get_app_config,
    resolve_difficulty,
    resolve_model,
)
from .session import DebateSession, SessionCache
from .repository import SupabaseDebateRepository, InMemoryDebateRepository, generate_debate_id
from .opponent import LLMOpponentResponder
from .judge import LLMJudge, fallback_verdict, parse_verdict
from .service import DebateService
from .exceptions import (
    DebateError,
    InvalidDilemmaError,
    InvalidCustomCaseError,
    InvalidSideError,
    InvalidArgumentError,
    DebateNotFoundError,
    InvalidSessionError,
    SessionEndedError,
    SessionBusyError,
    UpstreamGenerationError,
    DataIntegrityError,
)

__all__ = [
    # Interfaces
    "IDebateService",
    "IDebateRepository",
    "IOpponentResponder",
    "IJudge",
    # Models
    "MAX_TURNS",
    "MAX_ARGUMENT_LENGTH",
    "DebateStatus",
    "Winner",
    "ScoreCard",
    "Verdict",
    "Turn",
    "DebateRecord",
    "CreateDebateRequest",
    "StartDebateResponse",
    "SubmitArgumentRequest",
    "ArgueResponse",
    "JudgeRequest",
    "FullDebate",
    # Difficulty
    "DIFFICULTIES",
    "MODELS",
    "AppConfigResponse",
    "DifficultyLevel",
    "get_app_config",
    "resolve_difficulty",
    "resolve_model",
    # Session
    "DebateSession",
    "SessionCache",
    # Implementations
    "SupabaseDebateRepository",
    "InMemoryDebateRepository",
    "generate_debate_id",
    "LLMOpponentResponder",
    "LLMJudge",
    "fallback_verdict",
    "parse_verdict",
    "DebateService",
    # Exceptions
    "DebateError",
    "InvalidDilemmaError",
    "InvalidCustomCaseError",
    "InvalidSideError",
    "InvalidArgumentError",
    "DebateNotFoundError",
    "InvalidSessionError",
    "SessionEndedError",
    "SessionBusyError",
    "UpstreamGenerationError",
    "DataIntegrityError",
]
