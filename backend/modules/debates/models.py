"""
Debates module data models.

These models define the debate aggregate (debate, turns, verdict), the
request/response payloads of the debate API, and the status state machine.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from shared.models import CamelModel
from modules.dilemmas.models import Dilemma, DilemmaId, Side

MAX_TURNS = 3
MAX_ARGUMENT_LENGTH = 10000


class DebateStatus(str, Enum):
    """Debate lifecycle status. Only ever moves forward."""

    ACTIVE = "active"        # Accepting arguments
    JUDGING = "judging"      # Turns exhausted or verdict requested, verdict pending
    COMPLETED = "completed"  # Verdict stored

    @property
    def rank(self) -> int:
        return _STATUS_ORDER.index(self)

    def can_advance_to(self, target: "DebateStatus") -> bool:
        """Whether moving from this status to target is a forward step."""
        return target.rank > self.rank

    def predecessors(self) -> list["DebateStatus"]:
        """Statuses from which this one may be entered."""
        return list(_STATUS_ORDER[: self.rank])


_STATUS_ORDER = (DebateStatus.ACTIVE, DebateStatus.JUDGING, DebateStatus.COMPLETED)


class Winner(str, Enum):
    """Who the judge ruled for."""

    HUMAN = "human"
    AI = "ai"


Score = Union[int, float]


class ScoreCard(CamelModel):
    """Judge scores for one participant, each 0-100."""

    legal_reasoning: Score
    persuasiveness: Score
    rebuttal_quality: Score
    overall: Score


class Verdict(CamelModel):
    """
    The judge's ruling on a debate.

    Created once per debate and never modified. Score ranges are the judge's
    contract and are not enforced here.
    """

    winner: Winner
    human_scores: ScoreCard
    ai_scores: ScoreCard
    human_strengths: list[str] = Field(default_factory=list)
    human_improvements: list[str] = Field(default_factory=list)
    concepts_to_study: list[str] = Field(default_factory=list)
    key_takeaway: str = ""
    judge_summary: str = ""

    @field_validator("winner", mode="before")
    @classmethod
    def _normalize_winner(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class Turn(CamelModel):
    """One exchange: the player's argument and the opponent's reply."""

    turn_number: int = Field(..., ge=1, description="1-based, gapless per debate")
    player_argument: str
    ai_response: str
    created_at: Optional[datetime] = None


class DebateRecord(BaseModel):
    """
    A debate row as persisted.

    custom_case_data holds the raw stored payload for custom dilemmas; it is
    parsed back into a Dilemma by the service, not here, so that corrupt
    payloads surface as integrity errors at the point of use.
    """

    id: str
    dilemma_id: DilemmaId
    dilemma_title: str
    player_side: Side
    ai_side: Side
    status: DebateStatus = DebateStatus.ACTIVE
    difficulty: Optional[str] = None
    model: Optional[str] = None
    custom_case_data: Optional[Any] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: Optional[datetime] = None


# -----------------------------------------------------------------------------
# API payloads
# -----------------------------------------------------------------------------


class CreateDebateRequest(CamelModel):
    """
    Request to start a debate.

    Fields are loosely typed on purpose: the service validates the dilemma
    reference, side and custom case and reports failures as 400s.
    """

    dilemma_id: Union[int, str] = Field(..., description="Catalog ID or 'custom'")
    player_side: str = Field(..., description="'prosecution' or 'defense'")
    difficulty: Optional[str] = Field(None, description="Difficulty level ID")
    model: Optional[str] = Field(None, description="Model ID override")
    custom_case: Optional[dict[str, Any]] = Field(
        None,
        description="Full case when dilemmaId is 'custom'",
    )


class DilemmaView(CamelModel):
    """Case facts shown to the player when a debate starts."""

    title: str
    description: str
    context: str


class StartDebateResponse(CamelModel):
    session_id: str
    dilemma: DilemmaView
    player_side: Side
    ai_side: Side
    player_position: str
    ai_position: str
    max_turns: int
    difficulty: str = Field(..., description="Difficulty display name")
    model: str = Field(..., description="Model display name")


class SubmitArgumentRequest(CamelModel):
    session_id: str
    argument: str = ""


class ArgueResponse(CamelModel):
    turn: int
    ai_response: str
    is_last_turn: bool
    turns_remaining: int


class JudgeRequest(CamelModel):
    session_id: str


class FullDebate(CamelModel):
    """
    Snapshot of a debate for replay and sharing.

    Available in every status; verdict is None until the debate completes.
    """

    id: str
    dilemma: Dilemma
    player_side: Side
    ai_side: Side
    status: DebateStatus
    turns: list[Turn] = Field(default_factory=list)
    verdict: Optional[Verdict] = None
    difficulty: Optional[str] = None
    model: Optional[str] = None
    created_at: datetime
    completed_at: Optional[datetime] = None
