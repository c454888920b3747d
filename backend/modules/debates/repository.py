"""
Debate repository for database access.

Encapsulates all Supabase queries and data mapping for debate-related tables:
- debates
- debate_turns
- debate_verdicts

An in-memory implementation with the same semantics backs local development
and tests.
"""

import secrets
from datetime import datetime, timezone
from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from modules.dilemmas.models import CUSTOM_DILEMMA_ID, DilemmaId, Side
from .exceptions import DataIntegrityError
from .models import DebateRecord, DebateStatus, ScoreCard, Turn, Verdict

# Postgres SQLSTATE codes surfaced by PostgREST
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def generate_debate_id() -> str:
    """Unguessable URL-safe debate ID; doubles as the session handle."""
    return secrets.token_urlsafe(16)


class SupabaseDebateRepository(BaseRepository[DebateRecord]):
    """
    Repository for debate data access.

    Handles all database operations for debates and related entities.
    All methods return Pydantic models with proper mapping from database rows.

    Uniqueness of turn numbers and verdicts is enforced by the schema
    (see migrations/001_debates.sql); this class translates the resulting
    conflicts into domain errors.
    """

    # -------------------------------------------------------------------------
    # Debate operations
    # -------------------------------------------------------------------------

    def create_debate(self, record: DebateRecord) -> DebateRecord:
        """
        Create a new debate record.

        Args:
            record: The debate to insert (ID already generated).

        Returns:
            The stored debate as read back from the insert.
        """
        data = {
            "id": record.id,
            "dilemma_id": str(record.dilemma_id),
            "dilemma_title": record.dilemma_title,
            "player_side": record.player_side.value,
            "ai_side": record.ai_side.value,
            "status": record.status.value,
            "difficulty": record.difficulty,
            "model": record.model,
            "custom_case_data": record.custom_case_data,
            "created_at": record.created_at.isoformat(),
        }
        result = self._db.table("debates").insert(data).execute()
        return self._map_to_record(result.data[0])

    def get_debate(self, debate_id: str) -> Optional[DebateRecord]:
        """Get a debate row by ID, or None if not found."""
        result = self._db.table("debates").select("*").eq("id", debate_id).execute()

        if not result.data:
            return None

        return self._map_to_record(result.data[0])

    def update_status(self, debate_id: str, status: DebateStatus) -> None:
        """
        Move a debate forward to status.

        The update is conditional on the stored status being an earlier one,
        so a stale writer can never move a debate backward.
        """
        data: dict[str, Any] = {"status": status.value}

        if status == DebateStatus.COMPLETED:
            data["completed_at"] = self._now()

        self._db.table("debates").update(data).eq("id", debate_id).in_(
            "status", [s.value for s in status.predecessors()]
        ).execute()

    # -------------------------------------------------------------------------
    # Turn operations
    # -------------------------------------------------------------------------

    def add_turn(self, debate_id: str, turn: Turn) -> Turn:
        """
        Append a turn to a debate.

        Raises:
            DataIntegrityError: If the turn number is taken or the debate is gone.
        """
        data = {
            "debate_id": debate_id,
            "turn_number": turn.turn_number,
            "player_argument": turn.player_argument,
            "ai_response": turn.ai_response,
        }
        try:
            result = self._db.table("debate_turns").insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DataIntegrityError(debate_id, f"turn {turn.turn_number} already exists")
            if e.code == FOREIGN_KEY_VIOLATION:
                raise DataIntegrityError(debate_id, "turn references a missing debate")
            raise
        return self._map_to_turn(result.data[0])

    def get_turns(self, debate_id: str) -> list[Turn]:
        """Load all turns for a debate in order."""
        result = self._db.table("debate_turns").select("*").eq(
            "debate_id", debate_id
        ).order("turn_number").execute()

        return [self._map_to_turn(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Verdict operations
    # -------------------------------------------------------------------------

    def save_verdict(self, debate_id: str, verdict: Verdict) -> Verdict:
        """
        Store the verdict unless the debate already has one.

        Returns:
            Whichever verdict is stored after the write.
        """
        data = {
            "debate_id": debate_id,
            "winner": verdict.winner.value,
            "human_scores": verdict.human_scores.model_dump(by_alias=True),
            "ai_scores": verdict.ai_scores.model_dump(by_alias=True),
            "human_strengths": verdict.human_strengths,
            "human_improvements": verdict.human_improvements,
            "concepts_to_study": verdict.concepts_to_study,
            "key_takeaway": verdict.key_takeaway,
            "judge_summary": verdict.judge_summary,
        }
        self._db.table("debate_verdicts").upsert(
            data, on_conflict="debate_id", ignore_duplicates=True
        ).execute()

        stored = self.get_verdict(debate_id)
        if stored is None:
            raise DataIntegrityError(debate_id, "verdict was not stored")
        return stored

    def get_verdict(self, debate_id: str) -> Optional[Verdict]:
        """Load the verdict for a debate if it exists."""
        result = self._db.table("debate_verdicts").select("*").eq("debate_id", debate_id).execute()
        if result.data:
            return self._map_to_verdict(result.data[0])
        return None

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_record(self, data: dict[str, Any]) -> DebateRecord:
        """Map database row to DebateRecord model."""
        return DebateRecord(
            id=str(data["id"]),
            dilemma_id=_parse_dilemma_id(data["dilemma_id"]),
            dilemma_title=data.get("dilemma_title") or "",
            player_side=Side(data["player_side"]),
            ai_side=Side(data["ai_side"]),
            status=DebateStatus(data["status"]),
            difficulty=data.get("difficulty"),
            model=data.get("model"),
            custom_case_data=data.get("custom_case_data"),
            created_at=data["created_at"],
            completed_at=data.get("completed_at"),
        )

    def _map_to_turn(self, data: dict[str, Any]) -> Turn:
        """Map database row to Turn model."""
        return Turn(
            turn_number=data["turn_number"],
            player_argument=data["player_argument"],
            ai_response=data["ai_response"],
            created_at=data.get("created_at"),
        )

    def _map_to_verdict(self, data: dict[str, Any]) -> Verdict:
        """Map database row to Verdict model."""
        return Verdict(
            winner=data["winner"],
            human_scores=ScoreCard.model_validate(data["human_scores"]),
            ai_scores=ScoreCard.model_validate(data["ai_scores"]),
            human_strengths=data.get("human_strengths") or [],
            human_improvements=data.get("human_improvements") or [],
            concepts_to_study=data.get("concepts_to_study") or [],
            key_takeaway=data.get("key_takeaway") or "",
            judge_summary=data.get("judge_summary") or "",
        )


def _parse_dilemma_id(value: Any) -> DilemmaId:
    """dilemma_id is stored as text so it can hold both catalog IDs and 'custom'."""
    if value == CUSTOM_DILEMMA_ID:
        return CUSTOM_DILEMMA_ID
    return int(value)


class InMemoryDebateRepository:
    """
    Process-local debate storage.

    Implements IDebateRepository with the same conflict semantics as the
    Supabase schema. Data is lost on restart.
    """

    def __init__(self) -> None:
        self._debates: dict[str, DebateRecord] = {}
        self._turns: dict[str, dict[int, Turn]] = {}
        self._verdicts: dict[str, Verdict] = {}

    def create_debate(self, record: DebateRecord) -> DebateRecord:
        if record.id in self._debates:
            raise DataIntegrityError(record.id, "debate already exists")
        self._debates[record.id] = record.model_copy()
        self._turns[record.id] = {}
        return record.model_copy()

    def get_debate(self, debate_id: str) -> Optional[DebateRecord]:
        record = self._debates.get(debate_id)
        return record.model_copy() if record else None

    def update_status(self, debate_id: str, status: DebateStatus) -> None:
        record = self._debates.get(debate_id)
        if record is None or record.status not in status.predecessors():
            return
        update: dict[str, Any] = {"status": status}
        if status == DebateStatus.COMPLETED:
            update["completed_at"] = datetime.now(timezone.utc)
        self._debates[debate_id] = record.model_copy(update=update)

    def add_turn(self, debate_id: str, turn: Turn) -> Turn:
        turns = self._turns.get(debate_id)
        if turns is None:
            raise DataIntegrityError(debate_id, "turn references a missing debate")
        if turn.turn_number in turns:
            raise DataIntegrityError(debate_id, f"turn {turn.turn_number} already exists")
        stored = turn.model_copy(update={"created_at": turn.created_at or datetime.now(timezone.utc)})
        turns[turn.turn_number] = stored
        return stored.model_copy()

    def get_turns(self, debate_id: str) -> list[Turn]:
        turns = self._turns.get(debate_id, {})
        return [turns[n].model_copy() for n in sorted(turns)]

    def save_verdict(self, debate_id: str, verdict: Verdict) -> Verdict:
        if debate_id not in self._debates:
            raise DataIntegrityError(debate_id, "verdict references a missing debate")
        if debate_id not in self._verdicts:
            self._verdicts[debate_id] = verdict.model_copy(deep=True)
        return self._verdicts[debate_id].model_copy(deep=True)

    def get_verdict(self, debate_id: str) -> Optional[Verdict]:
        verdict = self._verdicts.get(debate_id)
        return verdict.model_copy(deep=True) if verdict else None

    def clear(self) -> None:
        """Drop all stored data (for testing)."""
        self._debates.clear()
        self._turns.clear()
        self._verdicts.clear()
