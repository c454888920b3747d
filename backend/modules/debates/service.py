"""
Debates service implementation.

Owns the debate lifecycle: creation, turn submission, judging, and the
read-only snapshot. Storage is the source of truth; live sessions are kept
in a SessionCache and rebuilt from storage when missing (e.g. after a
restart), so every mutation follows the same path whether or not the
session was cached.

Turn submission protocol:
1. Under the session lock, reserve the next turn slot (fails fast if the
   debate has ended or a turn is already in flight).
2. Call the opponent with the lock released.
3. Persist the turn; only then commit it to the session.
4. On any failure or cancellation in 2-3, release the reservation so the
   player can retry.

A verdict request changes no status until the verdict is stored. An early
request then moves the debate through judging to completed, so a failed or
cancelled judge call leaves an active debate open for more turns.
"""

import logging
from typing import Any, Optional, Union

from shared.config import Settings, get_settings
from modules.dilemmas.interfaces import ICaseCatalog
from modules.dilemmas.models import (
    CUSTOM_DILEMMA_ID,
    Dilemma,
    Positions,
    Side,
    parse_custom_case,
)

from .difficulty import model_display_name, resolve_difficulty, resolve_model
from .exceptions import (
    DataIntegrityError,
    DebateNotFoundError,
    InvalidArgumentError,
    InvalidCustomCaseError,
    InvalidDilemmaError,
    InvalidSessionError,
    InvalidSideError,
    UpstreamGenerationError,
)
from .interfaces import IDebateRepository, IDebateService, IJudge, IOpponentResponder
from .models import (
    MAX_ARGUMENT_LENGTH,
    ArgueResponse,
    CreateDebateRequest,
    DebateRecord,
    DebateStatus,
    DilemmaView,
    FullDebate,
    StartDebateResponse,
    Turn,
    Verdict,
)
from .repository import generate_debate_id
from .session import DebateSession, SessionCache

logger = logging.getLogger(__name__)


class DebateService(IDebateService):
    """
    Debate service over a repository, a case catalog, and the AI collaborators.

    Implements IDebateService protocol.
    """

    def __init__(
        self,
        repository: IDebateRepository,
        catalog: ICaseCatalog,
        opponent: IOpponentResponder,
        judge: IJudge,
        cache: Optional[SessionCache] = None,
        settings: Optional[Settings] = None,
    ):
        self._repo = repository
        self._catalog = catalog
        self._opponent = opponent
        self._judge = judge
        self._cache = cache if cache is not None else SessionCache()
        self._settings = settings or get_settings()

    # -------------------------------------------------------------------------
    # Create
    # -------------------------------------------------------------------------

    async def create_debate(self, request: CreateDebateRequest) -> StartDebateResponse:
        """Validate the request, persist the debate, and cache its session."""
        dilemma = self._resolve_requested_dilemma(request.dilemma_id, request.custom_case)

        try:
            player_side = Side(request.player_side)
        except ValueError:
            raise InvalidSideError(request.player_side)
        ai_side = player_side.opposite

        difficulty = resolve_difficulty(request.difficulty, self._settings.default_difficulty)
        model = resolve_model(request.model, difficulty)

        record = DebateRecord(
            id=generate_debate_id(),
            dilemma_id=dilemma.id,
            dilemma_title=dilemma.title,
            player_side=player_side,
            ai_side=ai_side,
            difficulty=difficulty.id,
            model=model,
            custom_case_data=(
                dilemma.model_dump(mode="json", by_alias=True) if dilemma.is_custom else None
            ),
        )
        record = self._repo.create_debate(record)

        session = DebateSession(
            id=record.id,
            dilemma=dilemma,
            player_side=player_side,
            ai_side=ai_side,
            difficulty=difficulty,
            model=model,
            max_turns=self._settings.max_turns,
        )
        self._cache.put(session)

        logger.info(
            f"Debate {record.id} created: dilemma={dilemma.id}, side={player_side.value}, "
            f"difficulty={difficulty.id}, model={model}"
        )

        return StartDebateResponse(
            session_id=session.id,
            dilemma=DilemmaView(
                title=dilemma.title,
                description=dilemma.description,
                context=dilemma.context,
            ),
            player_side=player_side,
            ai_side=ai_side,
            player_position=session.player_position,
            ai_position=session.ai_position,
            max_turns=session.max_turns,
            difficulty=difficulty.name,
            model=model_display_name(model),
        )

    def _resolve_requested_dilemma(
        self,
        dilemma_id: Union[int, str],
        custom_case: Optional[dict[str, Any]],
    ) -> Dilemma:
        if dilemma_id == CUSTOM_DILEMMA_ID:
            if custom_case is None:
                raise InvalidDilemmaError(dilemma_id)
            try:
                return parse_custom_case(custom_case)
            except ValueError as e:
                raise InvalidCustomCaseError(str(e))

        catalog_id = _coerce_catalog_id(dilemma_id)
        dilemma = self._catalog.get_dilemma(catalog_id) if catalog_id is not None else None
        if dilemma is None:
            raise InvalidDilemmaError(dilemma_id)
        return dilemma

    # -------------------------------------------------------------------------
    # Turns
    # -------------------------------------------------------------------------

    async def submit_argument(self, session_id: str, argument: str) -> ArgueResponse:
        """Run one turn: reserve, call the opponent, persist, commit."""
        text = (argument or "").strip()
        if not text:
            raise InvalidArgumentError("argument must not be empty")
        if len(text) > MAX_ARGUMENT_LENGTH:
            raise InvalidArgumentError(
                f"argument must be at most {MAX_ARGUMENT_LENGTH} characters"
            )

        session = self._get_session(session_id)

        async with session.lock:
            turn_number = session.reserve_turn()

        try:
            ai_response = await self._opponent.respond(session, text)
            turn = self._repo.add_turn(
                session.id,
                Turn(turn_number=turn_number, player_argument=text, ai_response=ai_response),
            )
        except BaseException:
            # BaseException so a cancelled request also frees the slot
            session.release_turn()
            logger.warning(f"Turn {turn_number} of debate {session.id} rolled back")
            raise

        is_last = session.commit_turn(turn)
        if is_last:
            self._repo.update_status(session.id, DebateStatus.JUDGING)
            logger.info(f"Debate {session.id} reached its last turn, awaiting verdict")

        logger.debug(f"Debate {session.id} turn {turn_number} stored")

        return ArgueResponse(
            turn=turn_number,
            ai_response=turn.ai_response,
            is_last_turn=is_last,
            turns_remaining=session.turns_remaining,
        )

    # -------------------------------------------------------------------------
    # Verdict
    # -------------------------------------------------------------------------

    async def request_verdict(self, session_id: str) -> Verdict:
        """Judge the debate once; later calls return the stored verdict."""
        existing = self._repo.get_verdict(session_id)
        if existing is not None:
            record = self._repo.get_debate(session_id)
            if record is not None:
                # Heals a crash between storing the verdict and completing the row
                self._complete_stored(record.id, record.status)
            self._cache.evict(session_id)
            logger.debug(f"Returning stored verdict for debate {session_id}")
            return existing

        session = self._get_session(session_id)

        async with session.lock:
            session.ensure_idle()
            session.in_flight = True

        try:
            verdict = await self._judge.judge(session)
            stored = self._repo.save_verdict(session.id, verdict)
        except UpstreamGenerationError:
            raise
        except Exception:
            logger.exception(f"Storing verdict for debate {session.id} failed")
            raise
        finally:
            session.in_flight = False

        if session.status is DebateStatus.ACTIVE:
            logger.info(f"Debate {session.id} judged early after {len(session.turns)} turn(s)")
        self._complete_stored(session.id, session.status)
        for status in (DebateStatus.JUDGING, DebateStatus.COMPLETED):
            if session.status.can_advance_to(status):
                session.advance_status(status)
        self._cache.evict(session.id)

        logger.info(f"Debate {session.id} completed, winner={stored.winner.value}")
        return stored

    # -------------------------------------------------------------------------
    # Read
    # -------------------------------------------------------------------------

    async def get_full_debate(self, debate_id: str) -> FullDebate:
        """Snapshot of a debate in any status, straight from storage."""
        record = self._repo.get_debate(debate_id)
        if record is None:
            raise DebateNotFoundError(debate_id)

        if record.dilemma_id == CUSTOM_DILEMMA_ID:
            dilemma = self._parse_stored_custom_case(record)
        else:
            dilemma = self._catalog.get_dilemma(record.dilemma_id) or _placeholder_dilemma(record)

        return FullDebate(
            id=record.id,
            dilemma=dilemma,
            player_side=record.player_side,
            ai_side=record.ai_side,
            status=record.status,
            turns=self._repo.get_turns(debate_id),
            verdict=self._repo.get_verdict(debate_id),
            difficulty=record.difficulty,
            model=record.model,
            created_at=record.created_at,
            completed_at=record.completed_at,
        )

    # -------------------------------------------------------------------------
    # Session cache / rehydration
    # -------------------------------------------------------------------------

    def _get_session(self, session_id: str) -> DebateSession:
        """
        Return the live session, rebuilding it from storage on a cache miss.

        There is no await between the lookup and the cache insert, so two
        concurrent misses for the same ID cannot end up with two sessions.
        """
        session = self._cache.get(session_id)
        if session is not None:
            logger.debug(f"Session cache hit for debate {session_id}")
            return session

        logger.debug(f"Session cache miss for debate {session_id}, rehydrating")
        session = self._rehydrate(session_id)
        self._cache.put(session)
        return session

    def _rehydrate(self, session_id: str) -> DebateSession:
        record = self._repo.get_debate(session_id)
        if record is None:
            raise InvalidSessionError(session_id)

        if record.dilemma_id == CUSTOM_DILEMMA_ID:
            dilemma = self._parse_stored_custom_case(record)
        else:
            dilemma = self._catalog.get_dilemma(record.dilemma_id)
            if dilemma is None:
                raise DataIntegrityError(
                    record.id, f"dilemma {record.dilemma_id} is not in the catalog"
                )

        turns = self._repo.get_turns(record.id)
        difficulty = resolve_difficulty(record.difficulty)
        max_turns = self._settings.max_turns

        status = record.status
        if status is not DebateStatus.COMPLETED and self._repo.get_verdict(record.id) is not None:
            logger.info(f"Debate {record.id} has a stored verdict, completing it")
            self._complete_stored(record.id, status)
            status = DebateStatus.COMPLETED

        session = DebateSession(
            id=record.id,
            dilemma=dilemma,
            player_side=record.player_side,
            ai_side=record.ai_side,
            difficulty=difficulty,
            model=resolve_model(record.model, difficulty),
            max_turns=max_turns,
            status=status,
            turns=turns,
            current_turn=len(turns),
        )

        if session.status is DebateStatus.ACTIVE and len(turns) >= max_turns:
            logger.info(f"Debate {record.id} has all turns stored, moving to judging")
            self._repo.update_status(record.id, DebateStatus.JUDGING)
            session.advance_status(DebateStatus.JUDGING)

        logger.debug(
            f"Rehydrated debate {record.id}: status={session.status.value}, "
            f"turns={len(turns)}"
        )
        return session

    def _complete_stored(self, debate_id: str, status: DebateStatus) -> None:
        """Move a judged debate's row to completed, passing through judging."""
        if status is DebateStatus.ACTIVE:
            self._repo.update_status(debate_id, DebateStatus.JUDGING)
        if status is not DebateStatus.COMPLETED:
            self._repo.update_status(debate_id, DebateStatus.COMPLETED)

    def _parse_stored_custom_case(self, record: DebateRecord) -> Dilemma:
        try:
            return parse_custom_case(record.custom_case_data)
        except (ValueError, TypeError) as e:
            logger.error(f"Stored custom case for debate {record.id} is unreadable: {e}")
            raise DataIntegrityError(record.id, "custom case payload is unreadable")


def _coerce_catalog_id(value: Union[int, str]) -> Optional[int]:
    """Catalog IDs arrive as JSON numbers or numeric strings."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _placeholder_dilemma(record: DebateRecord) -> Dilemma:
    """Stand-in for a catalog entry that has since been removed."""
    return Dilemma(
        id=record.dilemma_id,
        title=record.dilemma_title or "Unknown Case",
        description="Case details not available.",
        context="Legal context not available.",
        positions=Positions(
            prosecution="Position not available.",
            defense="Position not available.",
        ),
    )

