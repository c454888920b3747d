"""
Live debate sessions and the fast-path session cache.

A DebateSession is a rebuildable in-memory projection of a persisted debate
(row + turns). The repository is always the source of truth: sessions are
only mutated after the corresponding write has succeeded, and a session
that is missing from the cache is rebuilt from storage on demand.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Optional

from modules.dilemmas.models import Dilemma, Side

from .difficulty import DifficultyLevel
from .exceptions import SessionBusyError, SessionEndedError
from .models import DebateStatus, Turn


@dataclass
class DebateSession:
    """
    Working state of one debate.

    current_turn runs one ahead of len(turns) while a turn is in flight:
    the slot is reserved before the opponent is called and either committed
    or released once the call returns.
    """

    id: str
    dilemma: Dilemma
    player_side: Side
    ai_side: Side
    difficulty: DifficultyLevel
    model: str
    max_turns: int
    status: DebateStatus = DebateStatus.ACTIVE
    turns: list[Turn] = field(default_factory=list)
    current_turn: int = 0
    in_flight: bool = False
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False, compare=False)

    @property
    def turns_remaining(self) -> int:
        return max(self.max_turns - self.current_turn, 0)

    @property
    def player_position(self) -> str:
        return self.dilemma.positions.for_side(self.player_side)

    @property
    def ai_position(self) -> str:
        return self.dilemma.positions.for_side(self.ai_side)

    def ensure_idle(self) -> None:
        """Raise if another AI call for this session is still running."""
        if self.in_flight:
            raise SessionBusyError(self.id)

    def reserve_turn(self) -> int:
        """
        Claim the next turn slot.

        Must be called with self.lock held.

        Returns:
            The turn number reserved

        Raises:
            SessionEndedError: If the debate no longer accepts arguments
            SessionBusyError: If a previous turn is still in flight
        """
        if self.status is not DebateStatus.ACTIVE or self.current_turn >= self.max_turns:
            raise SessionEndedError(self.id, self.status.value)
        self.ensure_idle()
        self.current_turn += 1
        self.in_flight = True
        return self.current_turn

    def release_turn(self) -> None:
        """Undo a reservation after the opponent or the turn write failed."""
        if self.in_flight and self.current_turn > len(self.turns):
            self.current_turn -= 1
        self.in_flight = False

    def commit_turn(self, turn: Turn) -> bool:
        """
        Record a persisted turn.

        Returns:
            True if this was the final turn (status is now JUDGING)
        """
        self.turns.append(turn)
        self.in_flight = False
        if self.current_turn >= self.max_turns:
            self.advance_status(DebateStatus.JUDGING)
            return True
        return False

    def advance_status(self, target: DebateStatus) -> None:
        """Move status forward; never backward, never in place."""
        if not self.status.can_advance_to(target):
            raise SessionEndedError(self.id, self.status.value)
        self.status = target


class SessionCache:
    """
    Fast-path cache of live sessions keyed by debate ID.

    Holds debates with turn activity in progress. Completed debates are
    evicted and never re-admitted, since nothing can mutate them.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, DebateSession] = {}

    def get(self, session_id: str) -> Optional[DebateSession]:
        return self._sessions.get(session_id)

    def put(self, session: DebateSession) -> None:
        if session.status is DebateStatus.COMPLETED:
            return
        self._sessions[session.id] = session

    def evict(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def clear(self) -> None:
        self._sessions.clear()

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
