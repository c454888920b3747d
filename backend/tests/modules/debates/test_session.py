"""Tests for live debate sessions and the session cache."""

import pytest

from modules.dilemmas.catalog import DILEMMAS
from modules.dilemmas.models import Side
from modules.debates.difficulty import DIFFICULTIES
from modules.debates.exceptions import SessionBusyError, SessionEndedError
from modules.debates.models import DebateStatus, Turn
from modules.debates.session import DebateSession, SessionCache


def create_session(**overrides) -> DebateSession:
    data = {
        "id": "session-1",
        "dilemma": DILEMMAS[0],
        "player_side": Side.PROSECUTION,
        "ai_side": Side.DEFENSE,
        "difficulty": DIFFICULTIES["associate"],
        "model": "llama-3.3-70b-versatile",
        "max_turns": 3,
    }
    data.update(overrides)
    return DebateSession(**data)


def turn(n: int) -> Turn:
    return Turn(turn_number=n, player_argument=f"A{n}", ai_response=f"R{n}")


class TestReserveTurn:
    def test_reserve_increments(self):
        session = create_session()
        assert session.reserve_turn() == 1
        assert session.in_flight is True
        assert session.turns_remaining == 2

    def test_reserve_while_in_flight(self):
        session = create_session()
        session.reserve_turn()
        with pytest.raises(SessionBusyError):
            session.reserve_turn()
        assert session.current_turn == 1

    def test_reserve_when_not_active(self):
        session = create_session(status=DebateStatus.JUDGING)
        with pytest.raises(SessionEndedError):
            session.reserve_turn()

    def test_reserve_when_turns_exhausted(self):
        session = create_session(turns=[turn(1), turn(2), turn(3)], current_turn=3)
        with pytest.raises(SessionEndedError):
            session.reserve_turn()


class TestReleaseTurn:
    def test_release_restores_counter(self):
        session = create_session()
        session.reserve_turn()
        session.release_turn()
        assert session.current_turn == 0
        assert session.in_flight is False
        assert session.reserve_turn() == 1

    def test_release_without_reservation_is_noop(self):
        session = create_session(turns=[turn(1)], current_turn=1)
        session.release_turn()
        assert session.current_turn == 1


class TestCommitTurn:
    def test_commit_mid_debate(self):
        session = create_session()
        session.reserve_turn()
        assert session.commit_turn(turn(1)) is False
        assert session.status == DebateStatus.ACTIVE
        assert session.in_flight is False
        assert len(session.turns) == 1

    def test_commit_last_turn_moves_to_judging(self):
        session = create_session(turns=[turn(1), turn(2)], current_turn=2)
        session.reserve_turn()
        assert session.commit_turn(turn(3)) is True
        assert session.status == DebateStatus.JUDGING
        assert session.turns_remaining == 0


class TestAdvanceStatus:
    def test_forward_steps(self):
        session = create_session()
        session.advance_status(DebateStatus.JUDGING)
        session.advance_status(DebateStatus.COMPLETED)
        assert session.status == DebateStatus.COMPLETED

    def test_active_may_skip_to_completed(self):
        session = create_session()
        session.advance_status(DebateStatus.COMPLETED)
        assert session.status == DebateStatus.COMPLETED

    @pytest.mark.parametrize("current,target", [
        (DebateStatus.JUDGING, DebateStatus.ACTIVE),
        (DebateStatus.COMPLETED, DebateStatus.JUDGING),
        (DebateStatus.JUDGING, DebateStatus.JUDGING),
    ])
    def test_never_backward_or_in_place(self, current, target):
        session = create_session(status=current)
        with pytest.raises(SessionEndedError):
            session.advance_status(target)
        assert session.status == current


class TestPositions:
    def test_positions_follow_sides(self):
        session = create_session(player_side=Side.DEFENSE, ai_side=Side.PROSECUTION)
        assert session.player_position == DILEMMAS[0].positions.defense
        assert session.ai_position == DILEMMAS[0].positions.prosecution


class TestSessionCache:
    def test_put_get_evict(self):
        cache = SessionCache()
        session = create_session()

        cache.put(session)
        assert cache.get("session-1") is session
        assert "session-1" in cache
        assert len(cache) == 1

        cache.evict("session-1")
        assert cache.get("session-1") is None
        assert len(cache) == 0

    def test_completed_sessions_not_cached(self):
        cache = SessionCache()
        cache.put(create_session(status=DebateStatus.COMPLETED))
        assert "session-1" not in cache

    def test_evict_missing_is_noop(self):
        SessionCache().evict("missing")

    def test_clear(self):
        cache = SessionCache()
        cache.put(create_session())
        cache.put(create_session(id="session-2"))
        cache.clear()
        assert len(cache) == 0
