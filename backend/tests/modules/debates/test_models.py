"""Tests for debates module data models."""

import pytest
from pydantic import ValidationError

from modules.dilemmas.models import Side
from modules.debates.models import (
    ArgueResponse,
    CreateDebateRequest,
    DebateStatus,
    ScoreCard,
    StartDebateResponse,
    DilemmaView,
    SubmitArgumentRequest,
    Turn,
    Verdict,
    Winner,
)


def create_verdict_payload(**overrides) -> dict:
    """Helper to create a camelCase verdict payload as the judge returns it."""
    data = {
        "winner": "ai",
        "humanScores": {
            "legalReasoning": 55, "persuasiveness": 60, "rebuttalQuality": 50, "overall": 56,
        },
        "aiScores": {
            "legalReasoning": 72, "persuasiveness": 70, "rebuttalQuality": 74, "overall": 73,
        },
        "humanStrengths": ["Good framing"],
        "humanImprovements": ["Rebut directly"],
        "conceptsToStudy": ["Mens rea"],
        "keyTakeaway": "Answer the other side.",
        "judgeSummary": "The AI rebutted more directly.",
    }
    data.update(overrides)
    return data


class TestDebateStatus:
    def test_status_values(self):
        assert DebateStatus.ACTIVE == "active"
        assert DebateStatus.JUDGING == "judging"
        assert DebateStatus.COMPLETED == "completed"

    def test_forward_only(self):
        assert DebateStatus.ACTIVE.can_advance_to(DebateStatus.JUDGING)
        assert DebateStatus.JUDGING.can_advance_to(DebateStatus.COMPLETED)
        assert not DebateStatus.COMPLETED.can_advance_to(DebateStatus.ACTIVE)
        assert not DebateStatus.JUDGING.can_advance_to(DebateStatus.JUDGING)

    def test_predecessors(self):
        assert DebateStatus.ACTIVE.predecessors() == []
        assert DebateStatus.JUDGING.predecessors() == [DebateStatus.ACTIVE]
        assert DebateStatus.COMPLETED.predecessors() == [
            DebateStatus.ACTIVE,
            DebateStatus.JUDGING,
        ]


class TestVerdict:
    def test_parses_camel_case(self):
        verdict = Verdict.model_validate(create_verdict_payload())
        assert verdict.winner == Winner.AI
        assert verdict.human_scores.legal_reasoning == 55
        assert verdict.ai_scores.rebuttal_quality == 74
        assert verdict.concepts_to_study == ["Mens rea"]

    def test_serializes_camel_case(self):
        verdict = Verdict.model_validate(create_verdict_payload())
        data = verdict.model_dump(by_alias=True, mode="json")
        assert data["humanScores"]["legalReasoning"] == 55
        assert data["keyTakeaway"] == "Answer the other side."
        assert data["winner"] == "ai"

    def test_winner_case_insensitive(self):
        verdict = Verdict.model_validate(create_verdict_payload(winner=" Human "))
        assert verdict.winner == Winner.HUMAN

    def test_unknown_winner_rejected(self):
        with pytest.raises(ValidationError):
            Verdict.model_validate(create_verdict_payload(winner="draw"))

    def test_feedback_defaults(self):
        scores = ScoreCard(legal_reasoning=1, persuasiveness=2, rebuttal_quality=3, overall=4)
        verdict = Verdict(winner=Winner.AI, human_scores=scores, ai_scores=scores)
        assert verdict.human_strengths == []
        assert verdict.judge_summary == ""

    def test_missing_scores_rejected(self):
        payload = create_verdict_payload()
        del payload["aiScores"]
        with pytest.raises(ValidationError):
            Verdict.model_validate(payload)


class TestTurn:
    def test_turn_numbers_start_at_one(self):
        with pytest.raises(ValidationError):
            Turn(turn_number=0, player_argument="A", ai_response="B")


class TestRequests:
    def test_create_request_accepts_camel_case(self):
        request = CreateDebateRequest.model_validate({
            "dilemmaId": 3,
            "playerSide": "defense",
            "difficulty": "partner",
        })
        assert request.dilemma_id == 3
        assert request.player_side == "defense"
        assert request.model is None
        assert request.custom_case is None

    def test_create_request_custom(self):
        request = CreateDebateRequest.model_validate({
            "dilemmaId": "custom",
            "playerSide": "prosecution",
            "customCase": {"title": "T"},
        })
        assert request.dilemma_id == "custom"
        assert request.custom_case == {"title": "T"}

    def test_submit_request_defaults_to_empty_argument(self):
        request = SubmitArgumentRequest.model_validate({"sessionId": "abc"})
        assert request.argument == ""


class TestResponses:
    def test_start_response_serializes_camel_case(self):
        response = StartDebateResponse(
            session_id="abc",
            dilemma=DilemmaView(title="T", description="D", context="C"),
            player_side=Side.PROSECUTION,
            ai_side=Side.DEFENSE,
            player_position="P",
            ai_position="Q",
            max_turns=3,
            difficulty="Associate",
            model="Llama 3.3 70B",
        )
        data = response.model_dump(by_alias=True, mode="json")
        assert data["sessionId"] == "abc"
        assert data["playerSide"] == "prosecution"
        assert data["aiSide"] == "defense"
        assert data["maxTurns"] == 3

    def test_argue_response_serializes_camel_case(self):
        data = ArgueResponse(
            turn=3, ai_response="R", is_last_turn=True, turns_remaining=0
        ).model_dump(by_alias=True)
        assert data == {"turn": 3, "aiResponse": "R", "isLastTurn": True, "turnsRemaining": 0}
