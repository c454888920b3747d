"""
Tests for debate API endpoints.

The full-flow tests run against a DebateService wired with in-memory
storage and mocked AI collaborators; the error-mapping tests use a mocked
service.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_debate_service
from modules.debates.exceptions import (
    DataIntegrityError,
    SessionEndedError,
    SessionBusyError,
    UpstreamGenerationError,
)


@pytest.fixture
def app(debate_service):
    """App whose debate routes use the test service."""
    app = create_app()
    app.dependency_overrides[get_debate_service] = lambda: debate_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def mock_service() -> MagicMock:
    service = MagicMock()
    service.create_debate = AsyncMock()
    service.submit_argument = AsyncMock()
    service.request_verdict = AsyncMock()
    service.get_full_debate = AsyncMock()
    return service


@pytest.fixture
def mock_client(mock_service) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_debate_service] = lambda: mock_service
    return TestClient(app)


def start(client: TestClient, **overrides) -> dict:
    body = {"dilemmaId": 1, "playerSide": "prosecution"}
    body.update(overrides)
    response = client.post("/api/debate/start", json=body)
    assert response.status_code == 200, response.text
    return response.json()


class TestStartDebate:
    def test_start_catalog_debate(self, client):
        data = start(client)

        assert data["sessionId"]
        assert data["dilemma"]["title"] == "The Speluncean Explorers"
        assert data["playerSide"] == "prosecution"
        assert data["aiSide"] == "defense"
        assert data["maxTurns"] == 3
        assert data["difficulty"] == "Associate"
        assert data["model"] == "Llama 3.3 70B"

    def test_start_custom_debate(self, client, custom_case_payload):
        data = start(client, dilemmaId="custom", playerSide="defense", customCase=custom_case_payload)

        assert data["dilemma"]["title"] == "The Drone Delivery Trespass"
        assert data["dilemma"]["context"] == "Custom case created by user."
        assert data["aiPosition"] == custom_case_payload["positions"]["prosecution"]

    def test_unknown_dilemma(self, client):
        response = client.post(
            "/api/debate/start", json={"dilemmaId": 9999, "playerSide": "prosecution"}
        )

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "INVALID_DILEMMA"

    def test_invalid_side(self, client):
        response = client.post(
            "/api/debate/start", json={"dilemmaId": 1, "playerSide": "jury"}
        )

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "INVALID_SIDE"

    def test_custom_without_case(self, client):
        response = client.post(
            "/api/debate/start", json={"dilemmaId": "custom", "playerSide": "defense"}
        )

        assert response.status_code == 400


class TestDebateFlow:
    def test_three_turns_then_verdict(self, client, verdict):
        session_id = start(client)["sessionId"]

        for n in (1, 2, 3):
            response = client.post(
                "/api/debate/argue",
                json={"sessionId": session_id, "argument": f"Point {n}"},
            )
            assert response.status_code == 200
            data = response.json()
            assert data == {
                "turn": n,
                "aiResponse": f"Counter to: Point {n}",
                "isLastTurn": n == 3,
                "turnsRemaining": 3 - n,
            }

        response = client.post("/api/debate/argue", json={"sessionId": session_id, "argument": "More"})
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "SESSION_ENDED"

        first = client.post("/api/debate/judge", json={"sessionId": session_id})
        second = client.post("/api/debate/judge", json={"sessionId": session_id})

        assert first.status_code == 200
        assert first.json() == second.json()
        assert first.json()["winner"] == "human"
        assert first.json()["humanScores"]["legalReasoning"] == 82

        full = client.get(f"/api/debate/{session_id}")
        assert full.status_code == 200
        data = full.json()
        assert data["status"] == "completed"
        assert [t["turnNumber"] for t in data["turns"]] == [1, 2, 3]
        assert data["verdict"]["keyTakeaway"] == verdict.key_takeaway
        assert data["completedAt"] is not None

    def test_empty_argument(self, client):
        session_id = start(client)["sessionId"]

        response = client.post("/api/debate/argue", json={"sessionId": session_id, "argument": "   "})

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "INVALID_ARGUMENT"

    def test_unknown_session(self, client):
        response = client.post("/api/debate/argue", json={"sessionId": "nope", "argument": "Hi"})

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "INVALID_SESSION"

    def test_judge_unknown_session(self, client):
        response = client.post("/api/debate/judge", json={"sessionId": "nope"})
        assert response.status_code == 400

    def test_get_unknown_debate(self, client):
        response = client.get("/api/debate/does-not-exist")

        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "DEBATE_NOT_FOUND"


class TestErrorMapping:
    def test_busy_session(self, mock_client, mock_service):
        mock_service.submit_argument.side_effect = SessionBusyError("s1")

        response = mock_client.post("/api/debate/argue", json={"sessionId": "s1", "argument": "A"})

        assert response.status_code == 409
        assert response.json()["detail"]["error"] == "SESSION_BUSY"

    def test_busy_verdict(self, mock_client, mock_service):
        mock_service.request_verdict.side_effect = SessionBusyError("s1")

        response = mock_client.post("/api/debate/judge", json={"sessionId": "s1"})

        assert response.status_code == 409

    def test_upstream_failure(self, mock_client, mock_service):
        mock_service.submit_argument.side_effect = UpstreamGenerationError(
            "opponent", "model call failed", "timeout"
        )

        response = mock_client.post("/api/debate/argue", json={"sessionId": "s1", "argument": "A"})

        assert response.status_code == 500
        detail = response.json()["detail"]
        assert detail["error"] == "UPSTREAM_GENERATION_FAILED"
        assert detail["details"]["service"] == "opponent"

    def test_judge_upstream_failure(self, mock_client, mock_service):
        mock_service.request_verdict.side_effect = UpstreamGenerationError("judge", "model call failed")

        response = mock_client.post("/api/debate/judge", json={"sessionId": "s1"})

        assert response.status_code == 500

    def test_corrupt_debate(self, mock_client, mock_service):
        mock_service.get_full_debate.side_effect = DataIntegrityError("d1", "custom case unreadable")

        response = mock_client.get("/api/debate/d1")

        assert response.status_code == 500
        assert response.json()["detail"]["error"] == "DATA_INTEGRITY"

    def test_missing_session_id_is_rejected(self, mock_client, mock_service):
        response = mock_client.post("/api/debate/argue", json={"argument": "A"})

        assert response.status_code == 422
        mock_service.submit_argument.assert_not_called()

    def test_verdict_on_ended_debate(self, mock_client, mock_service):
        mock_service.request_verdict.side_effect = SessionEndedError("s1", "completed")

        response = mock_client.post("/api/debate/judge", json={"sessionId": "s1"})

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "SESSION_ENDED"

    def test_server_faults_are_logged(self, mock_client, mock_service, caplog):
        mock_service.request_verdict.side_effect = DataIntegrityError("s1", "turns out of order")

        with caplog.at_level("ERROR", logger="modules.debates.routes"):
            response = mock_client.post("/api/debate/judge", json={"sessionId": "s1"})

        assert response.status_code == 500
        assert "DATA_INTEGRITY" in caplog.text

    def test_client_errors_are_not_logged(self, mock_client, mock_service, caplog):
        mock_service.submit_argument.side_effect = SessionBusyError("s1")

        with caplog.at_level("ERROR", logger="modules.debates.routes"):
            mock_client.post("/api/debate/argue", json={"sessionId": "s1", "argument": "A"})

        assert not [r for r in caplog.records if r.name == "modules.debates.routes"]


class TestRobotsHeader:
    def test_header_on_debate_routes(self, client):
        response = client.post("/api/debate/judge", json={"sessionId": "nope"})
        assert response.headers["X-Robots-Tag"] == "noindex, nofollow"
