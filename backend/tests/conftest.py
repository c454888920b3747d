"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
an in-memory repository, the built-in catalog, AsyncMock AI collaborators,
and a DebateService wired from them.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from api.dependencies import reset_container
from shared.config import Settings, get_settings
from modules.dilemmas.catalog import StaticCaseCatalog
from modules.debates.models import ScoreCard, Verdict, Winner
from modules.debates.repository import InMemoryDebateRepository
from modules.debates.service import DebateService


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container and cached settings around each test."""
    reset_container()
    get_settings.cache_clear()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, storage_backend="memory", max_turns=3)


@pytest.fixture
def repository() -> InMemoryDebateRepository:
    return InMemoryDebateRepository()


@pytest.fixture
def catalog() -> StaticCaseCatalog:
    return StaticCaseCatalog()


@pytest.fixture
def verdict() -> Verdict:
    """A well-formed verdict in favour of the human."""
    return Verdict(
        winner=Winner.HUMAN,
        human_scores=ScoreCard(
            legal_reasoning=82, persuasiveness=78, rebuttal_quality=75, overall=80
        ),
        ai_scores=ScoreCard(
            legal_reasoning=70, persuasiveness=72, rebuttal_quality=68, overall=70
        ),
        human_strengths=["Clear statement of the necessity doctrine"],
        human_improvements=["Address the slippery-slope objection"],
        concepts_to_study=["R v Dudley and Stephens"],
        key_takeaway="Necessity arguments need a limiting principle.",
        judge_summary="The human framed the necessity defense more convincingly.",
    )


@pytest.fixture
def opponent() -> MagicMock:
    """Opponent whose reply echoes the argument it was given."""
    mock = MagicMock()
    mock.respond = AsyncMock(side_effect=lambda session, argument: f"Counter to: {argument}")
    return mock


@pytest.fixture
def judge(verdict: Verdict) -> MagicMock:
    mock = MagicMock()
    mock.judge = AsyncMock(return_value=verdict)
    return mock


@pytest.fixture
def debate_service(repository, catalog, opponent, judge, settings) -> DebateService:
    return DebateService(
        repository=repository,
        catalog=catalog,
        opponent=opponent,
        judge=judge,
        settings=settings,
    )


@pytest.fixture
def custom_case_payload() -> dict:
    """A custom case as a client would submit it (camelCase, no context)."""
    return {
        "title": "The Drone Delivery Trespass",
        "description": "A delivery drone crossed a farm at low altitude and spooked livestock.",
        "positions": {
            "prosecution": "Low-altitude flight over private land is trespass.",
            "defense": "Navigable airspace is not the landowner's property.",
        },
    }
