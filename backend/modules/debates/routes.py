"""
Debate API endpoints.

Provides REST endpoints for starting a debate, submitting turns,
requesting the verdict, and fetching a full debate for replay.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_debate_service
from shared.exceptions import ArgueError, ValidationError

from .interfaces import IDebateService
from .models import (
    ArgueResponse,
    CreateDebateRequest,
    FullDebate,
    JudgeRequest,
    StartDebateResponse,
    SubmitArgumentRequest,
    Verdict,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/start", response_model=StartDebateResponse)
async def start_debate(
    request: CreateDebateRequest,
    service: IDebateService = Depends(get_debate_service),
) -> StartDebateResponse:
    """
    Start a debate on a catalog dilemma or a custom case.

    The AI takes the side opposite the player's.
    """
    try:
        return await service.create_debate(request)
    except ValidationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())


@router.post("/argue", response_model=ArgueResponse)
async def submit_argument(
    request: SubmitArgumentRequest,
    service: IDebateService = Depends(get_debate_service),
) -> ArgueResponse:
    """
    Submit an argument and receive the AI opponent's counter-argument.
    """
    try:
        return await service.submit_argument(request.session_id, request.argument)
    except ArgueError as e:
        raise _to_http(e, request.session_id)


@router.post("/judge", response_model=Verdict)
async def request_verdict(
    request: JudgeRequest,
    service: IDebateService = Depends(get_debate_service),
) -> Verdict:
    """
    Get the judge's verdict. Repeated calls return the same verdict.
    """
    try:
        return await service.request_verdict(request.session_id)
    except ArgueError as e:
        raise _to_http(e, request.session_id)


@router.get("/{debate_id}", response_model=FullDebate)
async def get_debate(
    debate_id: str,
    service: IDebateService = Depends(get_debate_service),
) -> FullDebate:
    """
    Get a debate with its dilemma, turns and verdict (if judged).
    """
    try:
        return await service.get_full_debate(debate_id)
    except ArgueError as e:
        raise _to_http(e, debate_id)


def _to_http(error: ArgueError, debate_id: str) -> HTTPException:
    """Translate a service error using the status its class carries."""
    if not error.is_client_error:
        logger.error(f"Debate {debate_id} request failed: {error.code}: {error.message}")
    return HTTPException(status_code=error.status_code, detail=error.to_dict())
