"""
Client configuration endpoint.

Lists the models and difficulty levels a player can choose from.
"""

from fastapi import APIRouter

from shared.config import get_settings
from modules.debates.difficulty import AppConfigResponse, get_app_config

router = APIRouter()


@router.get("/config", response_model=AppConfigResponse)
async def get_config() -> AppConfigResponse:
    """
    Get the selectable models, difficulty levels and their defaults.
    """
    settings = get_settings()
    return get_app_config(
        default_difficulty=settings.default_difficulty,
        default_model=settings.default_model,
    )
