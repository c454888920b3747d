"""
Opponent difficulty levels and selectable models.

A debate captures its difficulty and model at creation time and uses them
for every opponent turn. Both are stored on the debate row so a debate
rebuilt after a restart keeps arguing at the level it was started with.
"""

import logging
from typing import Optional

from pydantic import Field

from shared.models import CamelModel

logger = logging.getLogger(__name__)

BASELINE_DIFFICULTY = "associate"
BASELINE_MODEL = "llama-3.3-70b-versatile"


class ModelOption(CamelModel):
    """A chat model the player may pick for the opponent."""

    model_config = {"frozen": True}

    id: str
    name: str
    description: str
    speed: str


class DifficultyLevel(CamelModel):
    """
    An opponent persona.

    The prompt modifier is prepended to every opponent prompt and is never
    sent to the client.
    """

    model_config = {"frozen": True}

    id: str
    name: str
    description: str
    model: str = Field(..., description="Default model for this level")
    temperature: float = Field(..., ge=0.0, le=2.0)
    aggressiveness: str
    prompt_modifier: str = Field(..., exclude=True)


class DifficultyOption(CamelModel):
    """Public view of a difficulty level."""

    id: str
    name: str
    description: str
    default_model: str


class ConfigDefaults(CamelModel):
    difficulty: str
    model: str


class AppConfigResponse(CamelModel):
    """Options the client offers when starting a debate."""

    models: list[ModelOption]
    difficulties: list[DifficultyOption]
    defaults: ConfigDefaults


MODELS: dict[str, ModelOption] = {
    m.id: m
    for m in (
        ModelOption(
            id="llama-3.3-70b-versatile",
            name="Llama 3.3 70B",
            description="Best quality, slower",
            speed="280 T/sec",
        ),
        ModelOption(
            id="llama-3.1-8b-instant",
            name="Llama 3.1 8B",
            description="Fast responses, lighter",
            speed="560 T/sec",
        ),
        ModelOption(
            id="llama3-70b-8192",
            name="Llama 3 70B",
            description="Legacy model, reliable",
            speed="330 T/sec",
        ),
        ModelOption(
            id="mixtral-8x7b-32768",
            name="Mixtral 8x7B",
            description="Good for complex reasoning",
            speed="480 T/sec",
        ),
        ModelOption(
            id="gemma2-9b-it",
            name="Gemma 2 9B",
            description="Google model, balanced",
            speed="440 T/sec",
        ),
    )
}


DIFFICULTIES: dict[str, DifficultyLevel] = {
    d.id: d
    for d in (
        DifficultyLevel(
            id="law_student",
            name="Law Student",
            description="Learning the ropes - makes occasional weak arguments",
            model="llama-3.1-8b-instant",
            temperature=0.8,
            aggressiveness="gentle",
            prompt_modifier=(
                "You are a first-year law student practicing debate. While you try to make "
                "good arguments, you sometimes:\n"
                "- Miss obvious counterpoints\n"
                "- Make arguments that are emotionally compelling but legally weak\n"
                "- Occasionally concede good points your opponent makes\n"
                "- Use simpler legal language\n"
                "Keep responses under 150 words. Be earnest but not overly sophisticated."
            ),
        ),
        DifficultyLevel(
            id="associate",
            name="Associate",
            description="Competent opponent - solid arguments, some gaps",
            model="llama-3.3-70b-versatile",
            temperature=0.7,
            aggressiveness="moderate",
            prompt_modifier=(
                "You are a junior associate at a law firm with 2-3 years experience. You make "
                "solid arguments and know the basics well, but:\n"
                "- Sometimes miss nuanced counterarguments\n"
                "- Occasionally over-rely on one line of reasoning\n"
                "- May not always anticipate every weakness in your position\n"
                "Keep responses under 180 words. Be professional and competent."
            ),
        ),
        DifficultyLevel(
            id="partner",
            name="Senior Partner",
            description="Aggressive litigator - finds every weakness",
            model="llama-3.3-70b-versatile",
            temperature=0.6,
            aggressiveness="aggressive",
            prompt_modifier=(
                "You are a senior litigation partner with 20+ years of trial experience. You "
                "are known for:\n"
                "- Ruthlessly identifying weaknesses in opposing arguments\n"
                "- Never conceding any point, always finding a counter\n"
                "- Using rhetorical techniques to undermine opponent credibility\n"
                "- Anticipating and preemptively addressing counterarguments\n"
                "Keep responses under 200 words. Be aggressive but professional - like a real "
                "courtroom shark."
            ),
        ),
        DifficultyLevel(
            id="supreme_court",
            name="Supreme Court",
            description="Elite advocate - cites precedents, philosophical depth",
            model="llama-3.3-70b-versatile",
            temperature=0.5,
            aggressiveness="masterful",
            prompt_modifier=(
                "You are a Supreme Court advocate who has argued dozens of cases before the "
                "highest courts. You are known for:\n"
                "- Citing relevant case law and legal precedents by name (e.g., \"As "
                "established in Dudley and Stephens...\")\n"
                "- Weaving philosophical and jurisprudential frameworks into arguments\n"
                "- Anticipating not just immediate counterarguments but second and third-order "
                "implications\n"
                "- Using precise legal terminology and impeccable logical structure\n"
                "- Never making an argument that couldn't withstand strict scrutiny\n"
                "Keep responses under 220 words. Demonstrate mastery of legal reasoning at the "
                "highest level."
            ),
        ),
    )
}


def resolve_difficulty(
    difficulty_id: Optional[str],
    default: str = BASELINE_DIFFICULTY,
) -> DifficultyLevel:
    """
    Look up a difficulty level, falling back to the default.

    Unknown IDs are not an error: older clients and stored rows may carry
    levels that have since been renamed.
    """
    if difficulty_id in DIFFICULTIES:
        return DIFFICULTIES[difficulty_id]  # type: ignore[index]
    if difficulty_id is not None:
        logger.debug(f"Unknown difficulty '{difficulty_id}', using '{default}'")
    return DIFFICULTIES.get(default, DIFFICULTIES[BASELINE_DIFFICULTY])


def resolve_model(model_id: Optional[str], difficulty: DifficultyLevel) -> str:
    """Return the requested model if it is offered, else the difficulty's default."""
    if model_id and model_id in MODELS:
        return model_id
    return difficulty.model


def model_display_name(model_id: str) -> str:
    """Human-readable name for a model ID."""
    option = MODELS.get(model_id)
    return option.name if option else model_id


def get_app_config(
    default_difficulty: str = BASELINE_DIFFICULTY,
    default_model: str = BASELINE_MODEL,
) -> AppConfigResponse:
    """Build the options payload for GET /api/config."""
    return AppConfigResponse(
        models=list(MODELS.values()),
        difficulties=[
            DifficultyOption(
                id=d.id,
                name=d.name,
                description=d.description,
                default_model=d.model,
            )
            for d in DIFFICULTIES.values()
        ],
        defaults=ConfigDefaults(difficulty=default_difficulty, model=default_model),
    )
