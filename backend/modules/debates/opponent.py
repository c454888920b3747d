"""
AI opponent backed by an OpenAI-compatible chat model.
"""

import logging
from typing import Optional

from langchain_core.messages import HumanMessage

from providers import build_model_config, get_provider
from shared.config import Settings, get_settings

from .exceptions import UpstreamGenerationError
from .prompts import build_opponent_prompt
from .session import DebateSession

logger = logging.getLogger(__name__)

OPPONENT_MAX_TOKENS = 500
EMPTY_RESPONSE_FALLBACK = "The AI opponent could not formulate a response."


class LLMOpponentResponder:
    """
    Generates counter-arguments in character for the debate's difficulty.

    Implements IOpponentResponder. Uses the debate's model and the
    difficulty's temperature.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    async def respond(self, session: DebateSession, argument: str) -> str:
        prompt = build_opponent_prompt(session, argument)

        try:
            llm = get_provider(self._settings.llm_provider).get_llm(
                build_model_config(session.model, self._settings),
                temperature=session.difficulty.temperature,
                max_tokens=OPPONENT_MAX_TOKENS,
            )
            response = await llm.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            logger.exception(f"Opponent call failed for debate {session.id}")
            raise UpstreamGenerationError("opponent", "model call failed", str(e)) from e

        content = response.content if isinstance(response.content, str) else ""
        content = content.strip()
        if not content:
            logger.warning(f"Opponent returned empty content for debate {session.id}")
            return EMPTY_RESPONSE_FALLBACK
        return content
