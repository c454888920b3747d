"""
AI judge backed by an OpenAI-compatible chat model.

The judge is asked for a JSON verdict. Models frequently wrap JSON in prose
or code fences, so the outermost object is extracted before parsing. Any
output that still cannot be parsed into a Verdict is replaced by a fixed
fallback verdict; only transport/provider failures are errors.
"""

import logging
import re
from typing import Optional

from langchain_core.exceptions import OutputParserException
from langchain_core.messages import HumanMessage
from langchain_core.output_parsers import JsonOutputParser
from pydantic import ValidationError as PydanticValidationError

from providers import build_model_config, get_provider
from shared.config import Settings, get_settings

from .exceptions import UpstreamGenerationError
from .models import ScoreCard, Verdict, Winner
from .prompts import build_judge_prompt
from .session import DebateSession

logger = logging.getLogger(__name__)

JUDGE_TEMPERATURE = 0.3
JUDGE_MAX_TOKENS = 800

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def fallback_verdict() -> Verdict:
    """Verdict used when the judge's output is unusable."""
    return Verdict(
        winner=Winner.AI,
        human_scores=ScoreCard(
            legal_reasoning=60, persuasiveness=60, rebuttal_quality=60, overall=60
        ),
        ai_scores=ScoreCard(
            legal_reasoning=70, persuasiveness=70, rebuttal_quality=70, overall=70
        ),
        human_strengths=["Engaged with the material", "Attempted to make legal arguments"],
        human_improvements=["Cite more specific legal principles", "Anticipate counterarguments better"],
        concepts_to_study=["Legal precedent", "Burden of proof"],
        key_takeaway="Strong legal arguments require both principle and precedent.",
        judge_summary=(
            "The debate was competitive. Focus on strengthening your legal reasoning "
            "with specific citations and precedents."
        ),
    )


def parse_verdict(text: str) -> Verdict:
    """
    Parse raw judge output into a Verdict, falling back on failure.

    Never raises for malformed content.
    """
    match = _JSON_OBJECT.search(text or "")
    candidate = match.group(0) if match else (text or "")

    parser = JsonOutputParser(pydantic_object=Verdict)
    try:
        parsed = parser.parse(candidate)
        return Verdict.model_validate(parsed)
    except (OutputParserException, PydanticValidationError, TypeError) as e:
        logger.warning(f"Judge output could not be parsed, using fallback verdict: {e}")
        return fallback_verdict()


class LLMJudge:
    """
    Rules on a debate from its transcript.

    Implements IJudge. Uses the debate's model at a low temperature.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    async def judge(self, session: DebateSession) -> Verdict:
        prompt = build_judge_prompt(session)

        try:
            llm = get_provider(self._settings.llm_provider).get_llm(
                build_model_config(session.model, self._settings),
                temperature=JUDGE_TEMPERATURE,
                max_tokens=JUDGE_MAX_TOKENS,
            )
            response = await llm.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            logger.exception(f"Judge call failed for debate {session.id}")
            raise UpstreamGenerationError("judge", "model call failed", str(e)) from e

        content = response.content if isinstance(response.content, str) else ""
        return parse_verdict(content)
