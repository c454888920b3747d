"""
Prompt builders for the opponent and the judge.

Both prompts are plain text assembled from the session's case facts and
transcript. The judge prompt asks for a camelCase JSON object matching the
Verdict model's aliases.
"""

from modules.dilemmas.models import Side

from .models import Turn
from .session import DebateSession


JUDGE_JSON_FORMAT = """{
  "winner": "human" or "ai",
  "humanScores": {
    "legalReasoning": <number>,
    "persuasiveness": <number>,
    "rebuttalQuality": <number>,
    "overall": <number>
  },
  "aiScores": {
    "legalReasoning": <number>,
    "persuasiveness": <number>,
    "rebuttalQuality": <number>,
    "overall": <number>
  },
  "humanStrengths": ["strength 1", "strength 2"],
  "humanImprovements": ["improvement 1", "improvement 2"],
  "conceptsToStudy": ["concept 1", "concept 2"],
  "keyTakeaway": "One sentence key lesson",
  "judgeSummary": "2-3 sentence summary of the debate and why the winner won"
}"""


def _history_block(turns: list[Turn], player_side: Side, ai_side: Side) -> str:
    return "\n\n".join(
        f"Human ({player_side.value}): {t.player_argument}\n"
        f"AI ({ai_side.value}): {t.ai_response}"
        for t in turns
    )


def build_opponent_prompt(session: DebateSession, argument: str) -> str:
    """
    Build the opponent prompt for the next turn.

    Includes the difficulty persona, the case, the AI's assigned position,
    all prior exchanges, and the player's new argument.
    """
    dilemma = session.dilemma
    ai_side = session.ai_side.value
    player_side = session.player_side.value

    history = _history_block(session.turns, session.player_side, session.ai_side)
    history_section = f"PREVIOUS EXCHANGES:\n{history}\n\n" if history else ""

    return (
        f"{session.difficulty.prompt_modifier}\n\n"
        f"You are arguing the {ai_side} position in a debate about \"{dilemma.title}\".\n\n"
        f"CASE BACKGROUND:\n{dilemma.description}\n\n"
        f"YOUR POSITION ({ai_side.upper()}):\n{session.ai_position}\n\n"
        f"LEGAL CONTEXT:\n{dilemma.context}\n\n"
        f"{history_section}"
        f"YOUR OPPONENT JUST ARGUED ({player_side}):\n\"{argument}\"\n\n"
        f"Respond with a counter-argument for the {ai_side}. "
        f"Stay in character for your skill level."
    )


def build_judge_prompt(session: DebateSession) -> str:
    """Build the judging prompt from the full transcript."""
    dilemma = session.dilemma
    player_side = session.player_side.value
    ai_side = session.ai_side.value

    transcript = "\n\n".join(
        f"--- Turn {t.turn_number} ---\n"
        f"HUMAN ({player_side.upper()}):\n{t.player_argument}\n\n"
        f"AI ({ai_side.upper()}):\n{t.ai_response}"
        for t in session.turns
    )

    return (
        "You are an impartial judge evaluating a legal debate. Judge the arguments on "
        "their merits, not on which side you personally agree with.\n\n"
        f"CASE: \"{dilemma.title}\"\n\n"
        f"CASE BACKGROUND:\n{dilemma.description}\n\n"
        f"LEGAL CONTEXT:\n{dilemma.context}\n\n"
        "POSITIONS:\n"
        f"- Prosecution: {dilemma.positions.prosecution}\n"
        f"- Defense: {dilemma.positions.defense}\n\n"
        f"The human argued for the {player_side}. The AI argued for the {ai_side}.\n\n"
        f"FULL DEBATE TRANSCRIPT:\n{transcript}\n\n"
        "Evaluate the debate and provide:\n"
        "1. WINNER: Who made the stronger legal arguments overall (\"human\" or \"ai\")\n"
        "2. SCORES: Rate each side 0-100 on Legal Reasoning, Persuasiveness, "
        "Rebuttal Quality, and Overall\n"
        "3. FEEDBACK: The human's strengths, areas to improve, and legal concepts "
        "worth studying\n"
        "4. KEY TAKEAWAY: One sentence the human should remember\n\n"
        "Respond in this exact JSON format:\n"
        f"{JUDGE_JSON_FORMAT}"
    )
