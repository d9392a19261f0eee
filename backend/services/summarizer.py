"""Optional natural-language "why this candidate?" summaries."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from config import settings
from models.schemas.requirement import Requirement
from models.schemas.scored_candidate import ScoredCandidate
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

SUMMARY_UNAVAILABLE = "AI summary not available (API Key missing)."
SUMMARY_FAILED = "Summary generation failed."

TextGenerator = Callable[[str], Awaitable[str | None]]
Summarizer = Callable[[ScoredCandidate, Requirement], Awaitable[str]]


async def summarize(
    scored: ScoredCandidate,
    requirement: Requirement,
    generate: TextGenerator | None = None,
) -> str:
    """Generate a short match insight for one scored candidate."""
    if generate is None:
        if not settings.gemini_api_key:
            return SUMMARY_UNAVAILABLE
        generate = gemini_client.generate_text

    prompt = prompt_builder.build_summary_prompt(scored, requirement)
    try:
        text = await generate(prompt)
    except Exception as e:
        logger.warning("Summary for %s failed: %s", scored.candidate.id, e)
        return SUMMARY_FAILED
    return text.strip() if text and text.strip() else SUMMARY_FAILED


async def attach_summaries(
    items: list[ScoredCandidate],
    requirement: Requirement,
    summarizer: Summarizer | None = None,
) -> list[ScoredCandidate]:
    """Summarize every item concurrently; returns updated copies in order."""
    summarizer = summarizer or summarize
    summaries = await asyncio.gather(*(summarizer(item, requirement) for item in items))
    return [
        item.model_copy(update={"match_summary": text})
        for item, text in zip(items, summaries)
    ]
