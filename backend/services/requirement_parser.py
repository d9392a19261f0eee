"""Requirement parser: free text (query or JD) -> structured Requirement.

The text-understanding step is an injected async callable taking a prompt
and returning a JSON object (``gemini_client.generate_json`` by default).
Whatever goes wrong with it (no API key, timeout, API error, malformed or
invalid JSON) the parser degrades to keyword splitting and never raises.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import Enum

from pydantic import ValidationError

from config import settings
from models.schemas.requirement import Requirement
from services import gemini_client, prompt_builder
from services.keyword_extractor import extract_keywords_from_sentence, normalize
from services.profile_parser import parse_experience_range

logger = logging.getLogger(__name__)

Extractor = Callable[[str], Awaitable[dict | None]]


class ParseSource(str, Enum):
    AI = "ai"
    FALLBACK = "fallback"
    MANUAL = "manual"
    EMPTY = "empty"


def fallback_requirement(text: str | None) -> Requirement:
    """Degraded parse: the whole input becomes unstructured skills.

    Role, location, education and experience are left unknown. When no
    keyword survives filtering the trimmed text itself is the only skill,
    unless it is nothing but punctuation.
    """
    text = (text or "").strip()
    if not normalize(text):
        return Requirement()
    skills = extract_keywords_from_sentence(text)
    if not skills and text:
        skills = [text]
    return Requirement(skills=skills)


def _coerce_experience(payload: dict) -> dict:
    """NLU output sometimes states experience as prose ("5+ years") or a number."""
    experience = payload.get("experience")
    if isinstance(experience, bool):
        return {**payload, "experience": None}
    if isinstance(experience, (int, float)):
        return {**payload, "experience": {"min": experience}}
    if isinstance(experience, str):
        parsed = parse_experience_range(experience)
        return {**payload, "experience": parsed.model_dump() if parsed else None}
    return payload


class RequirementParser:
    """Parse search text with an NLU extractor, falling back to keywords."""

    def __init__(
        self,
        extractor: Extractor | None = None,
        timeout: float | None = None,
    ) -> None:
        self._extractor = extractor if extractor is not None else gemini_client.generate_json
        self.timeout = timeout if timeout is not None else settings.parse_timeout_seconds

    async def parse(self, text: str | None) -> Requirement:
        requirement, _ = await self.parse_with_source(text)
        return requirement

    async def parse_with_source(self, text: str | None) -> tuple[Requirement, ParseSource]:
        """Parse and report whether the AI result or the fallback was used."""
        query = (text or "").strip()
        if not query:
            return Requirement(), ParseSource.EMPTY

        if len(query) > settings.max_query_chars:
            logger.info("Truncating %d-char query to %d", len(query), settings.max_query_chars)
            query = query[: settings.max_query_chars]

        payload = await self._extract(query)
        if payload is not None:
            try:
                requirement = Requirement.model_validate(_coerce_experience(payload))
            except ValidationError as e:
                logger.warning("NLU payload failed validation, using fallback: %s", e)
            else:
                if not requirement.is_empty():
                    logger.info("Parsed requirement: %s", requirement.model_dump(exclude_none=True))
                    return requirement, ParseSource.AI
                logger.warning("NLU returned no usable fields, using fallback")

        requirement = fallback_requirement(query)
        logger.info("Fallback requirement skills: %s", requirement.skills)
        return requirement, ParseSource.FALLBACK

    async def _extract(self, query: str) -> dict | None:
        prompt = prompt_builder.build_requirement_prompt(query)
        try:
            payload = await asyncio.wait_for(self._extractor(prompt), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning("Requirement parsing timed out after %.1fs", self.timeout)
            return None
        except Exception as e:
            logger.error("Requirement extractor failed: %s", e)
            return None

        if payload is None:
            return None
        if not isinstance(payload, dict):
            logger.warning("Extractor returned %s, expected a JSON object", type(payload).__name__)
            return None
        return payload


async def parse(text: str | None) -> Requirement:
    """Parse with the default Gemini-backed extractor."""
    return await RequirementParser().parse(text)
