"""Google Gemini API wrapper with error handling."""

import json
import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def _strip_fences(text: str) -> str:
    """Remove markdown code fences Gemini sometimes wraps JSON in."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def generate_text(
    prompt: str,
    temperature: float = 0.3,
    max_output_tokens: int = 1024,
    response_mime_type: str | None = None,
) -> str | None:
    """Send a prompt to Gemini and return the raw response text."""
    client = get_client()
    if client is None:
        return None

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=max_output_tokens,
                response_mime_type=response_mime_type,
            ),
        )
        return (response.text or "").strip() or None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None


async def generate_json(prompt: str) -> dict | None:
    """Send a prompt to Gemini and parse the JSON object response."""
    text = await generate_text(
        prompt,
        temperature=0.1,
        max_output_tokens=2048,
        response_mime_type="application/json",
    )
    if text is None:
        return None

    try:
        data = json.loads(_strip_fences(text))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        return None

    if not isinstance(data, dict):
        logger.error("Gemini returned %s instead of a JSON object", type(data).__name__)
        return None
    return data
