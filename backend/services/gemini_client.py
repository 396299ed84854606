"""Google Gemini API wrapper with error handling."""

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


def is_configured() -> bool:
    return bool(settings.gemini_api_key)


async def generate_text(prompt: str, temperature: float = 0.7) -> str | None:
    """Send a prompt to Gemini and return the plain-text response.

    Returns None when Gemini is not configured, the call fails, or the
    model returns no text.
    """
    client = get_client()
    if client is None:
        return None

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=2048,
            ),
        )
        # .text raises on blocked or malformed candidates
        text = (response.text or "").strip()
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None

    if not text:
        logger.warning("Gemini returned an empty response")
        return None
    return text
