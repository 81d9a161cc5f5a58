"""Google Gemini API wrapper with error handling."""

import json
import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are an expert resume writer and ATS optimization specialist. You analyze resumes "
    "and tailor them for specific job descriptions while keeping every claim accurate."
)

_client: genai.Client | None = None


def is_configured() -> bool:
    return bool(settings.gemini_api_key)


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - AI analysis disabled, using local fallback")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def generate_json(prompt: str) -> dict | None:
    """Send a prompt to Gemini and parse the JSON response."""
    client = get_client()
    if client is None:
        return None

    try:
        response = client.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=SYSTEM_INSTRUCTION,
                temperature=settings.gemini_temperature,
                max_output_tokens=settings.gemini_max_output_tokens,
            ),
        )
        data = json.loads(_strip_code_fences(response.text or ""))
        if not isinstance(data, dict):
            logger.error("Gemini returned JSON that is not an object")
            return None
        return data

    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        return None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None
