from functools import lru_cache

from django.conf import settings
from google import genai
from google.genai import types


class GenAIUnavailableError(RuntimeError):
    """Raised when no Gemini API key is configured."""


@lru_cache(maxsize=4)
def _client(api_key: str, timeout_ms: int) -> genai.Client:
    return genai.Client(
        api_key=api_key,
        http_options=types.HttpOptions(timeout=timeout_ms),
    )


def get_genai_client() -> genai.Client | None:
    """Return a process-wide Gemini client, or None without an API key.

    Clients are reused across requests so each call does not rebuild its HTTP
    pool, and every call is bounded by ``GIGFLOW_GENAI_TIMEOUT`` seconds.
    """
    api_key = (settings.GOOGLE_GENAI_API_KEY or "").strip()
    if not api_key:
        return None
    return _client(api_key, int(settings.GIGFLOW_GENAI_TIMEOUT * 1000))


def generate_text(prompt: str) -> str:
    """Send a prompt to the configured model and return its text output."""
    client = get_genai_client()
    if client is None:
        raise GenAIUnavailableError("GOOGLE_GENAI_API_KEY is not configured")
    response = client.models.generate_content(
        model=settings.GIGFLOW_GENAI_MODEL,
        contents=prompt,
    )
    return (getattr(response, "text", None) or "").strip()
