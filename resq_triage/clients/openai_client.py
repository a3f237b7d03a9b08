"""Singleton accessor for the OpenAI SDK client."""

from __future__ import annotations

from openai import OpenAI as _OpenAIClient

from ..config import Settings, load_settings

_client: _OpenAIClient | None = None


def get_openai(settings: Settings | None = None) -> _OpenAIClient:
    """Return a singleton instance of :class:`openai.OpenAI`."""
    global _client
    if _client is None:
        settings = settings or load_settings()
        if not settings.has_credentials:
            raise EnvironmentError("OPENAI_API_KEY is not set in environment variables")
        _client = _OpenAIClient(
            api_key=settings.openai_api_key,
            timeout=settings.openai_timeout_seconds,
            max_retries=0,
        )
    return _client

__all__ = ["get_openai"]
