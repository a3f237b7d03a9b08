"""Text-generation backends used by the classifier."""

from __future__ import annotations

import logging
from typing import Protocol

from openai import OpenAI, OpenAIError

from ..clients.openai_client import get_openai
from ..config import Settings, load_settings
from ..errors import UpstreamFormatError, UpstreamTransportError

# ---------------------------------------------------------------------------
# Local OpenAI settings (only used by this service)
# ---------------------------------------------------------------------------
CLASSIFIER_TEMPERATURE: float = 0.0
CLASSIFIER_MAX_TOKENS: int = 200

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Anything that turns a prompt into a completion."""

    def generate(self, prompt: str) -> str:
        ...


class OpenAIGenerator:
    """:class:`TextGenerator` backed by the OpenAI chat completions API.

    The client is created lazily so that a generator can be constructed
    (and the credential checked) before any network setup happens.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: OpenAI | None = None,
    ) -> None:
        self._settings = settings or load_settings()
        self._client = client

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = get_openai(self._settings)
        return self._client

    def generate(self, prompt: str) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=self._settings.openai_model,
                messages=[{"role": "user", "content": prompt}],
                temperature=CLASSIFIER_TEMPERATURE,
                max_tokens=CLASSIFIER_MAX_TOKENS,
                timeout=self._settings.openai_timeout_seconds,
            )
        except OpenAIError as exc:
            raise UpstreamTransportError(f"OpenAI request failed: {exc}") from exc

        content = resp.choices[0].message.content if resp.choices else None
        if not content:
            raise UpstreamFormatError("OpenAI returned an empty completion")
        return content


__all__ = ["TextGenerator", "OpenAIGenerator"]
