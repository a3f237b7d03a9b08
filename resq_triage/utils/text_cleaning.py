"""Helpers for cleaning raw text returned by LLM calls."""

from __future__ import annotations

import re
from typing import Final

# Opening fences may carry a language tag (```json, ```JSON, ```js ...).
_FENCE_RE: Final[re.Pattern[str]] = re.compile(r"```[A-Za-z0-9_+-]*")

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def strip_code_fences(text: str) -> str:
    """Remove every markdown code-fence marker from *text* and trim it.

    Both bare fences and fences with a language tag are removed wherever
    they occur; the content between them is kept.
    """
    if not text:
        return ""
    return _FENCE_RE.sub("", text).strip()


def is_blank(text: object) -> bool:
    """Return ``True`` for non-strings, the empty string, or whitespace only."""
    return not isinstance(text, str) or not text.strip()

__all__ = ["strip_code_fences", "is_blank"]
