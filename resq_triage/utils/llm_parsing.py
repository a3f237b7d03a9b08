"""Utilities for parsing structured outputs returned by LLM calls.

Unlike a lenient extractor, :func:`parse_json_object` accepts nothing but a
single JSON object: any surrounding prose, truncation, or a top-level value
of another type is rejected.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from .text_cleaning import strip_code_fences

__all__ = ["parse_json_object"]


def parse_json_object(response_text: str) -> Dict[str, Any]:
    """Parse the fence-stripped *response_text* as exactly one JSON object.

    Parameters
    ----------
    response_text
        The raw message content returned by the text generator.

    Returns
    -------
    dict[str, Any]
        The parsed JSON object.

    Raises
    ------
    ValueError
        If the cleaned text is empty, is not valid JSON, or does not decode
        to an object.
    """

    cleaned: str = strip_code_fences(response_text)
    if not cleaned:
        raise ValueError("Empty response from text generator")

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Response is not valid JSON: {exc.msg}") from exc

    if not isinstance(parsed, dict):
        raise ValueError(
            f"Expected a JSON object, got {type(parsed).__name__}"
        )
    return parsed
