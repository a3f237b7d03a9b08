"""Utility functions for the resq_triage project.

Re-exports the text-cleaning, parsing and datetime helpers so that imports
like `from ..utils import strip_code_fences` work as expected.
"""

from .text_cleaning import strip_code_fences, is_blank  # noqa: F401
from .datetime_utils import get_current_timestamp, ensure_utc  # noqa: F401
from .llm_parsing import parse_json_object  # noqa: F401

__all__ = [
    "strip_code_fences",
    "is_blank",
    "get_current_timestamp",
    "ensure_utc",
    "parse_json_object",
]
