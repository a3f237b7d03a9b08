"""Service layer modules grouping business logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from resq_triage.services import nearby` without having to know
which underlying module provides the symbol.
"""

from .generation import TextGenerator, OpenAIGenerator  # noqa: F401
from .classification import (  # noqa: F401
    FALLBACK_RESULT,
    BatchClassifier,
    Classifier,
    ResponseValidator,
    analyze_request,
)
from .geo import great_circle_distance, nearby  # noqa: F401
from .storage import IncidentStore, get_incident_store  # noqa: F401

__all__ = [
    "TextGenerator",
    "OpenAIGenerator",
    "FALLBACK_RESULT",
    "BatchClassifier",
    "Classifier",
    "ResponseValidator",
    "analyze_request",
    "great_circle_distance",
    "nearby",
    "IncidentStore",
    "get_incident_store",
]
