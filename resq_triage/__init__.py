"""Top-level package for the resq-triage project.

Distress messages are classified into a bounded category/urgency/summary
triple and stored incidents can be ranked by proximity and severity.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("resq-triage")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .models import (  # noqa: F401
    Category,
    ClassificationResult,
    GeoQuery,
    Incident,
    IncidentStatus,
    IncidentWithDistance,
    Location,
)
from .services.classification import (  # noqa: F401
    FALLBACK_RESULT,
    BatchClassifier,
    Classifier,
    ResponseValidator,
    analyze_request,
)
from .services.geo import nearby  # noqa: F401

__all__ = [
    "__version__",
    "Category",
    "ClassificationResult",
    "GeoQuery",
    "Incident",
    "IncidentStatus",
    "IncidentWithDistance",
    "Location",
    "FALLBACK_RESULT",
    "BatchClassifier",
    "Classifier",
    "ResponseValidator",
    "analyze_request",
    "nearby",
]
