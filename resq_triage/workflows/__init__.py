"""End-to-end workflows composed from the service layer."""

from .report_pipeline import (  # noqa: F401
    find_nearby_incidents,
    get_incident,
    submit_report,
    submit_reports,
    update_incident_status,
)
from .seed import seed_incidents  # noqa: F401

__all__ = [
    "find_nearby_incidents",
    "get_incident",
    "update_incident_status",
    "submit_report",
    "submit_reports",
    "seed_incidents",
]
