"""Report ingestion and proximity lookup workflows."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..config import DEFAULT_RADIUS_METERS
from ..errors import IncidentNotFoundError
from ..models import GeoQuery, Incident, IncidentStatus, IncidentWithDistance, Location
from ..services.classification import BatchClassifier, Classifier, analyze_request
from ..services.storage import IncidentStore

logger = logging.getLogger(__name__)

# (description, lat, lng)
Report = Tuple[str, float, float]


def submit_report(
    description: str,
    lat: float,
    lng: float,
    *,
    classifier: Classifier,
    store: IncidentStore,
) -> Incident:
    """Classify a distress message and persist it as a new incident."""
    location = Location(lat=lat, lng=lng)
    result = analyze_request(description, classifier)
    incident = store.create(description, location, result)
    logger.info(
        "Created incident %s (%s, urgency %d)",
        incident.id,
        incident.category.value,
        incident.urgency,
    )
    return incident


def submit_reports(
    reports: Sequence[Report],
    *,
    classifier: Classifier,
    store: IncidentStore,
    max_workers: Optional[int] = None,
    timeout: Optional[float] = None,
) -> List[Incident]:
    """Classify *reports* concurrently, then store them in input order."""
    # Validate every location before spending any classification calls.
    locations = [Location(lat=lat, lng=lng) for _, lat, lng in reports]
    descriptions = [description for description, _, _ in reports]

    batch = BatchClassifier(classifier, max_workers=max_workers)
    results = batch.classify_all(descriptions, timeout=timeout)

    incidents = [
        store.create(description, location, result)
        for description, location, result in zip(descriptions, locations, results)
    ]
    _log_stats(len(reports), incidents)
    return incidents


def find_nearby_incidents(
    lat: float,
    lng: float,
    radius_meters: float = DEFAULT_RADIUS_METERS,
    *,
    store: IncidentStore,
    only_open: bool = True,
) -> List[IncidentWithDistance]:
    """Return stored incidents near (lat, lng), most urgent and closest first."""
    query = GeoQuery(center=Location(lat=lat, lng=lng), radius_meters=radius_meters)
    status = IncidentStatus.OPEN if only_open else None
    matches = store.query_by_radius(query.center, query.radius_meters, status=status)
    logger.info(
        "Found %d incidents within %.0f m of (%.5f, %.5f)",
        len(matches),
        query.radius_meters,
        lat,
        lng,
    )
    return matches


def get_incident(incident_id: str, *, store: IncidentStore) -> Incident:
    incident = store.get_by_id(incident_id)
    if incident is None:
        raise IncidentNotFoundError(incident_id)
    return incident


def update_incident_status(
    incident_id: str,
    status: IncidentStatus | str,
    *,
    store: IncidentStore,
) -> Incident:
    """Move an incident to *status*; raises :class:`IncidentNotFoundError`."""
    incident = store.update_status(incident_id, status)
    if incident is None:
        raise IncidentNotFoundError(incident_id)
    return incident


def _log_stats(total: int, incidents: List[Incident]) -> None:
    logger.info("=== Report Ingestion Statistics ===")
    logger.info("Reports received: %d", total)
    logger.info("Incidents stored: %d", len(incidents))
    for category in sorted({i.category.value for i in incidents}):
        logger.info(
            "  %s: %d", category, sum(1 for i in incidents if i.category.value == category)
        )
    logger.info("===================================")

__all__ = [
    "Report",
    "submit_report",
    "submit_reports",
    "find_nearby_incidents",
    "get_incident",
    "update_incident_status",
]
