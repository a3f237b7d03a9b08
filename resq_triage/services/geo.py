"""Proximity search over a snapshot of incidents."""

from __future__ import annotations

import math
from typing import Iterable, List

from ..config import DEFAULT_RADIUS_METERS
from ..models import GeoQuery, Incident, IncidentWithDistance, Location

EARTH_RADIUS_METERS: float = 6_371_000.0


def great_circle_distance(origin: Location, target: Location) -> float:
    """Return the great-circle distance in metres (spherical law of cosines)."""
    if origin == target:
        return 0.0

    lat1 = math.radians(origin.lat)
    lat2 = math.radians(target.lat)
    delta_lng = math.radians(target.lng) - math.radians(origin.lng)

    cosine = (
        math.cos(lat1) * math.cos(lat2) * math.cos(delta_lng)
        + math.sin(lat1) * math.sin(lat2)
    )
    # Rounding can push the argument just outside [-1, 1] for identical points.
    cosine = max(-1.0, min(1.0, cosine))
    return EARTH_RADIUS_METERS * math.acos(cosine)


def nearby(
    center: Location,
    radius_meters: float = DEFAULT_RADIUS_METERS,
    incidents: Iterable[Incident] = (),
) -> List[IncidentWithDistance]:
    """Return incidents strictly within *radius_meters* of *center*.

    Results are ordered by urgency (highest first), then distance (closest
    first).  The sort is stable, so remaining ties keep the iteration order
    of *incidents*.
    """
    query = GeoQuery(center=center, radius_meters=radius_meters)

    matches: List[IncidentWithDistance] = []
    for incident in incidents:
        distance = great_circle_distance(query.center, incident.location)
        if distance < query.radius_meters:
            matches.append(IncidentWithDistance(incident=incident, distance_meters=distance))

    matches.sort(key=lambda item: (-item.incident.urgency, item.distance_meters))
    return matches


__all__ = ["EARTH_RADIUS_METERS", "great_circle_distance", "nearby"]
