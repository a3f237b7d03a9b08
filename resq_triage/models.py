"""Domain models used across the project."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict

from .config import DEFAULT_RADIUS_METERS
from .utils.datetime_utils import ensure_utc, get_current_timestamp


class Category(str, Enum):
    """Closed set of incident categories the classifier may assign."""

    MEDICAL = "MEDICAL"
    FOOD = "FOOD"
    RESCUE = "RESCUE"
    OTHER = "OTHER"


class IncidentStatus(str, Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"


MIN_URGENCY: int = 1
MAX_URGENCY: int = 10
MAX_SUMMARY_LENGTH: int = 50


@dataclass(frozen=True, slots=True)
class Location:
    """A point on the globe in decimal degrees."""

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude out of range [-90, 90]: {self.lat}")
        if not -180.0 <= self.lng <= 180.0:
            raise ValueError(f"Longitude out of range [-180, 180]: {self.lng}")


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Normalized category/urgency/summary triple for one message."""

    category: Category
    urgency: int
    summary: str

    def __post_init__(self) -> None:
        if not MIN_URGENCY <= self.urgency <= MAX_URGENCY:
            raise ValueError(f"Urgency out of range: {self.urgency}")
        if len(self.summary) > MAX_SUMMARY_LENGTH:
            raise ValueError(f"Summary longer than {MAX_SUMMARY_LENGTH} characters")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "urgency": self.urgency,
            "summary": self.summary,
        }


@dataclass(slots=True)
class Incident:
    """A help request as held by the incident store."""

    id: str
    description: str
    location: Location
    category: Category
    urgency: int
    summary: str
    status: IncidentStatus = IncidentStatus.OPEN
    created_at: datetime = field(default_factory=get_current_timestamp)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Incident":
        """Build an :class:`Incident` from a stored MongoDB document."""
        category = doc.get("category")
        try:
            category = Category(category)
        except ValueError:
            category = Category.OTHER
        return cls(
            id=str(doc["_id"]),
            description=doc.get("description", ""),
            location=Location(lat=float(doc["lat"]), lng=float(doc["lng"])),
            category=category,
            urgency=int(doc["urgency"]),
            summary=doc.get("summary", ""),
            status=IncidentStatus(doc.get("status", IncidentStatus.OPEN.value)),
            created_at=ensure_utc(doc["createdAt"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "lat": self.location.lat,
            "lng": self.location.lng,
            "category": self.category.value,
            "urgency": self.urgency,
            "summary": self.summary,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class IncidentWithDistance:
    """An incident paired with its distance from a query center. Never persisted."""

    incident: Incident
    distance_meters: float

    def to_dict(self) -> Dict[str, Any]:
        data = self.incident.to_dict()
        data["distanceMeters"] = self.distance_meters
        return data


@dataclass(frozen=True, slots=True)
class GeoQuery:
    center: Location
    radius_meters: float = DEFAULT_RADIUS_METERS

    def __post_init__(self) -> None:
        if not self.radius_meters > 0:
            raise ValueError(f"Radius must be positive: {self.radius_meters}")


__all__ = [
    "Category",
    "IncidentStatus",
    "MIN_URGENCY",
    "MAX_URGENCY",
    "MAX_SUMMARY_LENGTH",
    "Location",
    "ClassificationResult",
    "Incident",
    "IncidentWithDistance",
    "GeoQuery",
]
