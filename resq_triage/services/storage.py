"""Persistence layer: MongoDB-backed incident store."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from ..clients.mongodb_client import get_mongo_client
from ..config import DEFAULT_RADIUS_METERS, Settings, load_settings
from ..errors import StoreError
from ..models import (
    ClassificationResult,
    Incident,
    IncidentStatus,
    IncidentWithDistance,
    Location,
)
from ..utils.datetime_utils import get_current_timestamp
from .geo import nearby

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except PyMongoError as exc:
        logger.error("MongoDB %s failed: %s", operation, exc)
        raise StoreError(f"Incident store {operation} failed: {exc}") from exc


def _decode(doc: Dict[str, Any]) -> Incident:
    try:
        return Incident.from_document(doc)
    except (KeyError, TypeError, ValueError) as exc:
        logger.error("Malformed incident document %s: %r", doc.get("_id"), exc)
        raise StoreError(f"Malformed incident document {doc.get('_id')}: {exc!r}") from exc


def _to_object_id(incident_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(incident_id)
    except (InvalidId, TypeError):
        return None


class IncidentStore:
    """Read and update incidents held in a MongoDB collection."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def create(
        self,
        description: str,
        location: Location,
        result: ClassificationResult,
    ) -> Incident:
        """Insert a new ``OPEN`` incident built from a classification result."""
        document: Dict[str, Any] = {
            "description": description,
            "lat": location.lat,
            "lng": location.lng,
            "category": result.category.value,
            "urgency": result.urgency,
            "summary": result.summary,
            "status": IncidentStatus.OPEN.value,
            "createdAt": get_current_timestamp(),
        }
        with _store_errors("insert"):
            inserted = self._collection.insert_one(document)
        logger.info("Stored incident with _id=%s", inserted.inserted_id)
        document["_id"] = inserted.inserted_id
        return _decode(document)

    def get_all(self) -> List[Incident]:
        with _store_errors("find"):
            cursor = self._collection.find().sort(
                [("urgency", DESCENDING), ("createdAt", DESCENDING)]
            )
            return [_decode(doc) for doc in cursor]

    def get_by_id(self, incident_id: str) -> Optional[Incident]:
        """Return the incident, or ``None`` for unknown or malformed ids."""
        object_id = _to_object_id(incident_id)
        if object_id is None:
            return None
        with _store_errors("find_one"):
            doc = self._collection.find_one({"_id": object_id})
        return _decode(doc) if doc else None

    def query_by_radius(
        self,
        center: Location,
        radius_meters: float = DEFAULT_RADIUS_METERS,
        status: Optional[IncidentStatus] = None,
    ) -> List[IncidentWithDistance]:
        """Rank a snapshot of stored incidents by proximity to *center*."""
        query: Dict[str, Any] = {}
        if status is not None:
            query["status"] = IncidentStatus(status).value
        with _store_errors("find"):
            snapshot = [_decode(doc) for doc in self._collection.find(query)]
        return nearby(center, radius_meters, snapshot)

    def update_status(
        self,
        incident_id: str,
        status: IncidentStatus | str,
    ) -> Optional[Incident]:
        """Atomically set the status; ``None`` if the incident does not exist.

        Raises ``ValueError`` for a status outside :class:`IncidentStatus`.
        """
        new_status = IncidentStatus(status)
        object_id = _to_object_id(incident_id)
        if object_id is None:
            return None
        with _store_errors("update"):
            doc = self._collection.find_one_and_update(
                {"_id": object_id},
                {"$set": {"status": new_status.value}},
                return_document=ReturnDocument.AFTER,
            )
        if doc is None:
            return None
        logger.info("Incident %s status set to %s", incident_id, new_status.value)
        return _decode(doc)

    def delete_all(self) -> int:
        with _store_errors("delete"):
            result = self._collection.delete_many({})
        logger.info("Deleted %d existing incidents", result.deleted_count)
        return result.deleted_count


def get_incident_store(settings: Settings | None = None) -> IncidentStore:
    """Return an :class:`IncidentStore` bound to the configured collection."""
    settings = settings or load_settings()
    client = get_mongo_client(settings)
    return IncidentStore(client[settings.mongodb_database][settings.mongodb_collection])


__all__ = ["IncidentStore", "get_incident_store"]
