"""Singleton accessor for the MongoDB client."""

from __future__ import annotations

from pymongo import MongoClient

from ..config import Settings, load_settings

_client: MongoClient | None = None


def get_mongo_client(settings: Settings | None = None) -> MongoClient:
    """Return a singleton :class:`pymongo.MongoClient`."""
    global _client
    if _client is None:
        settings = settings or load_settings()
        _client = MongoClient(settings.mongodb_uri, tz_aware=True)
    return _client

__all__ = ["get_mongo_client"]
