"""Convenience re-exports for singleton SDK accessors."""

from .openai_client import get_openai  # noqa: F401
from .mongodb_client import get_mongo_client  # noqa: F401

__all__ = [
    "get_openai",
    "get_mongo_client",
]
