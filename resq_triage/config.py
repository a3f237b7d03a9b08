"""Centralised configuration for resq_triage.

Environment variables are loaded once and all related constants are
grouped by service for easier maintenance.  Components that talk to
external services receive an immutable :class:`Settings` snapshot built by
:func:`load_settings` instead of reading the environment themselves.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_OPENAI_MODEL: str = "gpt-4o-mini"
DEFAULT_OPENAI_TIMEOUT_SECONDS: float = 30.0
DEFAULT_MONGODB_DATABASE: str = "resq"
DEFAULT_MONGODB_COLLECTION: str = "incidents"
DEFAULT_CLASSIFIER_MAX_WORKERS: int = 8
DEFAULT_RADIUS_METERS: float = 10_000.0


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring malformed %s=%r – using %s", name, raw, default)
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring malformed %s=%r – using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    """Immutable configuration snapshot, loaded once at startup."""

    openai_api_key: str | None = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    openai_timeout_seconds: float = DEFAULT_OPENAI_TIMEOUT_SECONDS
    mongodb_uri: str | None = None
    mongodb_database: str = DEFAULT_MONGODB_DATABASE
    mongodb_collection: str = DEFAULT_MONGODB_COLLECTION
    classifier_max_workers: int = DEFAULT_CLASSIFIER_MAX_WORKERS

    @property
    def has_credentials(self) -> bool:
        """Return ``True`` when an API credential for the text generator is set."""
        return bool(self.openai_api_key and self.openai_api_key.strip())


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Build the process-wide :class:`Settings` from the environment (cached)."""
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        openai_model=os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL),
        openai_timeout_seconds=_env_float(
            "OPENAI_TIMEOUT_SECONDS", DEFAULT_OPENAI_TIMEOUT_SECONDS
        ),
        mongodb_uri=os.getenv("MONGODB_URI"),
        mongodb_database=os.getenv("MONGODB_DATABASE", DEFAULT_MONGODB_DATABASE),
        mongodb_collection=os.getenv("MONGODB_COLLECTION", DEFAULT_MONGODB_COLLECTION),
        classifier_max_workers=_env_int(
            "CLASSIFIER_MAX_WORKERS", DEFAULT_CLASSIFIER_MAX_WORKERS
        ),
    )


# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    "Settings",
    "load_settings",
    # defaults
    "DEFAULT_OPENAI_MODEL",
    "DEFAULT_OPENAI_TIMEOUT_SECONDS",
    "DEFAULT_MONGODB_DATABASE",
    "DEFAULT_MONGODB_COLLECTION",
    "DEFAULT_CLASSIFIER_MAX_WORKERS",
    "DEFAULT_RADIUS_METERS",
]
