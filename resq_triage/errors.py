"""Exception hierarchy shared by the classification and storage layers.

Classification errors (:class:`InputError`, :class:`UpstreamFormatError`,
:class:`UpstreamTransportError`) never escape the classification pipeline;
they are converted to the fallback result.  :class:`StoreError` is always
propagated to the caller.
"""

from __future__ import annotations


class ResqError(Exception):
    """Base class for all resq_triage errors."""


class InputError(ResqError):
    """The message to classify is empty or no API credential is configured."""


class UpstreamFormatError(ResqError):
    """The text generator returned something that is not a usable result."""


class UpstreamTransportError(ResqError):
    """The text generator could not be reached or failed to answer in time."""


class StoreError(ResqError):
    """A query or update against the incident store failed."""


class IncidentNotFoundError(ResqError):
    """No incident exists for the requested id."""

    def __init__(self, incident_id: str) -> None:
        super().__init__(f"Incident not found: {incident_id}")
        self.incident_id = incident_id


__all__ = [
    "ResqError",
    "InputError",
    "UpstreamFormatError",
    "UpstreamTransportError",
    "StoreError",
    "IncidentNotFoundError",
]
