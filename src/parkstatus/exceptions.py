"""Custom exception hierarchy for parkstatus."""

from __future__ import annotations


class ParkStatusError(Exception):
    """Base exception for all parkstatus errors."""


class ParkStatusConfigError(ParkStatusError):
    """Invalid or missing configuration."""


class ParkStatusTransportError(ParkStatusError):
    """HTTP-level failure (network, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class ParkStatusDataError(ParkStatusError):
    """A collaborator returned a malformed or partial record.

    Ingestion catches this for each offending item and drops the item;
    it never reaches callers of the high-level client.
    """


class LocationUnavailableError(ParkStatusError):
    """The observer position could not be determined.

    Covers both "no permission / no fix" and a failed location lookup.
    Callers fall back to the configured default position.
    """
