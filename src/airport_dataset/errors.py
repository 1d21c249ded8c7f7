"""Exceptions raised while building the airport dataset."""

from typing import Optional

RETRYABLE_STATUSES = frozenset({429, 504})


class AirportDatasetError(Exception):
    """Base error for pipeline failures."""


class ConfigError(AirportDatasetError):
    """Raised when configuration values are invalid."""


class EndpointError(AirportDatasetError):
    """Raised when a single Overpass attempt fails.

    ``status`` is None for network-level failures (connection refused,
    HTTP timeout, undecodable body).
    """

    def __init__(self, endpoint: str, status: Optional[int] = None, body: str = ""):
        self.endpoint = endpoint
        self.status = status
        self.body = body
        if status is None:
            message = f"Overpass request to {endpoint} failed: {body}"
        else:
            message = f"Overpass error {status} from {endpoint}: {body}"
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        """Rate limits, gateway timeouts and network failures are worth retrying."""
        return self.status is None or self.status in RETRYABLE_STATUSES


class FetchExhaustedError(AirportDatasetError):
    """Raised when every Overpass endpoint has failed."""


class ReferenceSourceError(AirportDatasetError):
    """Raised when the OurAirports CSV cannot be downloaded."""

    def __init__(self, url: str, status: Optional[int] = None, body: str = ""):
        self.url = url
        self.status = status
        if status is None:
            super().__init__(f"OurAirports request to {url} failed: {body}")
        else:
            super().__init__(f"OurAirports error {status}: {body}")
