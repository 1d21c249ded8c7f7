"""Overpass API client: a single query attempt against one endpoint."""

from typing import Any, Dict

import requests

from airport_dataset.config import DEFAULT_TIMEOUT
from airport_dataset.errors import EndpointError

USER_AGENT = "airport-dataset/0.1 (+https://ourairports.com/data/)"

# Every aerodrome carrying an ICAO code; ways and relations report their centroid.
AERODROME_QUERY = """
[out:json][timeout:180];
(
  node["aeroway"="aerodrome"]["icao"];
  way["aeroway"="aerodrome"]["icao"];
  relation["aeroway"="aerodrome"]["icao"];
);
out center tags;
"""

_BODY_PREVIEW = 500


class OverpassEndpoint:
    """Sends the aerodrome query to an Overpass interpreter URL."""

    def __init__(self, query: str = AERODROME_QUERY, timeout: int = DEFAULT_TIMEOUT):
        self.query = query
        self.timeout = timeout

    def fetch_once(self, endpoint: str) -> Dict[str, Any]:
        """POST the query once. Raises EndpointError (status None on network failure)."""
        try:
            resp = requests.post(
                endpoint,
                data={"data": self.query},
                headers={"User-Agent": USER_AGENT},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise EndpointError(endpoint, None, str(e)) from e

        if not resp.ok:
            raise EndpointError(endpoint, resp.status_code, resp.text[:_BODY_PREVIEW])

        try:
            payload = resp.json()
        except ValueError as e:
            raise EndpointError(endpoint, None, f"invalid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise EndpointError(
                endpoint, None, f"expected a JSON object, got {type(payload).__name__}"
            )
        return payload
