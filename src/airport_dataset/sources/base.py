"""Interfaces for the two upstream sources."""

from typing import Any, Dict, List, Mapping, Protocol, runtime_checkable

from airport_dataset.models import ReferenceRow


@runtime_checkable
class FeatureEndpoint(Protocol):
    """One-shot query against a single geospatial endpoint."""

    def fetch_once(self, endpoint: str) -> Dict[str, Any]:
        """Run the query once. Raises EndpointError on failure."""
        ...


@runtime_checkable
class ReferenceSource(Protocol):
    """Tabular airport reference keyed by ICAO code."""

    def load_rows(self) -> List[Dict[str, str]]:
        """Return raw CSV rows."""
        ...

    def load_index(self) -> Mapping[str, ReferenceRow]:
        """Return rows indexed by uppercase ICAO code."""
        ...
