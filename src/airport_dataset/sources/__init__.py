"""Upstream data sources."""

from airport_dataset.sources.base import FeatureEndpoint, ReferenceSource
from airport_dataset.sources.ourairports import OurAirportsSource
from airport_dataset.sources.overpass import AERODROME_QUERY, OverpassEndpoint

__all__ = [
    "AERODROME_QUERY",
    "FeatureEndpoint",
    "OurAirportsSource",
    "OverpassEndpoint",
    "ReferenceSource",
]
