"""Airport reference dataset built from OpenStreetMap and OurAirports."""

from airport_dataset.assemble import build_dataset
from airport_dataset.config import Config
from airport_dataset.errors import (
    AirportDatasetError,
    ConfigError,
    EndpointError,
    FetchExhaustedError,
    ReferenceSourceError,
)
from airport_dataset.fetch import FallbackFetcher
from airport_dataset.models import AirportEntry, Dataset, DatasetMeta, ReferenceRow, TaggedFeature
from airport_dataset.reconcile import reconcile, to_airport_entry
from airport_dataset.service import DatasetService

__all__ = [
    "AirportDatasetError",
    "AirportEntry",
    "Config",
    "ConfigError",
    "Dataset",
    "DatasetMeta",
    "DatasetService",
    "EndpointError",
    "FallbackFetcher",
    "FetchExhaustedError",
    "ReferenceRow",
    "ReferenceSourceError",
    "TaggedFeature",
    "build_dataset",
    "reconcile",
    "to_airport_entry",
]
