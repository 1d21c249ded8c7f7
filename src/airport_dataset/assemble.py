"""Fold airport entries into the final dataset."""

from datetime import datetime, timezone
from typing import Dict, Iterable, Optional

from airport_dataset.models import SOURCES, AirportEntry, Dataset, DatasetMeta


def format_timestamp(now: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a Z suffix, e.g. 2025-02-17T08:30:00.000Z."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_dataset(
    entries: Iterable[AirportEntry],
    version: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Dataset:
    """Key entries by ICAO (later duplicates replace earlier ones) and attach metadata."""
    airports: Dict[str, AirportEntry] = {}
    for entry in entries:
        airports[entry.icao] = entry

    generated_at = format_timestamp(now or datetime.now(timezone.utc))
    meta = DatasetMeta(
        dataset_version=version or generated_at[:10],
        generated_at=generated_at,
        sources=list(SOURCES),
    )
    return Dataset(meta=meta, airports=airports)
