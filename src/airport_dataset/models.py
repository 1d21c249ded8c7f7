"""Data models for the airport dataset."""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional

SOURCES = ["OpenStreetMap contributors", "OurAirports (public domain)"]


@dataclass(frozen=True)
class TaggedFeature:
    """An Overpass element: id, geometry point and free-form tags."""

    id: Optional[int]
    type: Optional[str]
    tags: Mapping[str, str] = field(default_factory=dict)
    lat: Optional[float] = None
    lon: Optional[float] = None

    @classmethod
    def from_element(cls, element: Mapping[str, Any]) -> "TaggedFeature":
        """
        Build from a raw Overpass element.
        Nodes carry lat/lon directly; ways and relations carry a center object
        when queried with `out center`.
        """
        center = element.get("center") or {}
        lat = element.get("lat")
        lon = element.get("lon")
        return cls(
            id=element.get("id"),
            type=element.get("type"),
            tags=dict(element.get("tags") or {}),
            lat=lat if lat is not None else center.get("lat"),
            lon=lon if lon is not None else center.get("lon"),
        )

    def tag(self, key: str) -> Optional[str]:
        """Return a tag value, treating empty strings as absent."""
        value = self.tags.get(key)
        if value is None or value == "":
            return None
        return value


@dataclass(frozen=True)
class ReferenceRow:
    """One OurAirports row, reduced to the fields used for reconciliation."""

    icao: str
    iata: Optional[str] = None
    name: Optional[str] = None
    municipality: Optional[str] = None
    iso_country: Optional[str] = None


@dataclass(frozen=True)
class AirportEntry:
    """Canonical airport record, keyed by ICAO code."""

    icao: str
    iata: Optional[str] = None
    name: Optional[str] = None
    name_en: Optional[str] = None
    name_local: Optional[str] = None
    name_zh: Optional[str] = None
    name_zh_hans: Optional[str] = None
    local_lang: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


ENTRY_COLUMNS = [f.name for f in fields(AirportEntry)]


@dataclass(frozen=True)
class DatasetMeta:
    """Provenance attached to the dataset."""

    dataset_version: str
    generated_at: str
    sources: List[str] = field(default_factory=lambda: list(SOURCES))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dataset_version": self.dataset_version,
            "generated_at": self.generated_at,
            "sources": list(self.sources),
        }


@dataclass
class Dataset:
    """Final artifact: metadata plus airports keyed by ICAO."""

    meta: DatasetMeta
    airports: Dict[str, AirportEntry] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.airports)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON payload."""
        return {
            "meta": self.meta.to_dict(),
            "airports": {icao: entry.to_dict() for icao, entry in self.airports.items()},
        }

    def to_dataframe(self):
        """Convert to pandas DataFrame, one row per airport."""
        import pandas as pd

        if not self.airports:
            return pd.DataFrame(columns=ENTRY_COLUMNS)
        return pd.DataFrame(
            [entry.to_dict() for entry in self.airports.values()],
            columns=ENTRY_COLUMNS,
        )
