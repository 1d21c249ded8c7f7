"""Country code normalization and country -> local language lookup."""

from dataclasses import dataclass, field
from importlib import resources
from types import MappingProxyType
from typing import Any, Mapping, Optional

import json

# Tried in order; the first value that normalizes to a two-letter code wins.
COUNTRY_TAG_KEYS = (
    "addr:country",
    "country",
    "country_code",
    "is_in:country_code",
    "ISO3166-1:alpha2",
)

_country_lang_cache: Optional[dict[str, str]] = None


def normalize_country(code: Any) -> Optional[str]:
    """Return an uppercase two-letter code, or None if the value is not one."""
    if code is None:
        return None
    trimmed = str(code).strip().upper()
    if len(trimmed) == 2:
        return trimmed
    return None


def pick_country(tags: Mapping[str, str]) -> Optional[str]:
    """Pick the country from OSM tags using COUNTRY_TAG_KEYS precedence."""
    for key in COUNTRY_TAG_KEYS:
        country = normalize_country(tags.get(key))
        if country:
            return country
    return None


@dataclass(frozen=True)
class CountryLanguages:
    """Read-only mapping of ISO country code to preferred OSM name language."""

    mapping: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        normalized = {}
        for code, lang in self.mapping.items():
            country = normalize_country(code)
            if country and lang:
                normalized[country] = lang
        object.__setattr__(self, "mapping", MappingProxyType(normalized))

    def language_for(self, country: Optional[str]) -> Optional[str]:
        """Language tag for a country code. Returns None if not mapped."""
        if not country:
            return None
        return self.mapping.get(country.upper())

    def __len__(self) -> int:
        return len(self.mapping)


def _load_country_lang_map() -> dict[str, str]:
    global _country_lang_cache
    if _country_lang_cache is None:
        try:
            data_path = resources.files("airport_dataset.reference.data").joinpath(
                "country_lang_map.json"
            )
            with data_path.open(encoding="utf-8") as f:
                _country_lang_cache = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError):
            _country_lang_cache = {}
    return _country_lang_cache


def load_country_languages() -> CountryLanguages:
    """Load the bundled country -> language table."""
    return CountryLanguages(_load_country_lang_map())
