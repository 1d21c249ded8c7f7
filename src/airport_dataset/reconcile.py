"""Merge an OSM feature with its OurAirports row into one airport entry."""

from typing import Iterable, Iterator, Mapping, Optional

from airport_dataset.models import AirportEntry, ReferenceRow, TaggedFeature
from airport_dataset.reference.countries import (
    CountryLanguages,
    normalize_country,
    pick_country,
)
from airport_dataset.reference.names import (
    ScriptConverter,
    pick_chinese_name,
    pick_local_name,
    to_simplified,
)

CITY_TAG_KEYS = ("addr:city", "is_in:city", "city")


def _first_tag(feature: TaggedFeature, *keys: str) -> Optional[str]:
    for key in keys:
        value = feature.tag(key)
        if value:
            return value
    return None


def to_airport_entry(
    feature: TaggedFeature,
    languages: CountryLanguages,
    index: Optional[Mapping[str, ReferenceRow]] = None,
    converter: Optional[ScriptConverter] = None,
) -> Optional[AirportEntry]:
    """
    Build the canonical entry for a feature. OSM tags win over the
    reference row field by field; coordinates come from OSM only.
    Returns None for features without an icao tag.
    """
    icao = feature.tag("icao")
    if not icao:
        return None
    key = icao.upper()
    row = index.get(key) if index else None

    tags = feature.tags
    country = pick_country(tags) or normalize_country(row.iso_country if row else None)
    city = _first_tag(feature, *CITY_TAG_KEYS) or (row.municipality if row else None)
    name = feature.tag("name") or (row.name if row else None)
    name_en = feature.tag("name:en") or (row.name if row else None)
    local = pick_local_name(tags, languages, country)
    name_zh = pick_chinese_name(tags, country)

    return AirportEntry(
        icao=key,
        iata=feature.tag("iata") or (row.iata if row else None),
        name=name,
        name_en=name_en,
        name_local=local.name or name,
        name_zh=name_zh,
        name_zh_hans=to_simplified(name_zh, converter),
        local_lang=local.lang,
        country=country,
        city=city,
        lat=feature.lat,
        lon=feature.lon,
    )


def reconcile(
    features: Iterable[TaggedFeature],
    languages: CountryLanguages,
    index: Optional[Mapping[str, ReferenceRow]] = None,
    converter: Optional[ScriptConverter] = None,
) -> Iterator[AirportEntry]:
    """Yield entries in input order, skipping features without an ICAO code."""
    for feature in features:
        entry = to_airport_entry(feature, languages, index, converter)
        if entry is not None:
            yield entry
