"""Reference data: OurAirports CSV parsing, country languages and name derivation."""

from airport_dataset.reference.countries import (
    CountryLanguages,
    load_country_languages,
    normalize_country,
    pick_country,
)
from airport_dataset.reference.csv_table import build_index, parse_csv
from airport_dataset.reference.names import (
    LocalName,
    load_simplified_converter,
    pick_chinese_name,
    pick_local_name,
    to_simplified,
)

__all__ = [
    "CountryLanguages",
    "LocalName",
    "build_index",
    "load_country_languages",
    "load_simplified_converter",
    "normalize_country",
    "parse_csv",
    "pick_chinese_name",
    "pick_country",
    "pick_local_name",
    "to_simplified",
]
