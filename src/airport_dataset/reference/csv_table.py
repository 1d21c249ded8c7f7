"""Lenient CSV parsing and ICAO indexing for the OurAirports table."""

import csv
import logging
from typing import Dict, Iterable, List, Mapping, Optional

from airport_dataset.models import ReferenceRow

logger = logging.getLogger(__name__)


def _parse_line(line: str) -> List[str]:
    try:
        return next(csv.reader([line], strict=False), [])
    except csv.Error as e:
        logger.warning("Skipping unparseable CSV line %r: %s", line[:80], e)
        return []


def parse_csv(text: str) -> List[Dict[str, str]]:
    """
    Parse CSV text into rows keyed by the header line.

    Each non-blank line is one record, so a stray quote only damages its own
    row. Quoted fields may contain commas; a doubled quote decodes to one
    quote. Missing trailing fields become "" and extra fields are dropped.
    Never raises on bad rows.
    """
    if not text:
        return []
    lines = [line.rstrip("\r") for line in text.split("\n") if line.strip()]
    if not lines:
        return []

    header = _parse_line(lines[0])
    if not header:
        return []

    rows: List[Dict[str, str]] = []
    for line in lines[1:]:
        cols = _parse_line(line)
        rows.append({key: cols[idx] if idx < len(cols) else "" for idx, key in enumerate(header)})
    return rows


def _clean(value: Optional[str]) -> Optional[str]:
    return value or None


def build_index(rows: Iterable[Mapping[str, str]]) -> Dict[str, ReferenceRow]:
    """Index rows by uppercase ICAO ident. Later duplicates win."""
    index: Dict[str, ReferenceRow] = {}
    for row in rows:
        icao = (row.get("ident") or "").upper()
        if not icao:
            continue
        index[icao] = ReferenceRow(
            icao=icao,
            iata=_clean(row.get("iata_code")),
            name=_clean(row.get("name")),
            municipality=_clean(row.get("municipality")),
            iso_country=_clean(row.get("iso_country")),
        )
    return index
