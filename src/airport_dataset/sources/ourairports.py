"""OurAirports airports.csv loader with an on-disk cache."""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import requests

from airport_dataset.config import DEFAULT_OURAIRPORTS
from airport_dataset.errors import ReferenceSourceError
from airport_dataset.models import ReferenceRow
from airport_dataset.reference.csv_table import build_index, parse_csv

logger = logging.getLogger(__name__)


class OurAirportsSource:
    """Reference rows from OurAirports; a cached copy takes precedence over the URL."""

    def __init__(
        self,
        url: str = DEFAULT_OURAIRPORTS,
        cache_path: Optional[Path] = None,
        timeout: int = 60,
    ):
        self.url = url
        self.cache_path = Path(cache_path) if cache_path else None
        self.timeout = timeout

    def fetch_text(self) -> str:
        """Return the CSV text, reading the cache if present, else downloading it."""
        if self.cache_path and self.cache_path.exists():
            logger.info("Reading OurAirports cache %s", self.cache_path)
            return self.cache_path.read_text(encoding="utf-8")

        logger.info("Downloading OurAirports from %s", self.url)
        try:
            resp = requests.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise ReferenceSourceError(self.url, None, str(e)) from e
        if not resp.ok:
            raise ReferenceSourceError(self.url, resp.status_code, resp.text[:500])
        # Served as text/csv without a charset; requests would guess latin-1.
        text = resp.content.decode("utf-8", errors="replace")

        if self.cache_path:
            self.cache_path.parent.mkdir(parents=True, exist_ok=True)
            self.cache_path.write_text(text, encoding="utf-8")
            logger.info("Cached OurAirports to %s", self.cache_path)
        return text

    def load_rows(self) -> List[Dict[str, str]]:
        return parse_csv(self.fetch_text())

    def load_index(self) -> Dict[str, ReferenceRow]:
        rows = self.load_rows()
        index = build_index(rows)
        logger.info("Loaded %d reference rows (%d with ident)", len(rows), len(index))
        return index
