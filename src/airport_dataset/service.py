"""Dataset service - loads both sources, reconciles and writes the snapshot."""

import json
import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

from airport_dataset.assemble import build_dataset
from airport_dataset.config import Config
from airport_dataset.fetch import FallbackFetcher
from airport_dataset.models import Dataset, TaggedFeature
from airport_dataset.reconcile import reconcile
from airport_dataset.reference.countries import CountryLanguages, load_country_languages
from airport_dataset.reference.names import ScriptConverter, load_simplified_converter
from airport_dataset.sources.base import FeatureEndpoint, ReferenceSource
from airport_dataset.sources.ourairports import OurAirportsSource
from airport_dataset.sources.overpass import OverpassEndpoint

logger = logging.getLogger(__name__)

_DEFAULT = object()


class DatasetService:
    """Orchestrates reference loading, Overpass fetching, reconciliation and assembly."""

    def __init__(
        self,
        config: Optional[Config] = None,
        overpass: Optional[FeatureEndpoint] = None,
        reference: Optional[ReferenceSource] = None,
        converter=_DEFAULT,
        languages: Optional[CountryLanguages] = None,
        sleep=time.sleep,
    ):
        self.config = config or Config()
        self._overpass = overpass or OverpassEndpoint(timeout=self.config.timeout)
        self._reference = reference or OurAirportsSource(
            url=self.config.ourairports_url,
            cache_path=self.config.cache_path,
        )
        self._converter: Optional[ScriptConverter] = (
            load_simplified_converter() if converter is _DEFAULT else converter
        )
        self._languages = languages if languages is not None else load_country_languages()
        self._fetcher = FallbackFetcher(
            self._overpass.fetch_once,
            max_retries=self.config.max_retries,
            retry_base_ms=self.config.retry_base_ms,
            sleep=sleep,
        )

    def build(self, version: Optional[str] = None, now: Optional[datetime] = None) -> Dataset:
        """Fetch both sources and assemble the dataset. Raises on fatal errors."""
        index = self._reference.load_index()

        logger.info("Querying Overpass (%d endpoints)", len(self.config.endpoints))
        payload = self._fetcher.fetch(self.config.endpoints)
        elements = payload.get("elements") or []
        logger.info("Received %d elements", len(elements))

        features = (TaggedFeature.from_element(e) for e in elements)
        entries = reconcile(features, self._languages, index, self._converter)
        return build_dataset(entries, version=version or self.config.version, now=now)

    def write(self, dataset: Dataset, path: Path) -> Path:
        """Write the dataset as UTF-8 JSON and return the resolved path."""
        out_path = Path(path).resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w", encoding="utf-8") as f:
            json.dump(dataset.to_dict(), f, ensure_ascii=False, indent=2)
        return out_path

    def statistics(self, dataset: Dataset):
        """Compute coverage statistics for the given dataset."""
        from airport_dataset.stats import compute_stats

        return compute_stats(dataset)
