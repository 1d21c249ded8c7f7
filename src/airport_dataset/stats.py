"""Field coverage statistics for an assembled dataset."""

from dataclasses import dataclass, field
from typing import Any, Dict

import pandas as pd

from airport_dataset.models import ENTRY_COLUMNS, Dataset


@dataclass
class DatasetStats:
    """Container for dataset statistics."""

    total_airports: int = 0
    field_coverage: Dict[str, int] = field(default_factory=dict)
    by_country: Dict[str, int] = field(default_factory=dict)
    by_local_lang: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total_airports": self.total_airports,
            "field_coverage": self.field_coverage,
            "by_country": self.by_country,
            "by_local_lang": self.by_local_lang,
        }

    def coverage_dataframe(self) -> pd.DataFrame:
        """Return field_coverage as DataFrame with a percentage column."""
        if not self.total_airports:
            return pd.DataFrame(columns=["field", "count", "percent"])
        df = pd.DataFrame(
            [{"field": k, "count": v} for k, v in self.field_coverage.items()]
        )
        df["percent"] = (df["count"] / self.total_airports * 100).round(1)
        return df

    def country_dataframe(self) -> pd.DataFrame:
        """Return by_country as DataFrame, largest first."""
        if not self.by_country:
            return pd.DataFrame(columns=["country", "count"])
        df = pd.DataFrame(
            [{"country": k, "count": v} for k, v in self.by_country.items()]
        )
        return df.sort_values(["count", "country"], ascending=[False, True]).reset_index(drop=True)


def compute_stats(dataset: Dataset) -> DatasetStats:
    """Compute statistics from an assembled dataset."""
    stats = DatasetStats()
    df = dataset.to_dataframe()
    if df.empty:
        return stats

    stats.total_airports = len(df)
    stats.field_coverage = {col: int(df[col].notna().sum()) for col in ENTRY_COLUMNS}
    stats.by_country = {
        str(k): int(v) for k, v in df["country"].fillna("Unknown").value_counts().items()
    }
    stats.by_local_lang = {
        str(k): int(v) for k, v in df["local_lang"].dropna().value_counts().items()
    }
    return stats
