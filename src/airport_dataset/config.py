"""Runtime configuration, resolved once from the environment and CLI flags."""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional, Tuple

from airport_dataset.errors import ConfigError

DEFAULT_OVERPASS = "https://overpass-api.de/api/interpreter"
DEFAULT_OVERPASS_FALLBACKS: Tuple[str, ...] = (
    DEFAULT_OVERPASS,
    "https://overpass.kumi.systems/api/interpreter",
    "https://overpass.nchc.org.tw/api/interpreter",
)
DEFAULT_OURAIRPORTS = "https://ourairports.com/data/airports.csv"
DEFAULT_RETRIES = 3
DEFAULT_RETRY_BASE_MS = 1500
DEFAULT_TIMEOUT = 240


def resolve_repo_root() -> Path:
    cwd = Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        if (parent / "pyproject.toml").exists():
            return parent
    return cwd


def parse_endpoint_list(value: Optional[str]) -> Tuple[str, ...]:
    """Split a comma-separated endpoint list, dropping blanks."""
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _int_from(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Config:
    """Immutable pipeline settings threaded through the build."""

    endpoints: Tuple[str, ...] = DEFAULT_OVERPASS_FALLBACKS
    ourairports_url: str = DEFAULT_OURAIRPORTS
    cache_path: Optional[Path] = None
    out_path: Optional[Path] = None
    version: Optional[str] = None
    max_retries: int = DEFAULT_RETRIES
    retry_base_ms: int = DEFAULT_RETRY_BASE_MS
    timeout: int = DEFAULT_TIMEOUT

    def __post_init__(self):
        if not self.endpoints:
            raise ConfigError("At least one Overpass endpoint is required")
        if self.max_retries < 0:
            raise ConfigError("max_retries must be >= 0")
        if self.retry_base_ms < 0:
            raise ConfigError("retry_base_ms must be >= 0")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Config":
        """Build config from environment variables (os.environ by default)."""
        env = os.environ if env is None else env
        endpoints = (
            parse_endpoint_list(env.get("OVERPASS_URLS"))
            or parse_endpoint_list(env.get("OVERPASS_URL"))
            or DEFAULT_OVERPASS_FALLBACKS
        )
        cache = env.get("OURAIRPORTS_CACHE")
        out = env.get("DATASET_OUT")
        return cls(
            endpoints=endpoints,
            ourairports_url=env.get("OURAIRPORTS_URL") or DEFAULT_OURAIRPORTS,
            cache_path=Path(cache) if cache else resolve_repo_root() / "data" / "ourairports.csv",
            out_path=Path(out) if out else None,
            version=env.get("DATASET_VERSION") or None,
            max_retries=_int_from(env, "OVERPASS_RETRIES", DEFAULT_RETRIES),
            retry_base_ms=_int_from(env, "OVERPASS_RETRY_BASE_MS", DEFAULT_RETRY_BASE_MS),
            timeout=_int_from(env, "OVERPASS_TIMEOUT", DEFAULT_TIMEOUT),
        )

    def with_overrides(self, **overrides) -> "Config":
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
