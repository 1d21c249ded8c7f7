"""Retry, backoff and endpoint fallback around single Overpass attempts."""

import logging
import time
from typing import Any, Callable, Dict, Sequence

from airport_dataset.config import DEFAULT_RETRIES, DEFAULT_RETRY_BASE_MS
from airport_dataset.errors import EndpointError, FetchExhaustedError

logger = logging.getLogger(__name__)


def backoff_seconds(retry_base_ms: int, attempt: int) -> float:
    """Delay before retrying after zero-indexed `attempt`: base * 2**attempt."""
    return retry_base_ms * (2 ** attempt) / 1000.0


class FallbackFetcher:
    """
    Tries each endpoint in order, retrying rate limits, gateway timeouts and
    network failures with exponential backoff. Other errors move straight on
    to the next endpoint. Only total exhaustion is raised.
    """

    def __init__(
        self,
        fetch_once: Callable[[str], Dict[str, Any]],
        max_retries: int = DEFAULT_RETRIES,
        retry_base_ms: int = DEFAULT_RETRY_BASE_MS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._fetch_once = fetch_once
        self.max_retries = max_retries
        self.retry_base_ms = retry_base_ms
        self._sleep = sleep

    def fetch(self, endpoints: Sequence[str]) -> Dict[str, Any]:
        """Return the first successful payload from any endpoint."""
        if not endpoints:
            raise ValueError("At least one endpoint is required")

        for endpoint in endpoints:
            for attempt in range(self.max_retries + 1):
                try:
                    return self._fetch_once(endpoint)
                except EndpointError as e:
                    if not e.retryable:
                        logger.warning("%s; trying next endpoint", e)
                        break
                    if attempt >= self.max_retries:
                        logger.warning(
                            "Overpass failed after %d attempts: %s (%s)",
                            attempt + 1, endpoint, e,
                        )
                        break
                    delay = backoff_seconds(self.retry_base_ms, attempt)
                    logger.warning(
                        "Overpass retry %d/%d on %s after %dms",
                        attempt + 1, self.max_retries, endpoint, round(delay * 1000),
                    )
                    self._sleep(delay)

        raise FetchExhaustedError(
            f"All Overpass endpoints failed: {', '.join(endpoints)}"
        )
