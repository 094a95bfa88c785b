"""Cached Price Source Adapter

Wrapper pattern: wraps any PriceSourcePort (normally PriceSourceHttpAdapter)
TTL cache: entries keyed by (ticker, minutes), valid while now - fetched_at < ttl
"""

import logging
import threading
import time
from typing import Callable

from libs.pricing.src.ports.price_source_port import PriceSourcePort
from libs.shared.src.constants.price_source_settings import SAMPLE_CACHE_TTL_SECONDS
from libs.shared.src.dtos.pricing.cache_entry_dto import CacheEntryDTO
from libs.shared.src.dtos.pricing.price_history_item_dto import StockListDTO
from libs.shared.src.dtos.pricing.sample_dto import SampleSeries


class CachedPriceSourceAdapter(PriceSourcePort):
    """Price source with in-memory TTL cache

    - Different windows are distinct keys, never derived from a larger window
    - No stale-on-error: an expired entry is not served when the refresh fails
    - Concurrent misses on the same key may both fetch; the later write wins
    - The lock only guards the map, never the upstream call
    """

    def __init__(
        self,
        inner: PriceSourcePort,
        ttl_seconds: float = SAMPLE_CACHE_TTL_SECONDS,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._inner = inner
        self._ttl = ttl_seconds
        self._clock = clock or time.monotonic
        self._entries: dict[tuple[str, int], CacheEntryDTO] = {}
        self._lock = threading.Lock()

    def _lookup(self, key: tuple[str, int]) -> SampleSeries | None:
        """Return a valid entry's series, dropping it if expired"""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() - entry["fetched_at"] < self._ttl:
                return entry["series"]
            del self._entries[key]
            return None

    def _store(self, key: tuple[str, int], series: SampleSeries) -> None:
        entry: CacheEntryDTO = {"series": series, "fetched_at": self._clock()}
        with self._lock:
            self._entries[key] = entry

    def get_price_history(self, ticker: str, minutes: int) -> SampleSeries:
        """Get samples (with cache)"""
        key = (ticker, minutes)

        cached = self._lookup(key)
        if cached is not None:
            self._logger.debug(f"Cache hit: {ticker} ({minutes}m)")
            return cached

        # Cache miss or expired, call original adapter
        self._logger.debug(f"Cache miss: {ticker} ({minutes}m)")
        series = tuple(self._inner.get_price_history(ticker, minutes))
        self._store(key, series)
        return series

    def list_stocks(self) -> StockListDTO:
        """Ticker list is not cached"""
        return self._inner.list_stocks()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
