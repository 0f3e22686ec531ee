"""
Search Result Caching Module
Provides in-memory caching to reduce redundant API calls
"""

import copy
import logging
import threading
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from efficient_search.types import CacheStats, SearchResults
from efficient_search.utils import collapse_whitespace

logger = logging.getLogger("efficient_search.cache")


def normalize_query(query: str) -> str:
    """Lowercase a query and collapse its whitespace so near-duplicates share a key"""
    return collapse_whitespace(query.lower())


@dataclass
class CacheEntry:
    """A cached result set and its freshness window"""

    normalized_key: str
    results: SearchResults
    created_at: datetime
    expires_at: datetime


class SearchCache:
    """
    Bounded in-memory cache for enriched search results.

    Entries expire lazily: a stale entry is only dropped when a ``get`` touches
    it. When full, the earliest inserted entry is evicted to make room.
    """

    def __init__(
        self,
        ttl_minutes: float = 60,
        max_size: int = 100,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the search cache

        Args:
            ttl_minutes: How many minutes to keep cached results (default: 60)
            max_size: Maximum number of cached queries (default: 100)
            clock: Source of the current time, swappable for tests
        """
        if ttl_minutes < 0:
            raise ValueError("ttl_minutes must not be negative")
        if max_size < 1:
            raise ValueError("max_size must be at least 1")

        self.ttl_minutes = ttl_minutes
        self.cache_ttl = timedelta(minutes=ttl_minutes)
        self.max_size = max_size
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, query: str) -> SearchResults | None:
        """
        Get cached search results if available and not expired

        Args:
            query: Search query

        Returns:
            A copy of the cached results marked as cached, or None if not found/expired
        """
        key = normalize_query(query)

        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.debug(f"Cache miss for: {key}")
                return None

            if self._clock() > entry.expires_at:
                del self._entries[key]
                logger.debug(f"⌛ Expired cache entry dropped for: {key}")
                return None

            results = copy.deepcopy(entry.results)

        results["cached"] = True
        logger.info(f"🔄 Using cached results for: {key}")
        return results

    def set(self, query: str, results: SearchResults) -> None:
        """
        Cache search results

        Args:
            query: Search query
            results: Enriched search results to cache
        """
        key = normalize_query(query)

        with self._lock:
            now = self._clock()

            if key in self._entries:
                # Overwrites count as a fresh insertion for eviction order
                del self._entries[key]
            elif len(self._entries) >= self.max_size:
                evicted_key, _ = self._entries.popitem(last=False)
                logger.debug(f"🗑️ Evicted oldest cache entry: {evicted_key}")

            self._entries[key] = CacheEntry(
                normalized_key=key,
                results=copy.deepcopy(results),
                created_at=now,
                expires_at=now + self.cache_ttl,
            )

        logger.info(f"💾 Cached results for: {key}")

    def clear(self) -> None:
        """Clear all cached results"""
        with self._lock:
            cleared = len(self._entries)
            self._entries.clear()

        logger.info(f"🗑️ Cleared {cleared} cached search results")

    def get_stats(self) -> CacheStats:
        """Get cache occupancy; expired entries count until a get touches them"""
        with self._lock:
            size = len(self._entries)

        return CacheStats(
            size=size,
            max_size=self.max_size,
            ttl_minutes=self.ttl_minutes,
        )
