"""In-memory cache backend implementations."""

from datetime import timedelta

from cachetools import LRUCache, TTLCache  # type: ignore[import-untyped]

from qlclient.core.entities.cache_entry import CacheEntry


class UnboundedCacheBackend:
    """In-memory backend that never evicts.

    Entries are only ever overwritten by later write-backs for the same
    key, so memory grows with the number of distinct operations.
    """

    def __init__(self) -> None:
        self._cache: dict[str, CacheEntry] = {}

    def get(self, key: str) -> CacheEntry | None:
        return self._cache.get(key)

    def set(self, key: str, entry: CacheEntry) -> None:
        self._cache[key] = entry

    def delete(self, key: str) -> bool:
        return self._cache.pop(key, None) is not None

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


class InMemoryCacheBackend:
    """In-memory cache backend using LRU with optional TTL.

    Suitable for long-running processes that execute many distinct
    operations. Uses cachetools for LRU eviction and TTL expiration.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        ttl: timedelta | None = None,
    ) -> None:
        """Initialize the in-memory cache backend.

        Args:
            maxsize: Maximum number of entries in the cache.
            ttl: Optional time-to-live for every entry. None keeps entries
                until they are evicted by size.
        """
        self._maxsize = maxsize
        self._ttl = ttl
        self._cache: LRUCache[str, CacheEntry]
        if ttl is None:
            self._cache = LRUCache(maxsize=maxsize)
        else:
            self._cache = TTLCache(maxsize=maxsize, ttl=ttl.total_seconds())

    def get(self, key: str) -> CacheEntry | None:
        """Retrieve a cache entry by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cache entry, or None if not found, evicted or expired.
        """
        return self._cache.get(key)

    def set(self, key: str, entry: CacheEntry) -> None:
        """Store an entry, evicting the least recently used one if full.

        Args:
            key: The cache key.
            entry: The entry to store.
        """
        self._cache[key] = entry

    def delete(self, key: str) -> bool:
        """Delete a cache entry.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        try:
            del self._cache[key]
            return True
        except KeyError:
            return False

    def clear(self) -> None:
        """Clear all cache entries."""
        self._cache.clear()

    def __len__(self) -> int:
        """Return the number of entries in the cache."""
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize

    @property
    def ttl(self) -> timedelta | None:
        """Return the entry time-to-live, if any."""
        return self._ttl
