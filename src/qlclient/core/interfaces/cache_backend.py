"""Cache backend interface."""

from typing import Protocol

from qlclient.core.entities.cache_entry import CacheEntry


class ICacheBackend(Protocol):
    """Contract for result cache storage backends.

    The backend owns the eviction strategy: an unbounded backend never
    drops entries, a bounded one may evict on ``set`` or expire entries
    over time. Methods are synchronous because cache lookups must never
    suspend the caller.
    """

    def get(self, key: str) -> CacheEntry | None:
        """Retrieve a cache entry by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cache entry, or None if not found or evicted.
        """
        ...

    def set(self, key: str, entry: CacheEntry) -> None:
        """Store an entry, replacing any previous entry for the key.

        Args:
            key: The cache key.
            entry: The entry to store.
        """
        ...

    def delete(self, key: str) -> bool:
        """Delete a cache entry.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        ...

    def clear(self) -> None:
        """Clear all cache entries."""
        ...

    def __len__(self) -> int:
        """Return the number of stored entries."""
        ...
