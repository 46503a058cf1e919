"""Result cache - flat map from operation keys to their last result."""

import logging
import threading

from qlclient.core.entities.cache_entry import CacheEntry
from qlclient.core.entities.operation import NormalizedOperation, Operation
from qlclient.core.entities.result import OperationResult
from qlclient.core.interfaces.cache_backend import ICacheBackend
from qlclient.core.interfaces.key_builder import IKeyBuilder
from qlclient.exceptions import InvalidOperation
from qlclient.utils.hashing import normalize_query

logger = logging.getLogger(__name__)


class ResultCache:
    """Stores the most recent result of each query operation.

    This is not a normalized entity store: entries have no relationship to
    each other and nothing is invalidated implicitly. Eviction, if any, is
    decided by the backend.
    """

    def __init__(self, backend: ICacheBackend, key_builder: IKeyBuilder) -> None:
        """Initialize the result cache.

        Args:
            backend: Storage and eviction strategy for entries.
            key_builder: Builds keys for operations that are not yet
                normalized.
        """
        self._backend = backend
        self._key_builder = key_builder
        self._lock = threading.Lock()

        # Statistics
        self._hits = 0
        self._misses = 0

    @property
    def key_builder(self) -> IKeyBuilder:
        """Get the key builder used for lookups and writes."""
        return self._key_builder

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, total lookups and stored entries.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "total": self._hits + self._misses,
            "size": len(self._backend),
        }

    def key_for(self, operation: Operation | NormalizedOperation) -> str:
        """Get the cache key of an operation.

        Args:
            operation: A raw or already normalized operation.

        Returns:
            The cache key.

        Raises:
            InvalidOperation: If the query is empty after normalization.
        """
        if isinstance(operation, NormalizedOperation):
            return operation.key

        query = normalize_query(operation.query or "")
        if not query:
            raise InvalidOperation("A query must be provided.")
        return self._key_builder.build(query, operation.variables)

    def get_cached_result(
        self, operation: Operation | NormalizedOperation
    ) -> OperationResult | None:
        """Look up the last result stored for an operation.

        Args:
            operation: The operation to look up.

        Returns:
            The cached result, or None on a miss.
        """
        key = self.key_for(operation)
        with self._lock:
            entry = self._backend.get(key)
            if entry is None:
                self._misses += 1
            else:
                self._hits += 1

        if entry is None:
            logger.debug("Cache MISS %s", key)
            return None

        logger.debug("Cache HIT %s", key)
        return entry.result

    def after_query(
        self,
        operation: Operation | NormalizedOperation,
        result: OperationResult,
    ) -> CacheEntry:
        """Store a result, replacing any previous one for the operation.

        Args:
            operation: The operation that produced the result.
            result: The result to store.

        Returns:
            The stored CacheEntry.
        """
        key = self.key_for(operation)
        entry = CacheEntry.create(key=key, result=result)
        with self._lock:
            self._backend.set(key, entry)

        logger.debug("Cache write %s", key)
        return entry

    def clear(self) -> None:
        """Clear all cached results and reset statistics."""
        with self._lock:
            self._backend.clear()
            self._hits = 0
            self._misses = 0

    def __len__(self) -> int:
        """Return the number of cached results."""
        return len(self._backend)
