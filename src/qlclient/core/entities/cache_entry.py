"""Cache entry entity."""

from dataclasses import dataclass
from datetime import datetime, timezone

from qlclient.core.entities.result import OperationResult


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Holds the last result observed for a cache key. A new entry replaces
    the old one on every write-back.
    """

    key: str
    result: OperationResult
    created_at: datetime

    @property
    def age_seconds(self) -> float:
        """Seconds elapsed since the entry was written."""
        return (datetime.now(timezone.utc) - self.created_at).total_seconds()

    @classmethod
    def create(cls, key: str, result: OperationResult) -> "CacheEntry":
        """Factory method to create a new cache entry.

        Args:
            key: The cache key.
            result: The operation result to cache.

        Returns:
            A new CacheEntry instance.
        """
        return cls(
            key=key,
            result=result,
            created_at=datetime.now(timezone.utc),
        )
