"""Result cache backend implementations."""

from qlclient.infrastructure.backends.memory import (
    InMemoryCacheBackend,
    UnboundedCacheBackend,
)

__all__ = ["InMemoryCacheBackend", "UnboundedCacheBackend"]
