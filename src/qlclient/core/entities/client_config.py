"""Client configuration entity."""

from dataclasses import dataclass
from datetime import timedelta

from qlclient.core.entities.cache_policy import CachePolicy
from qlclient.exceptions import ConfigurationError


@dataclass
class ClientConfig:
    """Client configuration.

    Provides the endpoint, the default cache policy and the bounds of the
    result cache.

    Cache bounds:
        With max_cache_size=None (the default) the result cache never
        evicts, entries are only ever overwritten. Setting max_cache_size
        switches to an LRU backend, optionally expiring entries after
        cache_ttl.
    """

    url: str
    cache_policy: CachePolicy | str = CachePolicy.CACHE_FIRST
    key_prefix: str = "qlclient"

    # Result cache bounds
    max_cache_size: int | None = None
    cache_ttl: timedelta | None = None

    def __post_init__(self) -> None:
        """Validate the endpoint and coerce the cache policy."""
        if not self.url:
            raise ConfigurationError("A GraphQL endpoint url must be provided.")
        self.cache_policy = CachePolicy.parse(self.cache_policy)
        if self.cache_ttl is not None and self.max_cache_size is None:
            raise ConfigurationError("cache_ttl requires max_cache_size to be set.")
