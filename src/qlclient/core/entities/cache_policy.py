"""Cache policy entity.

A cache policy governs how the Result Cache is read and written for a
single query execution.
"""

from enum import Enum

from qlclient.exceptions import ConfigurationError


class CachePolicy(Enum):
    """Cache policy for a query execution.

    CACHE_FIRST: Serve a cached result when present, otherwise fetch and cache.
    CACHE_AND_NETWORK: Serve a cached result when present and always fetch
        a fresh one, writing it back to the cache.
    NETWORK_ONLY: Always fetch; never read nor write the cache.
    """

    CACHE_FIRST = "cache-first"
    CACHE_AND_NETWORK = "cache-and-network"
    NETWORK_ONLY = "network-only"

    @property
    def reads_cache(self) -> bool:
        """Whether cached results may be served under this policy."""
        return self is not CachePolicy.NETWORK_ONLY

    @property
    def writes_cache(self) -> bool:
        """Whether fresh results are written back under this policy."""
        return self is not CachePolicy.NETWORK_ONLY

    @classmethod
    def parse(cls, value: "CachePolicy | str") -> "CachePolicy":
        """Coerce a policy name such as ``"cache-first"`` to a CachePolicy.

        Args:
            value: A CachePolicy member or its string value.

        Returns:
            The matching CachePolicy.

        Raises:
            ConfigurationError: If the value names no known policy.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as e:
            allowed = ", ".join(policy.value for policy in cls)
            raise ConfigurationError(
                f"Unknown cache policy {value!r}, expected one of: {allowed}"
            ) from e
