"""Default key builder implementation."""

from typing import Any

from qlclient.utils.hashing import hash_value, normalize_query


class DefaultKeyBuilder:
    """Default key builder using hash of query and variables.

    Creates deterministic cache keys from GraphQL operation parameters
    using SHA-256 hashing. Variables are hashed from a sorted-keys
    serialization, so key order never affects the result.
    """

    def __init__(self, prefix: str = "qlclient") -> None:
        """Initialize the key builder.

        Args:
            prefix: Prefix for all cache keys.
        """
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        """Get the key prefix."""
        return self._prefix

    def build(
        self,
        query: str,
        variables: dict[str, Any] | None,
    ) -> str:
        """Build unique cache key for a GraphQL operation.

        Args:
            query: The GraphQL query string. Normalized again here so that
                callers passing a raw query still get a stable key.
            variables: Variables passed to the operation.

        Returns:
            A key of the form ``prefix:q:<hash>`` with a ``:v:<hash>``
            suffix when variables are not empty.
        """
        parts = [self._prefix]

        # Hash normalized query
        parts.append(f"q:{hash_value(normalize_query(query))}")

        # Empty and missing variables share a key
        if variables:
            parts.append(f"v:{hash_value(variables)}")

        return ":".join(parts)
