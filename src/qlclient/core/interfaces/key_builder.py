"""Key builder interface."""

from typing import Any, Protocol


class IKeyBuilder(Protocol):
    """Contract for building cache keys from GraphQL operations.

    Key builders are responsible for creating unique, deterministic
    cache keys from a normalized query and its variables.
    """

    def build(
        self,
        query: str,
        variables: dict[str, Any] | None,
    ) -> str:
        """Build unique cache key for a GraphQL operation.

        Args:
            query: The whitespace-normalized GraphQL query string.
            variables: Variables passed to the operation.

        Returns:
            A key that is equal for equal queries and structurally equal
            variables, regardless of mapping key order.
        """
        ...
