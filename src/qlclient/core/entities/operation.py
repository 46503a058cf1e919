"""Operation value objects.

An operation is what a caller hands to the client: an opaque query
document plus its variables. Normalizing it yields the cache key and the
transport-ready request payload.
"""

from dataclasses import dataclass, field
from typing import Any

from qlclient.core.entities.cache_policy import CachePolicy


@dataclass
class Operation:
    """A GraphQL query, mutation or subscription to execute.

    Attributes:
        query: The query document. Treated as an opaque string.
        variables: Variables for the document. None is treated as empty.
        cache_policy: Optional per-operation override of the client's
            default cache policy. Ignored for mutations and subscriptions.
    """

    query: str
    variables: dict[str, Any] | None = field(default_factory=dict)
    cache_policy: CachePolicy | str | None = None

    def __post_init__(self) -> None:
        if self.variables is None:
            self.variables = {}
        if self.cache_policy is not None:
            self.cache_policy = CachePolicy.parse(self.cache_policy)


@dataclass(frozen=True)
class RequestContext:
    """Ambient per-request options returned by a context factory.

    Attributes:
        fetch_options: Options merged into the transport request, such as
            ``{"headers": {"authorization": "Bearer ..."}}``.
    """

    fetch_options: dict[str, Any] | None = None


@dataclass(frozen=True)
class RequestPayload:
    """Transport-ready request built from an operation.

    ``method`` and ``body`` are fixed by the normalizer; only headers and
    the remaining transport options come from the caller.
    """

    method: str
    body: bytes
    headers: dict[str, str]
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class NormalizedOperation:
    """Result of normalizing an operation."""

    key: str
    query: str
    variables: dict[str, Any]
    payload: RequestPayload
