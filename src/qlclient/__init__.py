"""qlclient - Client-side GraphQL request orchestrator with result caching.

Executes GraphQL operations over HTTP and decides, per request, whether
to serve a cached result, go to the network, or both. Network failures,
unusable responses and GraphQL errors all arrive as one CombinedError on
the returned OperationResult.

Example:
    from qlclient import Operation, RequestContext, create_client

    client = create_client(
        "https://api.example.com/graphql",
        context=lambda: RequestContext(
            fetch_options={"headers": {"authorization": f"Bearer {token}"}}
        ),
        cache_policy="cache-first",
    )

    result = await client.execute_query(
        Operation(query="query Me { me { id name } }")
    )

Mutations bypass the cache:
    result = await client.execute_mutation(
        Operation(
            query="mutation Rename($name: String!) { rename(name: $name) { id } }",
            variables={"name": "Alice"},
        )
    )
    if result.error and result.error.is_network_error:
        ...
"""

from qlclient.client import Client, ContextFactory, SubscriptionForwarder, create_client
from qlclient.core.entities import (
    CacheEntry,
    CachePolicy,
    ClientConfig,
    CombinedError,
    ErrorKind,
    ErrorLocation,
    GraphQLError,
    NormalizedOperation,
    Operation,
    OperationResult,
    ParsedResponse,
    RequestContext,
    RequestPayload,
)
from qlclient.core.interfaces import (
    ICacheBackend,
    IKeyBuilder,
    IResponse,
    ISerializer,
    ITransport,
)
from qlclient.core.services import (
    OperationNormalizer,
    ResultCache,
    parse_response,
    unify_exception,
    unify_response,
)
from qlclient.exceptions import (
    ConfigurationError,
    InvalidOperation,
    NetworkFailure,
    QlClientError,
    SerializationError,
)
from qlclient.infrastructure import (
    DefaultKeyBuilder,
    HttpxTransport,
    InMemoryCacheBackend,
    JsonSerializer,
    UnboundedCacheBackend,
    resolve_default_transport,
)
from qlclient.utils.hashing import normalize_query

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Client
    "Client",
    "ContextFactory",
    "SubscriptionForwarder",
    "create_client",
    # Core entities
    "CacheEntry",
    "CachePolicy",
    "ClientConfig",
    "CombinedError",
    "ErrorKind",
    "ErrorLocation",
    "GraphQLError",
    "NormalizedOperation",
    "Operation",
    "OperationResult",
    "ParsedResponse",
    "RequestContext",
    "RequestPayload",
    # Core interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "IResponse",
    "ISerializer",
    "ITransport",
    # Core services
    "OperationNormalizer",
    "ResultCache",
    "parse_response",
    "unify_exception",
    "unify_response",
    # Errors
    "ConfigurationError",
    "InvalidOperation",
    "NetworkFailure",
    "QlClientError",
    "SerializationError",
    # Infrastructure implementations
    "DefaultKeyBuilder",
    "HttpxTransport",
    "InMemoryCacheBackend",
    "JsonSerializer",
    "UnboundedCacheBackend",
    "resolve_default_transport",
    # Utilities
    "normalize_query",
]
