"""GraphQL client - executes operations under a cache policy.

The client is the only component that performs I/O. For every call it
normalizes the operation, consults the result cache according to the
active policy, sends the request through the transport when needed, and
turns whatever came back into an :class:`OperationResult`.

Example:
    from qlclient import Operation, create_client

    client = create_client("https://api.example.com/graphql")

    result = await client.execute_query(
        Operation(
            query="query GetUser($id: ID!) { user(id: $id) { id name } }",
            variables={"id": "123"},
        )
    )
    if result.error:
        print(result.error.message)

Cache-and-network as a stream of deliveries:
    operation = Operation(query="{ users { id } }", cache_policy="cache-and-network")

    async for result in client.stream_query(operation):
        render(result.data)  # cached first (if any), then fresh
"""

import asyncio
import dataclasses
import logging
from collections.abc import AsyncIterator, Callable, Mapping
from types import TracebackType
from typing import Any

from qlclient.core.entities.cache_policy import CachePolicy
from qlclient.core.entities.client_config import ClientConfig
from qlclient.core.entities.operation import (
    NormalizedOperation,
    Operation,
    RequestContext,
)
from qlclient.core.entities.result import OperationResult
from qlclient.core.interfaces.key_builder import IKeyBuilder
from qlclient.core.interfaces.serializer import ISerializer
from qlclient.core.interfaces.transport import ITransport
from qlclient.core.services.error_unifier import unify_exception, unify_response
from qlclient.core.services.normalizer import OperationNormalizer
from qlclient.core.services.response_parser import parse_response
from qlclient.core.services.result_cache import ResultCache
from qlclient.exceptions import ConfigurationError
from qlclient.infrastructure.backends.memory import (
    InMemoryCacheBackend,
    UnboundedCacheBackend,
)
from qlclient.infrastructure.key_builders.default import DefaultKeyBuilder
from qlclient.infrastructure.serializers.json import JsonSerializer
from qlclient.infrastructure.transports.httpx_transport import (
    resolve_default_transport,
)

logger = logging.getLogger(__name__)

ContextFactory = Callable[[], RequestContext | Mapping[str, Any] | None]
SubscriptionForwarder = Callable[[Operation], AsyncIterator[OperationResult[Any]]]


class Client:
    """Executes queries, mutations and subscriptions.

    Queries honor a cache policy (the operation's own, else the client
    default). Mutations always hit the network and are never cached.
    Subscriptions are handed to the configured forwarder as-is.

    Under ``cache-and-network`` a cache hit is returned immediately while
    the fresh request runs as a background task; its result only lands in
    the cache. Use :meth:`stream_query` to receive both deliveries, and
    :meth:`flush` to wait for background refreshes.
    """

    def __init__(
        self,
        url: str,
        transport: ITransport,
        *,
        context: ContextFactory | None = None,
        cache_policy: CachePolicy | str = CachePolicy.CACHE_FIRST,
        subscription_forwarder: SubscriptionForwarder | None = None,
        cache: ResultCache | None = None,
        normalizer: OperationNormalizer | None = None,
        serializer: ISerializer | None = None,
        key_prefix: str = "qlclient",
    ) -> None:
        """Initialize the client.

        Args:
            url: The GraphQL endpoint.
            transport: Sends requests. Required; see :func:`create_client`
                for automatic resolution.
            context: Zero-argument factory called on every operation for
                ambient fetch options such as auth headers.
            cache_policy: Default cache policy for queries.
            subscription_forwarder: Executes subscriptions.
            cache: Result cache. Defaults to an unbounded in-memory cache.
            normalizer: Operation normalizer. Defaults to one using the
                cache's key builder and the serializer.
            serializer: Wire codec. Defaults to JsonSerializer.
            key_prefix: Prefix of cache keys, used only when neither a
                cache nor a normalizer is given.

        Raises:
            ConfigurationError: If url or transport is missing, or the
                cache policy is unknown.
        """
        if not url:
            raise ConfigurationError("A GraphQL endpoint url must be provided.")
        if transport is None:
            raise ConfigurationError("A transport must be provided.")

        self._url = url
        self._transport = transport
        self._context = context
        self._default_cache_policy = CachePolicy.parse(cache_policy)
        self._subscription_forwarder = subscription_forwarder

        # The normalizer and the cache must agree on keys
        if cache is not None:
            key_builder: IKeyBuilder = cache.key_builder
        elif normalizer is not None:
            key_builder = normalizer.key_builder
        else:
            key_builder = DefaultKeyBuilder(prefix=key_prefix)

        self._serializer = serializer if serializer is not None else JsonSerializer()
        self._normalizer = (
            normalizer
            if normalizer is not None
            else OperationNormalizer(key_builder, self._serializer)
        )
        self._cache = (
            cache if cache is not None else ResultCache(UnboundedCacheBackend(), key_builder)
        )

        # Background refreshes started by cache-and-network hits
        self._pending: set[asyncio.Task[OperationResult[Any]]] = set()

    @property
    def url(self) -> str:
        """Get the GraphQL endpoint."""
        return self._url

    @property
    def cache(self) -> ResultCache:
        """Get the result cache."""
        return self._cache

    @property
    def default_cache_policy(self) -> CachePolicy:
        """Get the cache policy used when an operation sets none."""
        return self._default_cache_policy

    @property
    def pending_refreshes(self) -> int:
        """Number of background refreshes still in flight."""
        return len(self._pending)

    async def execute_query(self, operation: Operation) -> OperationResult[Any]:
        """Execute a query under its cache policy.

        Args:
            operation: The query to execute.

        Returns:
            The cached or fresh result. Network and GraphQL failures are
            reported in ``result.error``, never raised.

        Raises:
            InvalidOperation: If the query is empty. No request is sent.
            SerializationError: If the variables cannot be encoded. No
                request is sent.
        """
        normalized = self._prepare(operation)
        policy = self._policy_for(operation)
        cached = self._lookup(normalized, policy)

        if cached is not None:
            if policy is CachePolicy.CACHE_AND_NETWORK:
                self._schedule_refresh(normalized, policy)
            return cached

        return await self._execute_and_cache(normalized, policy)

    async def stream_query(
        self, operation: Operation
    ) -> AsyncIterator[OperationResult[Any]]:
        """Execute a query, yielding every delivery it produces.

        Yields the cached result and then the fresh one for a
        ``cache-and-network`` hit, and exactly one result otherwise. The
        fresh result is written back before it is yielded. Each call starts
        a new sequence. For a ``cache-and-network`` hit the request is sent
        even if the consumer stops after the cached result; :meth:`flush`
        waits for it.

        Args:
            operation: The query to execute.

        Yields:
            One or two operation results.

        Raises:
            InvalidOperation: If the query is empty, on first iteration.
            SerializationError: If the variables cannot be encoded, on
                first iteration.
        """
        normalized = self._prepare(operation)
        policy = self._policy_for(operation)
        cached = self._lookup(normalized, policy)

        if cached is None:
            yield await self._execute_and_cache(normalized, policy)
            return

        if policy is not CachePolicy.CACHE_AND_NETWORK:
            yield cached
            return

        # Started before the cached delivery so an abandoned stream still
        # writes the fresh result back
        refresh = self._schedule_refresh(normalized, policy)
        yield cached
        yield await asyncio.shield(refresh)

    async def execute_mutation(self, operation: Operation) -> OperationResult[Any]:
        """Execute a mutation. The cache is neither read nor written.

        Args:
            operation: The mutation to execute.

        Returns:
            The fresh result.

        Raises:
            InvalidOperation: If the query is empty. No request is sent.
            SerializationError: If the variables cannot be encoded. No
                request is sent.
        """
        return await self._execute(self._prepare(operation))

    def execute_subscription(
        self, operation: Operation
    ) -> AsyncIterator[OperationResult[Any]]:
        """Forward a subscription to the configured forwarder.

        Args:
            operation: The subscription to start.

        Returns:
            Whatever the forwarder returns for the operation.

        Raises:
            ConfigurationError: If no subscription forwarder was set.
        """
        if self._subscription_forwarder is None:
            raise ConfigurationError("No subscription forwarder was set.")
        return self._subscription_forwarder(operation)

    async def flush(self) -> None:
        """Wait until every background refresh has been written back."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def aclose(self) -> None:
        """Flush background refreshes and close the transport if it can be."""
        await self.flush()
        close = getattr(self._transport, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def _fetch_options(self) -> dict[str, Any]:
        if self._context is None:
            return {}

        context = self._context()
        if context is None:
            return {}
        if isinstance(context, RequestContext):
            return dict(context.fetch_options or {})
        return dict(context.get("fetch_options") or {})

    def _prepare(self, operation: Operation) -> NormalizedOperation:
        return self._normalizer.normalize(operation, self._fetch_options())

    def _policy_for(self, operation: Operation) -> CachePolicy:
        if operation.cache_policy is None:
            return self._default_cache_policy
        return CachePolicy.parse(operation.cache_policy)

    def _lookup(
        self, normalized: NormalizedOperation, policy: CachePolicy
    ) -> OperationResult[Any] | None:
        if not policy.reads_cache:
            return None
        return self._cache.get_cached_result(normalized)

    async def _execute(self, normalized: NormalizedOperation) -> OperationResult[Any]:
        """Send one request and unify its outcome.

        Args:
            normalized: The normalized operation to send.

        Returns:
            The operation result. Transport exceptions are captured.
        """
        try:
            response = await self._transport(self._url, normalized.payload)
        except Exception as e:
            return unify_exception(e)

        return unify_response(parse_response(response, self._serializer))

    async def _execute_and_cache(
        self, normalized: NormalizedOperation, policy: CachePolicy
    ) -> OperationResult[Any]:
        result = await self._execute(normalized)
        if policy.writes_cache:
            self._cache.after_query(normalized, result)
        return result

    def _schedule_refresh(
        self, normalized: NormalizedOperation, policy: CachePolicy
    ) -> "asyncio.Task[OperationResult[Any]]":
        logger.debug("Scheduling background refresh for %s", normalized.key)
        task = asyncio.create_task(self._execute_and_cache(normalized, policy))
        self._pending.add(task)
        task.add_done_callback(self._on_refresh_done)
        return task

    def _on_refresh_done(self, task: "asyncio.Task[OperationResult[Any]]") -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Background refresh failed", exc_info=exc)


def create_client(
    url: str | None = None,
    *,
    transport: ITransport | None = None,
    context: ContextFactory | None = None,
    cache_policy: CachePolicy | str | None = None,
    subscription_forwarder: SubscriptionForwarder | None = None,
    config: ClientConfig | None = None,
) -> Client:
    """Create a client, resolving a default transport when none is given.

    Args:
        url: The GraphQL endpoint. Overrides ``config.url`` when both are set.
        transport: Sends requests. Resolved from the environment if omitted.
        context: Zero-argument factory for per-call fetch options.
        cache_policy: Default cache policy. Overrides ``config.cache_policy``.
        subscription_forwarder: Executes subscriptions.
        config: Full client configuration, including result cache bounds.

    Returns:
        A configured Client.

    Raises:
        ConfigurationError: If no url is given, the cache policy is unknown,
            or no transport was given and none could be resolved.
    """
    if config is None:
        config = ClientConfig(
            url=url or "",
            cache_policy=cache_policy or CachePolicy.CACHE_FIRST,
        )
    else:
        overrides: dict[str, Any] = {}
        if url:
            overrides["url"] = url
        if cache_policy is not None:
            overrides["cache_policy"] = cache_policy
        if overrides:
            config = dataclasses.replace(config, **overrides)

    if transport is None:
        transport = resolve_default_transport()
    if transport is None:
        raise ConfigurationError(
            "Could not resolve a transport, you should provide one."
        )

    if config.max_cache_size is None:
        backend: UnboundedCacheBackend | InMemoryCacheBackend = UnboundedCacheBackend()
    else:
        backend = InMemoryCacheBackend(
            maxsize=config.max_cache_size,
            ttl=config.cache_ttl,
        )

    return Client(
        config.url,
        transport,
        context=context,
        cache_policy=config.cache_policy,
        subscription_forwarder=subscription_forwarder,
        cache=ResultCache(backend, DefaultKeyBuilder(prefix=config.key_prefix)),
    )
