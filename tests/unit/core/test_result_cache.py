"""Tests for ResultCache."""

import pytest

from qlclient import (
    CombinedError,
    DefaultKeyBuilder,
    InMemoryCacheBackend,
    InvalidOperation,
    JsonSerializer,
    Operation,
    OperationNormalizer,
    OperationResult,
    ResultCache,
    UnboundedCacheBackend,
)


@pytest.fixture
def cache() -> ResultCache:
    """Create a result cache for testing."""
    return ResultCache(UnboundedCacheBackend(), DefaultKeyBuilder())


class TestResultCache:
    """Tests for ResultCache."""

    def test_store_and_retrieve_result(self, cache: ResultCache) -> None:
        """Test writing back and looking up a result."""
        operation = Operation(
            query="query GetUser($id: ID!) { user(id: $id) { id name } }",
            variables={"id": "123"},
        )
        result = OperationResult(data={"user": {"id": "123", "name": "Alice"}})

        cache.after_query(operation, result)

        assert cache.get_cached_result(operation) is result

    def test_cache_miss(self, cache: ResultCache) -> None:
        """Test cache miss returns None."""
        assert cache.get_cached_result(Operation(query="{ user { id } }")) is None

    def test_different_variables_different_entries(self, cache: ResultCache) -> None:
        query = "query GetUser($id: ID!) { user(id: $id) { id name } }"
        alice = OperationResult(data={"user": {"id": "1", "name": "Alice"}})
        bob = OperationResult(data={"user": {"id": "2", "name": "Bob"}})

        cache.after_query(Operation(query=query, variables={"id": "1"}), alice)
        cache.after_query(Operation(query=query, variables={"id": "2"}), bob)

        assert cache.get_cached_result(Operation(query=query, variables={"id": "1"})) is alice
        assert cache.get_cached_result(Operation(query=query, variables={"id": "2"})) is bob

    def test_lookup_ignores_formatting_and_variable_order(self, cache: ResultCache) -> None:
        result = OperationResult(data={"x": 1})
        cache.after_query(Operation(query="query Q { x }", variables={"a": 1, "b": 2}), result)

        hit = cache.get_cached_result(
            Operation(query="  query   Q { x }\n", variables={"b": 2, "a": 1})
        )

        assert hit is result

    def test_write_back_overwrites(self, cache: ResultCache) -> None:
        operation = Operation(query="{ counter }")
        cache.after_query(operation, OperationResult(data={"counter": 1}))
        cache.after_query(operation, OperationResult(data={"counter": 2}))

        cached = cache.get_cached_result(operation)

        assert cached is not None
        assert cached.data == {"counter": 2}
        assert len(cache) == 1

    def test_error_results_are_cached(self, cache: ResultCache) -> None:
        """Test that the last result is stored whether or not it failed."""
        operation = Operation(query="{ counter }")
        failed = OperationResult(
            error=CombinedError(network_error=ConnectionError("down"))
        )

        cache.after_query(operation, failed)

        assert cache.get_cached_result(operation) is failed

    def test_normalized_operations_use_their_key(self) -> None:
        """Test that a normalized operation is stored under its own key."""
        cache = ResultCache(UnboundedCacheBackend(), DefaultKeyBuilder(prefix="other"))
        normalizer = OperationNormalizer(DefaultKeyBuilder(prefix="test"), JsonSerializer())
        normalized = normalizer.normalize(Operation(query="{ x }"))
        result = OperationResult(data={"x": 1})

        entry = cache.after_query(normalized, result)

        assert entry.key == normalized.key
        assert entry.key.startswith("test:")
        assert cache.get_cached_result(normalized) is result

    def test_empty_query_is_invalid(self, cache: ResultCache) -> None:
        with pytest.raises(InvalidOperation):
            cache.get_cached_result(Operation(query="   "))

    def test_cache_stats(self, cache: ResultCache) -> None:
        """Test cache statistics tracking."""
        operation = Operation(query="query Test { test }")

        assert cache.stats == {"hits": 0, "misses": 0, "total": 0, "size": 0}

        cache.get_cached_result(operation)
        assert cache.stats["misses"] == 1

        cache.after_query(operation, OperationResult(data={"test": "value"}))
        cache.get_cached_result(operation)

        assert cache.stats == {"hits": 1, "misses": 1, "total": 2, "size": 1}

    def test_clear_cache(self, cache: ResultCache) -> None:
        operation = Operation(query="query Test { test }")
        cache.after_query(operation, OperationResult(data={"test": "value"}))
        cache.get_cached_result(operation)

        cache.clear()

        assert cache.get_cached_result(operation) is None
        assert cache.stats["hits"] == 0
        assert len(cache) == 0

    def test_bounded_backend_evicts(self) -> None:
        """Test that eviction is decided by the backend."""
        cache = ResultCache(InMemoryCacheBackend(maxsize=2), DefaultKeyBuilder())
        first = Operation(query="{ a }")

        cache.after_query(first, OperationResult(data={"a": 1}))
        cache.after_query(Operation(query="{ b }"), OperationResult(data={"b": 1}))
        cache.after_query(Operation(query="{ c }"), OperationResult(data={"c": 1}))

        assert cache.get_cached_result(first) is None
        assert len(cache) == 2
