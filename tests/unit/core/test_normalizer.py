"""Tests for OperationNormalizer."""

import json
from decimal import Decimal

import pytest

from qlclient import (
    DefaultKeyBuilder,
    InvalidOperation,
    JsonSerializer,
    Operation,
    OperationNormalizer,
    SerializationError,
)


@pytest.fixture
def normalizer() -> OperationNormalizer:
    """Create a normalizer for testing."""
    return OperationNormalizer(DefaultKeyBuilder(prefix="test"), JsonSerializer())


class TestNormalize:
    """Tests for OperationNormalizer.normalize."""

    def test_query_whitespace_is_collapsed(self, normalizer: OperationNormalizer) -> None:
        normalized = normalizer.normalize(
            Operation(query="  query A {\n\t x   }  ", variables={})
        )

        assert normalized.query == "query A { x }"

    def test_exact_request_body(self, normalizer: OperationNormalizer) -> None:
        """Test the wire body for a simple query."""
        normalized = normalizer.normalize(Operation(query="  query A { x } ", variables={}))

        assert normalized.payload.method == "POST"
        assert normalized.payload.body == b'{"query":"query A { x }","variables":{}}'
        assert normalized.payload.headers == {"content-type": "application/json"}

    @pytest.mark.parametrize("query", ["", "   ", "\n\t"])
    def test_empty_query_is_invalid(
        self, normalizer: OperationNormalizer, query: str
    ) -> None:
        with pytest.raises(InvalidOperation):
            normalizer.normalize(Operation(query=query))

    def test_key_ignores_variable_order(self, normalizer: OperationNormalizer) -> None:
        """Test that structurally equal variables share a key."""
        first = normalizer.normalize(
            Operation(query="query Q { x }", variables={"a": 1, "b": {"c": 2, "d": 3}})
        )
        second = normalizer.normalize(
            Operation(query="query Q { x }", variables={"b": {"d": 3, "c": 2}, "a": 1})
        )

        assert first.key == second.key

    def test_key_ignores_query_formatting(self, normalizer: OperationNormalizer) -> None:
        first = normalizer.normalize(Operation(query="query Q { x }"))
        second = normalizer.normalize(Operation(query="query   Q\n{ x }"))

        assert first.key == second.key

    def test_key_depends_on_variables(self, normalizer: OperationNormalizer) -> None:
        first = normalizer.normalize(Operation(query="query Q { x }", variables={"a": 1}))
        second = normalizer.normalize(Operation(query="query Q { x }", variables={"a": 2}))

        assert first.key != second.key

    def test_variables_are_sent_as_given(self, normalizer: OperationNormalizer) -> None:
        normalized = normalizer.normalize(
            Operation(query="query Q($id: ID!) { user(id: $id) { id } }", variables={"id": "7"})
        )

        body = json.loads(normalized.payload.body)
        assert body["variables"] == {"id": "7"}
        assert normalized.variables == {"id": "7"}

    def test_set_variables_key_matches_body(
        self, normalizer: OperationNormalizer
    ) -> None:
        """Test that the key is built from the same encoding as the body."""
        from_set = normalizer.normalize(Operation(query="{ x }", variables={"ids": {2, 1}}))
        from_list = normalizer.normalize(Operation(query="{ x }", variables={"ids": [1, 2]}))

        assert from_set.key == from_list.key
        assert from_set.payload.body == from_list.payload.body

    def test_unencodable_variables(self, normalizer: OperationNormalizer) -> None:
        with pytest.raises(SerializationError):
            normalizer.normalize(
                Operation(query="{ x }", variables={"amount": Decimal("9.99")})
            )


class TestFetchOptions:
    """Tests for merging caller fetch options."""

    def test_caller_headers_are_merged(self, normalizer: OperationNormalizer) -> None:
        normalized = normalizer.normalize(
            Operation(query="{ me { id } }"),
            {"headers": {"authorization": "Bearer token"}},
        )

        assert normalized.payload.headers == {
            "content-type": "application/json",
            "authorization": "Bearer token",
        }

    def test_caller_content_type_wins(self, normalizer: OperationNormalizer) -> None:
        """Test that a caller content-type replaces the default, in any case."""
        normalized = normalizer.normalize(
            Operation(query="{ me { id } }"),
            {"headers": {"Content-Type": "application/graphql+json"}},
        )

        assert normalized.payload.headers == {"Content-Type": "application/graphql+json"}

    def test_method_and_body_cannot_be_overridden(
        self, normalizer: OperationNormalizer
    ) -> None:
        normalized = normalizer.normalize(
            Operation(query="{ me { id } }"),
            {"method": "GET", "body": b"nope", "timeout": 5.0},
        )

        assert normalized.payload.method == "POST"
        assert normalized.payload.body == b'{"query":"{ me { id } }","variables":{}}'
        assert normalized.payload.extra == {"timeout": 5.0}

    def test_fetch_options_are_not_mutated(self, normalizer: OperationNormalizer) -> None:
        options = {"method": "GET", "headers": {"x-trace": "1"}}

        normalizer.normalize(Operation(query="{ me { id } }"), options)

        assert options == {"method": "GET", "headers": {"x-trace": "1"}}
