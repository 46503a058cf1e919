"""Pytest configuration for qlclient tests."""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

ResponseFactory = Callable[..., httpx.Response]


@pytest.fixture
def respond() -> ResponseFactory:
    """Build GraphQL-shaped httpx responses."""

    def factory(
        data: Any = None,
        errors: list[dict[str, Any]] | None = None,
        status: int = 200,
    ) -> httpx.Response:
        body: dict[str, Any] = {"data": data}
        if errors is not None:
            body["errors"] = errors
        return httpx.Response(status, json=body)

    return factory


@pytest.fixture
def transport(respond: ResponseFactory) -> AsyncMock:
    """A transport that answers every request with the same data."""
    return AsyncMock(return_value=respond({"user": {"id": "1", "name": "Alice"}}))
