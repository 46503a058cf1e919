"""Tests for HttpxTransport using mocked HTTP responses."""

import json

import httpx
import pytest
import respx

from qlclient.core.entities import RequestPayload
from qlclient.infrastructure.transports import httpx_transport
from qlclient.infrastructure.transports.httpx_transport import (
    HttpxTransport,
    resolve_default_transport,
)

URL = "https://api.test.dev/graphql"


def _payload(**extra: object) -> RequestPayload:
    return RequestPayload(
        method="POST",
        body=b'{"query":"{ x }","variables":{}}',
        headers={"content-type": "application/json", "authorization": "Bearer t"},
        extra=dict(extra),
    )


class TestHttpxTransport:
    """Tests for HttpxTransport."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_sends_payload(self) -> None:
        route = respx.post(URL).mock(
            return_value=httpx.Response(200, json={"data": {"x": 1}})
        )
        transport = HttpxTransport()

        response = await transport(URL, _payload())
        await transport.aclose()

        assert response.status_code == 200
        request = route.calls[0].request
        assert request.method == "POST"
        assert json.loads(request.content) == {"query": "{ x }", "variables": {}}
        assert request.headers["content-type"] == "application/json"
        assert request.headers["authorization"] == "Bearer t"

    @pytest.mark.asyncio
    @respx.mock
    async def test_forwards_supported_options(self) -> None:
        route = respx.post(URL, params={"trace": "1"}).mock(
            return_value=httpx.Response(200, json={})
        )
        transport = HttpxTransport()

        await transport(URL, _payload(params={"trace": "1"}, unknown="ignored"))
        await transport.aclose()

        assert route.calls[0].request.url.params["trace"] == "1"

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_errors_propagate(self) -> None:
        """Test that the transport leaves error capture to the client."""
        respx.post(URL).mock(side_effect=httpx.ConnectError("refused"))
        transport = HttpxTransport()

        with pytest.raises(httpx.ConnectError):
            await transport(URL, _payload())
        await transport.aclose()

    @pytest.mark.asyncio
    async def test_shared_client_is_not_closed(self) -> None:
        client = httpx.AsyncClient()
        transport = HttpxTransport(client=client)

        await transport.aclose()

        assert not client.is_closed
        await client.aclose()


class TestResolveDefaultTransport:
    """Tests for resolve_default_transport."""

    @pytest.mark.asyncio
    async def test_resolves_httpx(self) -> None:
        transport = resolve_default_transport()

        assert isinstance(transport, HttpxTransport)
        await transport.aclose()

    def test_returns_none_without_httpx(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            httpx_transport.importlib.util, "find_spec", lambda name: None
        )

        assert resolve_default_transport() is None
