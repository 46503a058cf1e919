"""httpx-based transport implementation."""

from __future__ import annotations

import importlib.util
import logging
from typing import TYPE_CHECKING, Any

from qlclient.core.entities.operation import RequestPayload

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Transport that sends operations with an ``httpx.AsyncClient``.

    The transport owns its client unless one is passed in. Extra fetch
    options supported by ``AsyncClient.request`` (``timeout``, ``cookies``,
    ``params``, ``extensions``) are forwarded; anything else is ignored.
    """

    _FORWARDED_OPTIONS = ("timeout", "cookies", "params", "extensions")

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the transport.

        Args:
            client: An existing client to reuse. It is not closed by
                :meth:`aclose`.
            timeout: Default timeout in seconds for a client created here.
        """
        import httpx

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def __call__(self, url: str, payload: RequestPayload) -> httpx.Response:
        """Send the payload to url.

        Args:
            url: The GraphQL endpoint.
            payload: The request built by the normalizer.

        Returns:
            The raw httpx response. Connection errors propagate.
        """
        options: dict[str, Any] = {
            name: payload.extra[name]
            for name in self._FORWARDED_OPTIONS
            if name in payload.extra
        }
        ignored = set(payload.extra) - set(options)
        if ignored:
            logger.debug("Ignoring unsupported fetch options: %s", sorted(ignored))

        return await self._client.request(
            payload.method,
            url,
            content=payload.body,
            headers=payload.headers,
            **options,
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()


def resolve_default_transport() -> HttpxTransport | None:
    """Probe the environment for a usable HTTP transport.

    Returns:
        An HttpxTransport if httpx is importable, otherwise None.
    """
    if importlib.util.find_spec("httpx") is None:
        return None
    return HttpxTransport()
