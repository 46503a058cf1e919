"""Transport interface."""

from collections.abc import Mapping
from typing import Protocol

from qlclient.core.entities.operation import RequestPayload


class IResponse(Protocol):
    """The parts of an HTTP response the client reads.

    ``httpx.Response`` satisfies this protocol.
    """

    @property
    def status_code(self) -> int: ...

    @property
    def reason_phrase(self) -> str: ...

    @property
    def content(self) -> bytes: ...

    @property
    def headers(self) -> Mapping[str, str]: ...


class ITransport(Protocol):
    """Contract for the HTTP primitive used to execute operations.

    A transport performs exactly one request per call. It may raise on
    connection failures; the client captures those as network errors.
    Timeouts are the transport's responsibility.
    """

    async def __call__(self, url: str, payload: RequestPayload) -> IResponse:
        """Send the payload to url.

        Args:
            url: The GraphQL endpoint.
            payload: Method, body, headers and extra transport options.

        Returns:
            The raw response.
        """
        ...
