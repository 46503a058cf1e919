"""Transport implementations."""

from qlclient.infrastructure.transports.httpx_transport import (
    HttpxTransport,
    resolve_default_transport,
)

__all__ = ["HttpxTransport", "resolve_default_transport"]
