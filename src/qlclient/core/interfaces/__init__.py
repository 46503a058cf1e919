"""Core interfaces (Protocol classes) for qlclient."""

from qlclient.core.interfaces.cache_backend import ICacheBackend
from qlclient.core.interfaces.key_builder import IKeyBuilder
from qlclient.core.interfaces.serializer import ISerializer
from qlclient.core.interfaces.transport import IResponse, ITransport

__all__ = [
    "ICacheBackend",
    "IKeyBuilder",
    "IResponse",
    "ISerializer",
    "ITransport",
]
