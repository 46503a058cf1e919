"""Infrastructure layer implementations for qlclient."""

from qlclient.infrastructure.backends import InMemoryCacheBackend, UnboundedCacheBackend
from qlclient.infrastructure.key_builders import DefaultKeyBuilder
from qlclient.infrastructure.serializers import JsonSerializer, SerializationError
from qlclient.infrastructure.transports import HttpxTransport, resolve_default_transport

__all__ = [
    "DefaultKeyBuilder",
    "HttpxTransport",
    "InMemoryCacheBackend",
    "JsonSerializer",
    "SerializationError",
    "UnboundedCacheBackend",
    "resolve_default_transport",
]
