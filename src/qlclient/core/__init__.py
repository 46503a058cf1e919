"""Core domain layer for qlclient."""

from qlclient.core.entities import (
    CacheEntry,
    CachePolicy,
    ClientConfig,
    CombinedError,
    ErrorKind,
    GraphQLError,
    Operation,
    OperationResult,
    ParsedResponse,
)
from qlclient.core.interfaces import (
    ICacheBackend,
    IKeyBuilder,
    IResponse,
    ISerializer,
    ITransport,
)
from qlclient.core.services import OperationNormalizer, ResultCache

__all__ = [
    # Entities
    "CacheEntry",
    "CachePolicy",
    "ClientConfig",
    "CombinedError",
    "ErrorKind",
    "GraphQLError",
    "Operation",
    "OperationResult",
    "ParsedResponse",
    # Interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "IResponse",
    "ISerializer",
    "ITransport",
    # Services
    "OperationNormalizer",
    "ResultCache",
]
