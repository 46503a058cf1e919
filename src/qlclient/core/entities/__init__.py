"""Domain entities for qlclient."""

from qlclient.core.entities.cache_entry import CacheEntry
from qlclient.core.entities.cache_policy import CachePolicy
from qlclient.core.entities.client_config import ClientConfig
from qlclient.core.entities.combined_error import CombinedError, ErrorKind
from qlclient.core.entities.graphql_error import ErrorLocation, GraphQLError
from qlclient.core.entities.operation import (
    NormalizedOperation,
    Operation,
    RequestContext,
    RequestPayload,
)
from qlclient.core.entities.response import ParsedResponse
from qlclient.core.entities.result import OperationResult

__all__ = [
    "CacheEntry",
    "CachePolicy",
    "ClientConfig",
    "CombinedError",
    "ErrorKind",
    "ErrorLocation",
    "GraphQLError",
    "NormalizedOperation",
    "Operation",
    "OperationResult",
    "ParsedResponse",
    "RequestContext",
    "RequestPayload",
]
