"""Operation normalizer - turns operations into cache keys and requests."""

import logging
from collections.abc import Mapping
from typing import Any

from qlclient.core.entities.operation import (
    NormalizedOperation,
    Operation,
    RequestPayload,
)
from qlclient.core.interfaces.key_builder import IKeyBuilder
from qlclient.core.interfaces.serializer import ISerializer
from qlclient.exceptions import InvalidOperation
from qlclient.utils.hashing import normalize_query

logger = logging.getLogger(__name__)

# Fetch options owned by the normalizer; callers cannot override them.
FIXED_OPTIONS = ("method", "body")


class OperationNormalizer:
    """Canonicalizes an operation into a cache key and a request payload.

    The query is whitespace-normalized once and used for both the key and
    the request body, so what is cached is exactly what was sent.
    """

    def __init__(self, key_builder: IKeyBuilder, serializer: ISerializer) -> None:
        """Initialize the normalizer.

        Args:
            key_builder: Builds cache keys from the normalized query.
            serializer: Encodes the request body.
        """
        self._key_builder = key_builder
        self._serializer = serializer

    @property
    def key_builder(self) -> IKeyBuilder:
        """Get the key builder."""
        return self._key_builder

    def normalize(
        self,
        operation: Operation,
        fetch_options: Mapping[str, Any] | None = None,
    ) -> NormalizedOperation:
        """Normalize an operation.

        Args:
            operation: The operation to normalize.
            fetch_options: Caller options merged into the request.

        Returns:
            The cache key, normalized query and request payload.

        Raises:
            InvalidOperation: If the query is empty after normalization.
            SerializationError: If the variables cannot be encoded.
        """
        query = normalize_query(operation.query or "")
        if not query:
            raise InvalidOperation("A query must be provided.")

        variables = dict(operation.variables or {})

        # Encoding the body first surfaces unsupported variables as
        # SerializationError
        payload = self.build_payload(query, variables, fetch_options)

        return NormalizedOperation(
            key=self._key_builder.build(query, variables),
            query=query,
            variables=variables,
            payload=payload,
        )

    def build_payload(
        self,
        query: str,
        variables: dict[str, Any],
        fetch_options: Mapping[str, Any] | None = None,
    ) -> RequestPayload:
        """Build the POST request for a normalized query.

        Caller headers are merged over the default content-type (names
        compared case-insensitively). ``method`` and ``body`` options are
        dropped, every other option is passed through as ``extra``.

        Args:
            query: The normalized query.
            variables: The operation variables.
            fetch_options: Caller options, e.g. from a context factory.

        Returns:
            The transport-ready payload.
        """
        options = dict(fetch_options or {})

        for name in FIXED_OPTIONS:
            if name in options:
                options.pop(name)
                logger.debug("Ignoring caller fetch option %r", name)

        caller_headers = options.pop("headers", None) or {}
        headers: dict[str, str] = {}
        if not any(name.lower() == "content-type" for name in caller_headers):
            headers["content-type"] = self._serializer.content_type
        headers.update({str(name): str(value) for name, value in caller_headers.items()})

        body = self._serializer.serialize({"query": query, "variables": variables})

        return RequestPayload(method="POST", body=body, headers=headers, extra=options)
