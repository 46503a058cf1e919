"""Error unifier - maps every request outcome to an OperationResult."""

import logging
from typing import Any

from qlclient.core.entities.combined_error import CombinedError, ErrorKind
from qlclient.core.entities.graphql_error import GraphQLError
from qlclient.core.entities.response import ParsedResponse
from qlclient.core.entities.result import OperationResult
from qlclient.exceptions import NetworkFailure

logger = logging.getLogger(__name__)


def unify_exception(exc: Exception) -> OperationResult[Any]:
    """Build the result of a transport call that raised.

    Args:
        exc: The exception raised by the transport.

    Returns:
        A result with no data and a NETWORK_FAILURE error.
    """
    logger.warning("Transport failed: %r", exc)
    return OperationResult(
        data=None,
        error=CombinedError(network_error=exc, kind=ErrorKind.NETWORK_FAILURE),
    )


def unify_response(parsed: ParsedResponse) -> OperationResult[Any]:
    """Build the result of a transport call that produced a response.

    Rules, in order:
        1. A response that is not ok or has no body is a
           MALFORMED_RESPONSE carrying the envelope.
        2. A body with a non-empty ``errors`` list is PROTOCOL_ERRORS;
           ``data`` is still taken from the body.
        3. Anything else is a success and allocates no error.

    Args:
        parsed: The parsed response envelope.

    Returns:
        The operation result.
    """
    if not parsed.ok or parsed.body is None:
        logger.warning(
            "Unusable response: HTTP %s %s", parsed.status, parsed.status_text
        )
        failure = NetworkFailure(
            parsed.status_text or f"HTTP {parsed.status}", status=parsed.status
        )
        return OperationResult(
            data=None,
            error=CombinedError(
                network_error=failure,
                response=parsed,
                kind=ErrorKind.MALFORMED_RESPONSE,
            ),
        )

    data = parsed.body.get("data")
    errors = _graphql_errors(parsed.body.get("errors"))
    if not errors:
        return OperationResult(data=data, error=None)

    return OperationResult(
        data=data,
        error=CombinedError(
            graphql_errors=errors,
            response=parsed,
            kind=ErrorKind.PROTOCOL_ERRORS,
        ),
    )


def _graphql_errors(raw: Any) -> list[GraphQLError]:
    if not raw:
        return []
    if not isinstance(raw, list):
        raw = [raw]
    return [GraphQLError.from_dict(item) for item in raw]
