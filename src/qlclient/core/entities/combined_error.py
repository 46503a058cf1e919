"""Combined error entity.

A single error value for every way a request can fail at runtime. The
origin is recorded as an :class:`ErrorKind` tag instead of a subclass, so
callers branch on ``error.kind`` (or the convenience properties) rather
than on ``isinstance`` checks.
"""

from collections.abc import Iterable
from enum import Enum

from qlclient.core.entities.graphql_error import GraphQLError
from qlclient.core.entities.response import ParsedResponse
from qlclient.exceptions import QlClientError


class ErrorKind(Enum):
    """Origin of a CombinedError.

    NETWORK_FAILURE: The transport raised before producing a response.
    MALFORMED_RESPONSE: A response arrived but was non-2xx or undecodable.
    PROTOCOL_ERRORS: The response carried GraphQL errors, possibly
        alongside valid data.
    """

    NETWORK_FAILURE = "network-failure"
    MALFORMED_RESPONSE = "malformed-response"
    PROTOCOL_ERRORS = "protocol-errors"


class CombinedError(QlClientError):
    """Network and GraphQL errors unified into one value.

    Attributes:
        kind: Which failure origin produced this error.
        network_error: The transport exception, or a NetworkFailure for
            unusable responses. None for protocol errors.
        graphql_errors: Ordered protocol errors; empty for network errors.
        response: The parsed response envelope, when one was received.
    """

    def __init__(
        self,
        *,
        network_error: BaseException | None = None,
        graphql_errors: Iterable[GraphQLError] | None = None,
        response: ParsedResponse | None = None,
        kind: ErrorKind | None = None,
    ) -> None:
        errors = tuple(graphql_errors or ())
        if network_error is None and not errors:
            raise ValueError(
                "CombinedError requires a network error or at least one GraphQL error"
            )

        if kind is None:
            if network_error is None:
                kind = ErrorKind.PROTOCOL_ERRORS
            elif response is None:
                kind = ErrorKind.NETWORK_FAILURE
            else:
                kind = ErrorKind.MALFORMED_RESPONSE

        self.kind = kind
        self.network_error = network_error
        self.graphql_errors = errors
        self.response = response
        self.message = self._build_message()
        super().__init__(self.message)

    @property
    def is_network_error(self) -> bool:
        """Check if the network-error branch is populated."""
        return self.network_error is not None

    @property
    def is_protocol_error(self) -> bool:
        """Check if the server returned GraphQL errors."""
        return bool(self.graphql_errors)

    @property
    def messages(self) -> list[str]:
        """Get the individual GraphQL error messages."""
        return [error.message for error in self.graphql_errors]

    def _build_message(self) -> str:
        if self.network_error is not None:
            detail = str(self.network_error) or type(self.network_error).__name__
            return f"[Network] {detail}"

        return "\n".join(f"[GraphQL] {error.message}" for error in self.graphql_errors)

    def __repr__(self) -> str:
        return (
            f"CombinedError(kind={self.kind.value!r}, "
            f"network_error={self.network_error!r}, "
            f"graphql_errors={len(self.graphql_errors)})"
        )
