"""Exception types raised by qlclient.

Only programmer errors are raised at the call boundary
(:class:`InvalidOperation`, :class:`ConfigurationError`). Runtime failures
of a request are captured inside ``OperationResult.error`` instead.
"""


class QlClientError(Exception):
    """Base class for all qlclient errors."""

    pass


class InvalidOperation(QlClientError, ValueError):
    """Raised when an operation cannot be dispatched.

    The only invalid operation is one whose query is empty after
    whitespace normalization.
    """

    pass


class ConfigurationError(QlClientError):
    """Raised when the client is missing a required collaborator.

    Examples: no transport could be resolved at construction time, or a
    subscription was executed without a configured forwarder.
    """

    pass


class NetworkFailure(QlClientError):
    """A response that arrived but could not be used.

    Never raised by the client. It is stored as the network error of a
    ``CombinedError`` when the server answered with a non-2xx status or a
    body that did not decode.
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class SerializationError(QlClientError):
    """Raised when serialization or deserialization fails."""

    pass
