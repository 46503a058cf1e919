"""Operation result entity."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from qlclient.core.entities.combined_error import CombinedError

TData = TypeVar("TData")


@dataclass(frozen=True)
class OperationResult(Generic[TData]):
    """The outcome of one request/response cycle or one cache hit.

    Both fields may be set at the same time when the server returned
    partial data together with GraphQL errors.
    """

    data: TData | None = None
    error: CombinedError | None = None

    @property
    def ok(self) -> bool:
        """Check if the result carries no error."""
        return self.error is None

    @property
    def is_partial(self) -> bool:
        """Check if the result has both data and an error."""
        return self.data is not None and self.error is not None

    def raise_for_error(self) -> TData | None:
        """Return the data, raising the CombinedError if there is one.

        Returns:
            The result data.

        Raises:
            CombinedError: If the result carries an error.
        """
        if self.error is not None:
            raise self.error
        return self.data
