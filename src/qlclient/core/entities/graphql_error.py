"""Protocol-level GraphQL error entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ErrorLocation:
    """Location of an error in the query document."""

    line: int
    column: int


@dataclass(frozen=True)
class GraphQLError:
    """A single entry of the ``errors`` array of a GraphQL response.

    Attributes:
        message: Human readable description of the error.
        locations: Positions in the query document the error refers to.
        path: Path of the response field that failed.
        extensions: Server-specific additional information.
    """

    message: str
    locations: tuple[ErrorLocation, ...] = ()
    path: tuple[str | int, ...] | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_dict(cls, raw: Any) -> "GraphQLError":
        """Build an error from its wire representation.

        Servers do not always follow the GraphQL response format, so
        anything that is not a mapping is kept as its string form and
        malformed locations are skipped.

        Args:
            raw: One decoded entry of the ``errors`` array.

        Returns:
            A new GraphQLError instance.
        """
        if not isinstance(raw, Mapping):
            return cls(message=str(raw))

        locations = []
        raw_locations = raw.get("locations")
        for location in raw_locations if isinstance(raw_locations, list) else ():
            if not isinstance(location, Mapping):
                continue
            line = location.get("line")
            column = location.get("column", 0)
            if _is_position(line) and _is_position(column):
                locations.append(ErrorLocation(line=line, column=column))

        path = raw.get("path")
        extensions = raw.get("extensions")

        return cls(
            message=str(raw.get("message", "Unknown GraphQL error")),
            locations=tuple(locations),
            path=tuple(path) if isinstance(path, list) else None,
            extensions=dict(extensions) if isinstance(extensions, Mapping) else {},
        )


def _is_position(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
