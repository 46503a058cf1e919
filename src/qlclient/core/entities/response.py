"""Parsed transport response entity."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ParsedResponse:
    """Uniform envelope around a raw transport response.

    Attributes:
        ok: True only for a 2xx status whose body decoded to a JSON object.
        status: The HTTP status code.
        status_text: The HTTP reason phrase.
        body: The decoded JSON object, or None if decoding failed.
        headers: Response headers with lower-cased names.
    """

    ok: bool
    status: int
    status_text: str
    body: dict[str, Any] | None = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def has_body(self) -> bool:
        """Check if the response carried a decodable body."""
        return self.body is not None
