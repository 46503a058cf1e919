"""Response parser - wraps raw transport responses in a uniform envelope."""

import logging
from typing import Any

from qlclient.core.entities.response import ParsedResponse
from qlclient.core.interfaces.serializer import ISerializer
from qlclient.core.interfaces.transport import IResponse
from qlclient.exceptions import SerializationError

logger = logging.getLogger(__name__)


def parse_response(response: IResponse, serializer: ISerializer) -> ParsedResponse:
    """Decode a raw response.

    A body is kept whenever it decodes to a JSON object, even for non-2xx
    statuses, so GraphQL errors sent with e.g. a 400 remain inspectable.
    ``ok`` is only True for a 2xx status with such a body. Decoding
    failures never propagate.

    Args:
        response: The raw transport response.
        serializer: Decodes the response body.

    Returns:
        The parsed envelope.
    """
    status = response.status_code
    status_text = response.reason_phrase or ""
    headers = {str(name).lower(): str(value) for name, value in response.headers.items()}

    body: dict[str, Any] | None = None
    try:
        decoded = serializer.deserialize(response.content)
    except SerializationError as e:
        logger.debug("Response body from HTTP %s did not decode: %s", status, e)
    else:
        if isinstance(decoded, dict):
            body = decoded
        else:
            logger.debug(
                "Response body from HTTP %s is %s, expected an object",
                status,
                type(decoded).__name__,
            )

    return ParsedResponse(
        ok=200 <= status < 300 and body is not None,
        status=status,
        status_text=status_text,
        body=body,
        headers=headers,
    )
