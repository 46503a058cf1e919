"""Hashing utilities for cache key generation."""

import hashlib
import json
from datetime import date, datetime
from typing import Any


def json_default(obj: Any) -> Any:
    """Encode values JSON has no native type for.

    Shared by the wire serializer and the cache key, so a key always
    describes exactly the variables that were sent. Dates and datetimes
    become ISO 8601 strings. Sets become lists in canonical order.

    Args:
        obj: The object to encode.

    Returns:
        A JSON-serializable representation of the object.

    Raises:
        TypeError: If the object cannot be encoded.
    """
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=canonical_json)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def canonical_json(value: Any) -> str:
    """Serialize a value to JSON independent of mapping key order.

    Args:
        value: Any value :func:`json_default` can encode.

    Returns:
        Compact JSON with sorted keys.

    Raises:
        TypeError: If the value cannot be encoded.
    """
    return json.dumps(
        value,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=json_default,
    )


def hash_value(value: Any) -> str:
    """Create a deterministic hash of a value.

    Args:
        value: Any value :func:`json_default` can encode.

    Returns:
        A hexadecimal hash string (first 16 chars of SHA-256).

    Raises:
        TypeError: If the value cannot be encoded.
    """
    if value is None:
        return "none"

    return hashlib.sha256(canonical_json(value).encode()).hexdigest()[:16]


def normalize_query(query: str) -> str:
    """Normalize a GraphQL query string for consistent hashing.

    Collapses every run of whitespace into a single space and trims
    both ends, so equivalent queries produce the same hash.

    Args:
        query: The GraphQL query string.

    Returns:
        The normalized query string.
    """
    return " ".join(query.split())
