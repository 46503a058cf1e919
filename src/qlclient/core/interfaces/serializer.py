"""Serializer interface."""

from typing import Any, Protocol


class ISerializer(Protocol):
    """Contract for the wire codec.

    Serializers encode request bodies to bytes and decode response
    bodies back to Python objects. ``content_type`` is sent as the
    default content-type header of every request.
    """

    content_type: str

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes.

        Args:
            value: The Python object to serialize.

        Returns:
            The serialized value as bytes.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        ...

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes to value.

        Args:
            data: The bytes to deserialize.

        Returns:
            The deserialized Python object.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        ...
