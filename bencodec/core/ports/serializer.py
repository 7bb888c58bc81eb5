from typing import Protocol, Any


class Serializer(Protocol):
    """
    Defines the interface for turning Python objects into bytes and back.

    Implementations must be:
    - deterministic
    - pure (no side effects)
    - safe against malformed input
    """

    def serialize(self, message: Any) -> bytes:
        """Encode a Python object into bytes."""

    def deserialize(self, data: bytes) -> Any:
        """Decode bytes, typically received from an untrusted peer, into a Python object."""
