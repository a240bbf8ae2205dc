from typing import Protocol

from topicmsg.core.models.message import Message


class Serializer(Protocol):
    """
    Defines the interface for encoding messages into bytes handed over
    to a transport or a storage layer.

    Implementations must be:
    - deterministic
    - pure (no side effects on the message)
    - all-or-nothing: a failed encoding writes nothing
    """

    def serialize(self, message: Message) -> bytes:
        """Encode a message into a new bytes object."""

    def serialize_into(self, message: Message, buf: bytearray) -> int:
        """Append the encoded message to `buf`, return the number of bytes written."""
