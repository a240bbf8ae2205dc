import logging

from topicmsg.core.errors import SerializeError
from topicmsg.core.models.message import Message
from topicmsg.core.ports.serializer import Serializer
from topicmsg.core.wire import LineCodec


class WireSerializer(Serializer):
    """
    Line-format implementation of the Serializer interface.

    - deterministic: parameters are written in insertion order
    - both entry points produce byte-identical output
    - an optional upper bound on the size of one encoded message
    """
    def __init__(self, max_message_size: int | None = None) -> None:
        self._max_message_size = max_message_size
        self._logger = logging.getLogger("infra.wire_serializer")

    @property
    def max_message_size(self) -> int | None:
        return self._max_message_size

    def serialize(self, message: Message) -> bytes:
        # Missing topic is reported as BadFormat, before the size check.
        data = LineCodec.encode(message.topic, message.params)
        if self._max_message_size is not None and len(data) > self._max_message_size:
            raise SerializeError(
                f"Encoded message is {len(data)} bytes, limit is {self._max_message_size}"
            )
        self._logger.debug(f"Encoded {message.topic} ({len(data)} bytes)")
        return data

    def serialize_into(self, message: Message, buf: bytearray) -> int:
        size = LineCodec.encode_into(
            message.topic,
            message.params,
            buf,
            max_size=self._max_message_size
        )
        self._logger.debug(f"Wrote {message.topic} ({size} bytes)")
        return size
