from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from topicmsg.core.errors import BadFormat, SerializeError

if TYPE_CHECKING:
    from topicmsg.core.models.message import Message


class LineCodec:
    """
    Line oriented wire format of a message:

        <topic>\\n
        <key> <value>\\n     (once per parameter)
        \\n

    All text is UTF-8, nothing is escaped and no length prefix is
    written; delimiting successive messages in a stream is left to
    the transport.
    """
    LF: bytes = b"\n"
    SEP: bytes = b" "
    TERMINATOR: bytes = b"\n"

    @classmethod
    def chunks(cls, topic: str, params: Mapping[str, str]) -> Iterator[bytes]:
        """Yield the encoded message piece by piece, in wire order."""
        yield topic.encode("utf-8")
        yield cls.LF

        for key, value in params.items():
            yield key.encode("utf-8")
            yield cls.SEP
            yield value.encode("utf-8")
            yield cls.LF

        yield cls.TERMINATOR

    @classmethod
    def size(cls, topic: str, params: Mapping[str, str]) -> int:
        """
        Exact number of bytes `chunks` produces:
            len(topic) + 1
          + sum(len(key) + 1 + len(value) + 1)
          + 1
        Lengths are UTF-8 byte lengths, not character counts.
        """
        size = len(topic.encode("utf-8")) + 1
        for key, value in params.items():
            size += len(key.encode("utf-8")) + 1
            size += len(value.encode("utf-8")) + 1
        size += 1
        return size

    @classmethod
    def encode(cls, topic: str | None, params: Mapping[str, str]) -> bytes:
        if topic is None:
            raise BadFormat("Missing heading")
        return b"".join(cls.chunks(topic, params))

    @classmethod
    def encode_into(
        cls,
        topic: str | None,
        params: Mapping[str, str],
        buf: bytearray,
        max_size: int | None = None
    ) -> int:
        """
        Append the encoded message to `buf`.

        The required size is computed first and the buffer is grown
        once by exactly that amount, then filled in place. Returns the
        number of bytes written. On error `buf` is left untouched.
        """
        if topic is None:
            raise SerializeError("Missing Msg topic")

        size = cls.size(topic, params)
        if max_size is not None and size > max_size:
            raise SerializeError(
                f"Encoded message is {size} bytes, limit is {max_size}"
            )

        start = len(buf)
        buf.extend(bytes(size))

        pos = start
        with memoryview(buf) as view:
            for chunk in cls.chunks(topic, params):
                end = pos + len(chunk)
                view[pos:end] = chunk
                pos = end

        return size


def serialize(message: "Message") -> bytes:
    return LineCodec.encode(message.topic, message.params)


def serialize_into(message: "Message", buf: bytearray) -> int:
    return LineCodec.encode_into(message.topic, message.params, buf)


def encoded_size(message: "Message") -> int:
    if message.topic is None:
        raise SerializeError("Missing Msg topic")
    return LineCodec.size(message.topic, message.params)
