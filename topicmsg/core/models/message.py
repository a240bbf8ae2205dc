from collections.abc import Iterator, Mapping
from types import MappingProxyType

from topicmsg.core.errors import KeyNotFound
from topicmsg.core.helpers.text import I64, IntKind, check_key, check_value, parse_int, to_text
from topicmsg.core.validators import validate_topic
from topicmsg.core.wire import LineCodec, encoded_size

ParamType = str | int | float


class Message:
    """
    A message as it travels between clients, servers or peers.

    Each message consists of a mandatory topic and zero or more
    parameters, each of which is a key/value pair of strings. A message
    without topic can be built and filled, but cannot be serialized.

    The topic is validated when it is assigned, so a message never holds
    an illegal topic. Parameters keep their insertion order, which makes
    the encoding deterministic; overwriting a key keeps its position.

    Message does not handle transmission; it only holds the data and
    produces the wire encoding (see LineCodec).
    """
    __slots__ = ("_topic", "_params")

    def __init__(self, topic: str | None = None) -> None:
        self._topic: str | None = None
        self._params: dict[str, str] = {}

        if topic is not None:
            validate_topic(topic)
            self._topic = topic

    @classmethod
    def with_topic(cls, topic: str) -> "Message":
        """Create a message with a topic, raising BadFormat if it is invalid."""
        return cls(topic)

    @property
    def topic(self) -> str | None:
        return self._topic

    @property
    def params(self) -> Mapping[str, str]:
        """Read-only view over the parameters."""
        return MappingProxyType(self._params)

    def get_params(self) -> Mapping[str, str]:
        return self.params

    def set_topic(self, topic: str) -> None:
        """
        Set the topic, overwriting the current one.
        On validation failure the current topic is kept.
        """
        validate_topic(topic)
        self._topic = topic

    def get_topic(self) -> str | None:
        return self._topic

    def add_param(self, key: ParamType, value: ParamType) -> None:
        """
        Add a parameter, replacing the value of an existing key.

        Keys and values may be str, int or float; numbers are stored in
        their canonical text form. Keys may contain neither spaces nor
        line feeds, values may not contain line feeds. A rejected pair
        leaves the message unchanged.
        """
        k = to_text(key)
        v = to_text(value)
        check_key(k)
        check_value(k, v)
        self._params[k] = v

    add_str = add_param

    def get_param(self, key: str) -> str | None:
        return self._params.get(key)

    get_str = get_param

    def get_int(self, key: str, kind: IntKind = I64) -> int:
        """
        Parse a parameter as an integer of the given kind.

        Raises:
            KeyNotFound: the parameter does not exist.
            BadFormat: the value is not an integer literal, or does not
                fit into `kind`.
        """
        raw = self._params.get(key)
        if raw is None:
            raise KeyNotFound(key)
        return parse_int(key, raw, kind)

    def clear(self) -> None:
        """Reset to an empty message, ready for reuse."""
        self._topic = None
        self._params.clear()

    def copy(self) -> "Message":
        other = Message()
        other._topic = self._topic
        other._params = dict(self._params)
        return other

    def encoded_size(self) -> int:
        """
        Number of bytes `serialize` produces.

        Sizing is the first step of `encoder_write`, so a missing topic
        raises the same SerializeError rather than BadFormat.
        """
        return encoded_size(self)

    def serialize(self) -> bytes:
        """Return the wire encoding, raising BadFormat if the topic is unset."""
        return LineCodec.encode(self._topic, self._params)

    def encoder_write(self, buf: bytearray) -> int:
        """
        Append the wire encoding to a caller-owned buffer and return
        the number of bytes written. Raises SerializeError if the topic
        is unset, without touching the buffer.
        """
        return LineCodec.encode_into(self._topic, self._params, buf)

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, key: object) -> bool:
        return key in self._params

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return self._topic == other._topic and self._params == other._params

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        plist = ",".join(f"{k}={v}" for k, v in self._params.items())
        topic = self._topic if self._topic is not None else "<None>"
        return f"{topic}:{{{plist}}}"

    def __repr__(self) -> str:
        return f"Message(topic={self._topic!r}, params={self._params!r})"
