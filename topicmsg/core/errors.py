class MessageError(Exception):
    """Base class for every error raised by topicmsg."""


class KeyNotFound(MessageError, KeyError):
    """
    A lookup required the parameter to exist and it did not.
    """
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Parameter '{self.key}' not found"


class BadFormat(MessageError, ValueError):
    """
    An input failed a syntactic contract: invalid topic grammar,
    unparsable numeric parameter, forbidden delimiter in a parameter,
    or a message without topic handed to the encoder.
    """
    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"Bad format; {self.detail}"


class SerializeError(MessageError):
    """
    An encoder precondition failed before any byte was committed
    to the output buffer.
    """
    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"Unable to serialize; {self.detail}"
