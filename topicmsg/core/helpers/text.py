import re
from dataclasses import dataclass

from topicmsg.core.errors import BadFormat

KEY_DELIMITERS = (" ", "\n")
VALUE_DELIMITERS = ("\n",)

# ASCII only: str.isdigit() and int() both accept other Unicode digits.
_INT_LITERAL = re.compile(r"[+-]?[0-9]+", re.ASCII)


@dataclass(frozen=True, slots=True)
class IntKind:
    """
    Integer type a parameter value is parsed into.

    Python integers are unbounded, so the kind carries the
    range the parsed value has to fit into.
    """
    name: str
    min: int
    max: int

    @property
    def signed(self) -> bool:
        return self.min < 0

    @classmethod
    def unsigned(cls, name: str, bits: int) -> "IntKind":
        return cls(name=name, min=0, max=(1 << bits) - 1)

    @classmethod
    def signed_of(cls, name: str, bits: int) -> "IntKind":
        return cls(name=name, min=-(1 << (bits - 1)), max=(1 << (bits - 1)) - 1)

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


U8 = IntKind.unsigned("u8", 8)
U16 = IntKind.unsigned("u16", 16)
U32 = IntKind.unsigned("u32", 32)
U64 = IntKind.unsigned("u64", 64)
USIZE = IntKind.unsigned("usize", 64)
I8 = IntKind.signed_of("i8", 8)
I16 = IntKind.signed_of("i16", 16)
I32 = IntKind.signed_of("i32", 32)
I64 = IntKind.signed_of("i64", 64)
ISIZE = IntKind.signed_of("isize", 64)


def to_text(value: str | int | float) -> str:
    """
    Render a parameter key or value into its canonical text form.

    - str: unchanged
    - int: decimal, with a leading '-' for negative numbers
    - float: shortest round-trip representation (repr), so 3.0 gives
      "3.0" and 1e20 gives "1e+20" rather than "3" and
      "100000000000000000000"

    bool is refused even though it is an int subclass: "True" is not
    a canonical integer rendering.
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a supported parameter type")
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return repr(float(value))
    raise TypeError(
        f"unsupported parameter type {type(value).__name__!r}, "
        "expected str, int or float"
    )


def check_key(key: str) -> None:
    if not key:
        raise BadFormat("Empty parameter key")
    for d in KEY_DELIMITERS:
        if d in key:
            raise BadFormat(f"Parameter key {key!r} contains a delimiter")


def check_value(key: str, value: str) -> None:
    for d in VALUE_DELIMITERS:
        if d in value:
            raise BadFormat(f"Value of parameter {key!r} contains a line feed")


def parse_int(key: str, raw: str, kind: IntKind) -> int:
    """
    Parse a parameter value as an integer of the given kind.

    Accepts an optional sign followed by ASCII digits; unsigned kinds
    only accept '+'. Whitespace, underscores and out-of-range values
    are rejected.
    """
    if _INT_LITERAL.fullmatch(raw) is None or (not kind.signed and raw.startswith("-")):
        raise BadFormat(f"Unable to parse numeric value from parameter '{key}'")

    # int() refuses overly long literals, anything past 20 digits is out of range anyway
    significant = raw.lstrip("+-").lstrip("0")
    if len(significant) > 20:
        raise BadFormat(
            f"Numeric value of parameter '{key}' out of range for {kind.name}"
        )

    value = int(raw)
    if not kind.contains(value):
        raise BadFormat(
            f"Numeric value of parameter '{key}' out of range for {kind.name}"
        )
    return value
