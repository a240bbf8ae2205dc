from typing import Any

import regex

from topicmsg.core.errors import BadFormat

# Unicode Alphabetic property: letters plus letter numbers (Nl),
# combining vowel signs and circled letters. str.isalpha() only covers L*.
_LEADING_CHAR = regex.compile(r"\p{Alphabetic}")
_TOPIC_CHAR = regex.compile(r"[\p{Alphabetic}\p{N}_-]")


def is_topic_leading_char(c: str) -> bool:
    return _LEADING_CHAR.fullmatch(c) is not None


def is_topic_char(c: str) -> bool:
    return _TOPIC_CHAR.fullmatch(c) is not None


def validate_topic(topic: Any) -> None:
    """
    Make sure that a topic string is valid.

    A topic starts with a letter, followed by any number of letters,
    digits, underscores or hyphens. Letters and digits are Unicode aware.
    The first offending character fails the whole string.

    Raises:
        BadFormat: with the reason of the rejection.
    """
    if not isinstance(topic, str) or not topic:
        raise BadFormat("Empty or broken string")

    if not is_topic_leading_char(topic[0]):
        raise BadFormat("Invalid leading character")

    if any(not is_topic_char(c) for c in topic[1:]):
        raise BadFormat("Invalid heading")


def is_valid_topic(topic: Any) -> bool:
    try:
        validate_topic(topic)
    except BadFormat:
        return False
    return True
