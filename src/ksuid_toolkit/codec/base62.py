"""
Base62 codec - byte strings to and from alphanumeric text

Bytes are read as one unsigned big-endian integer and written out in base 62
using the alphabet 0-9, A-Z, a-z. Those three ranges are consecutive in ASCII
order, so for equal-length outputs string comparison agrees with numeric
comparison of the underlying bytes. That property is what makes the printable
form of an identifier sortable.

Fun fact: base 62 is the largest base you can get from the ASCII letters and
digits alone - no padding characters and nothing a URL needs to escape.
"""

from typing import Final

from ksuid_toolkit.kernel.errors import InvalidCharacter

ALPHABET: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE: Final[int] = len(ALPHABET)

_INDEX: Final[dict[str, int]] = {char: index for index, char in enumerate(ALPHABET)}


def index_of(char: str) -> int:
    """
    Position of a character in the alphabet

    Raises:
        InvalidCharacter: If char is not one of [0-9A-Za-z]
    """
    try:
        return _INDEX[char]
    except KeyError:
        raise InvalidCharacter(char) from None


def encode(data: bytes, pad_to_length: int = 0) -> str:
    """
    Encode bytes as a base62 string

    Leading zero bytes add no magnitude, so they vanish unless pad_to_length
    asks for the width back. Padding only ever adds '0' characters on the left;
    a pad_to_length shorter than the natural encoding is ignored, never
    truncated.

    Args:
        data: Bytes to encode, read as an unsigned big-endian integer
        pad_to_length: Minimum length of the result

    Returns:
        Base62 string, most significant digit first

    Example:
        >>> encode(bytes.fromhex("0669F7EFB5A1CD34B5F99D1154FB6853345C9735"), 27)
        '0ujtsYcgvSTl8PAuAdqWYSMnLOv'
    """
    value = int.from_bytes(data, byteorder="big", signed=False)

    digits: list[str] = []
    while value > 0:
        value, remainder = divmod(value, BASE)
        digits.append(ALPHABET[remainder])
    digits.reverse()

    return "".join(digits).rjust(pad_to_length, ALPHABET[0])


def decode(text: str) -> bytes:
    """
    Decode a base62 string into the minimal big-endian byte string

    The result has no leading zero bytes, so it can be shorter than whatever
    was originally encoded. Callers that need a fixed width check it themselves.

    Raises:
        InvalidCharacter: On the first character outside the alphabet
    """
    value = 0
    for position, char in enumerate(text):
        index = _INDEX.get(char)
        if index is None:
            raise InvalidCharacter(char, position)
        value = value * BASE + index

    return value.to_bytes((value.bit_length() + 7) // 8, byteorder="big")
