"""Hexadecimal codec for the raw and payload views of an identifier."""

from typing import Final

from ksuid_toolkit.kernel.errors import InvalidCharacter, InvalidLength

HEX_DIGITS: Final[str] = "0123456789abcdefABCDEF"


def encode(data: bytes) -> str:
    """Encode bytes as uppercase hex, two characters per byte."""
    return data.hex().upper()


def decode(text: str) -> bytes:
    """
    Decode hex text in either case.

    Raises:
        InvalidLength: If text has an odd number of characters; ``expected``
            is the next even length, the shortest input that could be valid
        InvalidCharacter: On the first non-hex character
    """
    if len(text) % 2 != 0:
        next_even = len(text) - len(text) % 2 + 2
        raise InvalidLength("hex", next_even, len(text))

    for position, char in enumerate(text):
        if char not in HEX_DIGITS:
            raise InvalidCharacter(char, position)

    return bytes.fromhex(text)
