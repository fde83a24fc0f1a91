"""
Custom exceptions for ksuid-toolkit

Two failure kinds cover every way an identifier can be rejected: a byte string
of the wrong size, or a character outside an encoding's alphabet. Both carry
enough detail on the instance for a caller to build its own message.

Fun fact: the first KSUID implementation was written at Segment in 2017 to
replace UUIDv4 keys that scattered writes all over their B-tree indexes.
"""


class KsuidError(Exception):
    """Base exception for all ksuid-toolkit errors"""

    pass


class InvalidLength(KsuidError):
    """
    Raised when a byte string does not have the size a field requires

    The field name identifies which input was rejected: "payload" for the
    16-byte random component, "identifier" for the 20-byte raw form (also used
    for decoded strings), "payload-source-output" for a misbehaving payload
    source and "hex" for odd-length hexadecimal input.
    """

    def __init__(self, field: str, expected: int, actual: int) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{field} is not expected length of {expected} bytes (got {actual})"
        )


class InvalidCharacter(KsuidError):
    """Raised when a decoder meets a character outside its alphabet"""

    def __init__(self, char: str, position: int | None = None) -> None:
        self.char = char
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"{char!r} is not a valid character{where}")
