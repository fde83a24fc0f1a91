"""
Ksuid - the K-Sortable Unique Identifier value type

A Ksuid is 20 bytes: a 4-byte big-endian timestamp (seconds since EPOCH)
followed by a 16-byte random payload. Its printable form is the raw bytes in
base62, left-padded to 27 characters.

Ordering is by timestamp, then payload. Because the timestamp leads the raw
bytes in big-endian form and the base62 alphabet is ASCII-ordered, sorting ids
by value, by raw bytes or by string gives the same order (for the non-negative
timestamps any real clock produces).

Construction goes through one of three build requests - components, raw bytes
or a string - each validated on its own:

    >>> build(FromString(text="0ujtsYcgvSTl8PAuAdqWYSMnLOv")).timestamp
    107608047

Fun fact: "K-sortable" comes from the idea of a k-sorted sequence, where every
element is at most k positions away from where it would be in a total sort.
Ids minted in the same second by different machines land in any order, but
never more than a second apart.
"""

import struct
from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from functools import total_ordering
from typing import Final
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field

from ksuid_toolkit.codec import base62
from ksuid_toolkit.codec import hex as hex_codec
from ksuid_toolkit.kernel.errors import InvalidLength
from ksuid_toolkit.kernel.randomness import PAYLOAD_BYTES

# KSUID epoch: 2014-05-13T16:53:20Z
EPOCH: Final[int] = 1_400_000_000

TIMESTAMP_BYTES: Final[int] = 4
TOTAL_BYTES: Final[int] = TIMESTAMP_BYTES + PAYLOAD_BYTES
STRING_LENGTH: Final[int] = 27

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

TIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S %z %Z"

_TIMESTAMP = struct.Struct(">i")


def _resolve_zone(tz: tzinfo | str | None) -> tzinfo | None:
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


@total_ordering
@dataclass(frozen=True, repr=False, eq=True)
class Ksuid:
    """
    K-Sortable Unique Identifier

    Immutable. Equal ids have equal timestamp and payload (and so equal raw
    bytes); hashing follows equality, so ids work as dict keys and in sets.

    Attributes:
        timestamp: Signed 32-bit seconds since EPOCH
        payload: 16 random bytes
        raw: Derived 20-byte binary form
    """

    timestamp: int
    payload: bytes
    raw: bytes = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.timestamp, bool) or not isinstance(self.timestamp, int):
            raise TypeError(
                f"timestamp must be an int, got {type(self.timestamp).__name__}"
            )
        if not INT32_MIN <= self.timestamp <= INT32_MAX:
            raise ValueError(f"timestamp {self.timestamp} does not fit in 32 signed bits")
        payload = bytes(memoryview(self.payload))
        if len(payload) != PAYLOAD_BYTES:
            raise InvalidLength("payload", PAYLOAD_BYTES, len(payload))
        object.__setattr__(self, "payload", payload)
        object.__setattr__(self, "raw", _TIMESTAMP.pack(self.timestamp) + payload)

    # Alternate constructors

    @classmethod
    def from_components(cls, timestamp: int, payload: bytes) -> "Ksuid":
        """Build from a timestamp and a 16-byte payload"""
        return build(FromComponents(timestamp=timestamp, payload=payload))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Ksuid":
        """Build from the 20-byte raw form"""
        return build(FromBytes(data=data))

    @classmethod
    def from_string(cls, text: str) -> "Ksuid":
        """Build from the base62 printable form"""
        return build(FromString(text=text))

    # Views

    def as_bytes(self) -> bytes:
        return self.raw

    def as_string(self) -> str:
        """27-character base62 form, e.g. 0ujtsYcgvSTl8PAuAdqWYSMnLOv"""
        return base62.encode(self.raw, STRING_LENGTH)

    def as_raw(self) -> str:
        """Raw bytes as 40 uppercase hex characters"""
        return hex_codec.encode(self.raw)

    @property
    def payload_hex(self) -> str:
        """Payload as 32 uppercase hex characters"""
        return hex_codec.encode(self.payload)

    @property
    def instant(self) -> datetime:
        """Time component as an aware UTC datetime"""
        return datetime.fromtimestamp(EPOCH + self.timestamp, tz=timezone.utc)

    def time(self, tz: tzinfo | str | None = None) -> str:
        """
        Human-readable time component, e.g. "2017-10-09 21:00:47 -0700 PDT"

        Args:
            tz: tzinfo or IANA zone name; None renders in the system local zone
        """
        zone = _resolve_zone(tz)
        return self.instant.astimezone(zone).strftime(TIME_FORMAT)

    def to_inspect_string(self, tz: tzinfo | str | None = None) -> str:
        """Multi-line breakdown of every representation and component"""
        return (
            "REPRESENTATION:\n"
            "\n"
            f"  String: {self.as_string()}\n"
            f"     Raw: {self.as_raw()}\n"
            "\n"
            "COMPONENTS:\n"
            "\n"
            f"       Time: {self.time(tz)}\n"
            f"  Timestamp: {self.timestamp}\n"
            f"    Payload: {self.payload_hex}\n"
        )

    def to_log_string(self) -> str:
        return repr(self)

    # Dunder protocol

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(string={self.as_string()!r}, "
            f"timestamp={self.timestamp}, payload={self.payload_hex!r})"
        )

    def __bytes__(self) -> bytes:
        return self.raw

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ksuid):
            return NotImplemented
        return (self.timestamp, self.payload) < (other.timestamp, other.payload)


# =============================================================================
# Build requests
# =============================================================================


class FromComponents(BaseModel):
    """Build request: explicit timestamp and payload"""

    model_config = ConfigDict(frozen=True, strict=True)

    timestamp: int = Field(
        ...,
        ge=INT32_MIN,
        le=INT32_MAX,
        description="Seconds since the KSUID epoch (signed 32-bit)",
    )
    payload: bytes = Field(..., description="16 random bytes")


class FromBytes(BaseModel):
    """Build request: the 20-byte raw form"""

    model_config = ConfigDict(frozen=True, strict=True)

    data: bytes = Field(..., description="4-byte big-endian timestamp + 16-byte payload")


class FromString(BaseModel):
    """Build request: the base62 printable form"""

    model_config = ConfigDict(frozen=True, strict=True)

    text: str = Field(..., description="Base62 string, normally 27 characters")


BuildRequest = FromComponents | FromBytes | FromString


def _from_raw(data: bytes) -> Ksuid:
    if len(data) != TOTAL_BYTES:
        raise InvalidLength("identifier", TOTAL_BYTES, len(data))
    (timestamp,) = _TIMESTAMP.unpack_from(data)
    return Ksuid(timestamp, data[TIMESTAMP_BYTES:])


def build(request: BuildRequest) -> Ksuid:
    """
    Build a Ksuid from exactly one kind of input

    Args:
        request: FromComponents, FromBytes or FromString

    Returns:
        The identifier

    Raises:
        InvalidLength: payload is not 16 bytes, or raw/decoded bytes are not 20
        InvalidCharacter: string contains a character outside [0-9A-Za-z]

    Requests are strict models: a str is never accepted where bytes are
    expected (or the reverse), and a bool is not a timestamp.
    """
    if isinstance(request, FromComponents):
        return Ksuid(request.timestamp, request.payload)
    if isinstance(request, FromBytes):
        return _from_raw(request.data)
    if isinstance(request, FromString):
        decoded = base62.decode(request.text)
        # Decoding is minimal-width, so leading zero bytes are lost. A 27-char
        # input is re-widened to 20 bytes before the length check; any other
        # length is checked on its decoded length as-is.
        if len(request.text) == STRING_LENGTH and len(decoded) < TOTAL_BYTES:
            decoded = decoded.rjust(TOTAL_BYTES, b"\x00")
        return _from_raw(decoded)
    raise TypeError(f"Unsupported build request: {type(request).__name__}")


def parse(text: str) -> Ksuid:
    """Parse the printable form of an identifier"""
    return build(FromString(text=text))
