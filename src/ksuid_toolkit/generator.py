"""
KsuidGenerator - mints identifiers from a payload source and a clock

Both collaborators are injected, so a generator built with a seeded payload
source and a TestTimeProvider produces the same ids on every run, while the
default generator uses the OS CSPRNG and the system clock.

The generator owns no shared state of its own. Calling it from several threads
is as safe as its payload source; SecurePayloadSource and SeededPayloadSource
are both safe.
"""

import math
import random
from datetime import datetime, timezone

from ksuid_toolkit.kernel.errors import InvalidLength
from ksuid_toolkit.kernel.randomness import (
    PAYLOAD_BYTES,
    PayloadSource,
    SeededPayloadSource,
    default_payload_source,
)
from ksuid_toolkit.kernel.time import TimeProvider, default_time_provider
from ksuid_toolkit.ksuid import EPOCH, FromComponents, Ksuid, build


def wrap_int32(value: int) -> int:
    """
    Reduce an integer to signed 32 bits, two's-complement style

    Timestamps from 2082-05-31T20:07:28Z on (or before 1946-04-25) wrap around instead
    of failing. Ordering guarantees only hold inside that range.
    """
    return ((value + 2**31) % 2**32) - 2**31


def timestamp_for(instant: datetime) -> int:
    """Seconds since EPOCH for an instant, truncated to 32 signed bits (naive = UTC)"""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return wrap_int32(math.floor(instant.timestamp()) - EPOCH)


class KsuidGenerator:
    """
    Generate K-Sortable Unique Identifiers

    Example:
        >>> generator = KsuidGenerator(SeededPayloadSource(123))
        >>> ksuid = generator.new_ksuid()
        >>> len(str(ksuid))
        27
    """

    def __init__(
        self,
        payload_source: PayloadSource | None = None,
        time_provider: TimeProvider | None = None,
    ) -> None:
        """
        Initialize generator

        Args:
            payload_source: Source of 16-byte payloads (OS CSPRNG if None)
            time_provider: Clock used when no instant is given (system clock if None)

        Raises:
            InvalidLength: If the payload source returns the wrong number of bytes
        """
        self.payload_source = payload_source or default_payload_source
        self.time_provider = time_provider or default_time_provider

        sample = self.payload_source.payload()
        if len(sample) != PAYLOAD_BYTES:
            raise InvalidLength("payload-source-output", PAYLOAD_BYTES, len(sample))

    @classmethod
    def from_random(
        cls, rng: random.Random, time_provider: TimeProvider | None = None
    ) -> "KsuidGenerator":
        """Generator drawing payloads from a random.Random (for reproducible output)"""
        return cls(SeededPayloadSource(rng), time_provider)

    def new_ksuid(self, instant: datetime | None = None) -> Ksuid:
        """
        Generate a new identifier

        Args:
            instant: Time for the timestamp component (time provider's now if None)

        Returns:
            A freshly minted Ksuid
        """
        if instant is None:
            instant = self.time_provider.now()
        return build(
            FromComponents(
                timestamp=timestamp_for(instant),
                payload=bytes(self.payload_source.payload()),
            )
        )

    def generate(self) -> str:
        """String form of a new identifier"""
        return str(self.new_ksuid())


# Global default generator
default_generator = KsuidGenerator()


def new_ksuid() -> Ksuid:
    """New identifier from the default generator (CSPRNG payload, system clock)"""
    return default_generator.new_ksuid()


def generate() -> str:
    """String form of a new identifier from the default generator"""
    return default_generator.generate()


def from_instant(instant: datetime) -> Ksuid:
    """New identifier with its timestamp taken from instant and a CSPRNG payload"""
    return default_generator.new_ksuid(instant)
