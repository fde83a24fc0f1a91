"""
Payload sources - where the 16 random bytes of an identifier come from

A payload source is any object with a ``payload()`` method returning exactly
PAYLOAD_BYTES bytes. Production code uses the operating system CSPRNG through
the secrets module; tests plug in a seeded source to get reproducible ids.
"""

import random
import secrets
import threading
from collections.abc import Callable
from typing import Protocol

PAYLOAD_BYTES = 16


class PayloadSource(Protocol):
    """Protocol for payload generation strategies"""

    def payload(self) -> bytes:
        """Return PAYLOAD_BYTES fresh random bytes"""
        ...


class SecurePayloadSource:
    """Payload source backed by the OS CSPRNG (safe for concurrent use)"""

    def payload(self) -> bytes:
        return secrets.token_bytes(PAYLOAD_BYTES)


class SeededPayloadSource:
    """
    Payload source driven by a random.Random instance

    Intended for tests and reproducible fixtures, never for real identifiers.
    A random.Random is shared mutable state, so reads are serialized.
    """

    def __init__(self, rng: random.Random | int | None = None) -> None:
        """
        Args:
            rng: A random.Random to draw from, or a seed to create one with
        """
        if isinstance(rng, random.Random):
            self._rng = rng
        else:
            self._rng = random.Random(rng)
        self._lock = threading.Lock()

    def payload(self) -> bytes:
        with self._lock:
            return self._rng.randbytes(PAYLOAD_BYTES)


class CallablePayloadSource:
    """Adapts a zero-argument callable returning bytes to the PayloadSource protocol"""

    def __init__(self, supplier: Callable[[], bytes]) -> None:
        self._supplier = supplier

    def payload(self) -> bytes:
        return self._supplier()


# Global default payload source
default_payload_source: PayloadSource = SecurePayloadSource()
