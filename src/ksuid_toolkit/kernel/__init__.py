"""
Kernel - errors, time and randomness capabilities shared by every layer

Logging and metrics live here too but are imported explicitly by the outer
layers that use them; the core modules only need what is re-exported below.
"""

from ksuid_toolkit.kernel.errors import InvalidCharacter, InvalidLength, KsuidError
from ksuid_toolkit.kernel.randomness import (
    PAYLOAD_BYTES,
    CallablePayloadSource,
    PayloadSource,
    SecurePayloadSource,
    SeededPayloadSource,
)
from ksuid_toolkit.kernel.time import RealTimeProvider, TestTimeProvider, TimeProvider

__all__ = [
    # Errors
    "KsuidError",
    "InvalidLength",
    "InvalidCharacter",
    # Randomness
    "PAYLOAD_BYTES",
    "PayloadSource",
    "SecurePayloadSource",
    "SeededPayloadSource",
    "CallablePayloadSource",
    # Time
    "TimeProvider",
    "RealTimeProvider",
    "TestTimeProvider",
]
