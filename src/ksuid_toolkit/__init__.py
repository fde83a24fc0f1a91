"""
ksuid-toolkit - K-Sortable Unique Identifiers

Twenty-byte identifiers made of a 32-bit timestamp and 128 random bits, with a
27-character base62 form that sorts in creation order.

    >>> from ksuid_toolkit import Ksuid, generate
    >>> Ksuid.from_string(generate()).timestamp > 0
    True
"""

from ksuid_toolkit.ksuid import (
    EPOCH,
    STRING_LENGTH,
    TOTAL_BYTES,
    FromBytes,
    FromComponents,
    FromString,
    Ksuid,
    build,
    parse,
)
from ksuid_toolkit.generator import KsuidGenerator, from_instant, generate, new_ksuid
from ksuid_toolkit.kernel.errors import InvalidCharacter, InvalidLength, KsuidError
from ksuid_toolkit.service import KsuidService

__version__ = "0.1.0"
__all__ = [
    "EPOCH",
    "STRING_LENGTH",
    "TOTAL_BYTES",
    "Ksuid",
    "FromComponents",
    "FromBytes",
    "FromString",
    "build",
    "parse",
    "KsuidGenerator",
    "generate",
    "new_ksuid",
    "from_instant",
    "KsuidService",
    "KsuidError",
    "InvalidLength",
    "InvalidCharacter",
    "__version__",
]
