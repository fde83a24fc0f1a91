"""
Codecs - text encodings of identifier bytes

base62 produces the canonical printable form; hex backs the raw and payload
display views.
"""

from ksuid_toolkit.codec import base62, hex

__all__ = ["base62", "hex"]
