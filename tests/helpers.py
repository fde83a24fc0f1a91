"""
Shared test data

The reference identifier is the one from the KSUID README: timestamp
107608047, payload B5A1CD34B5F99D1154FB6853345C9735, minted on
2017-10-10 04:00:47 UTC.
"""

from datetime import datetime, timezone

PAYLOAD_RAW = "B5A1CD34B5F99D1154FB6853345C9735"
PAYLOAD_BYTES = bytes.fromhex(PAYLOAD_RAW)
KSUID_RAW = "0669F7EF" + PAYLOAD_RAW
KSUID_BYTES = bytes.fromhex(KSUID_RAW)
KSUID_STRING = "0ujtsYcgvSTl8PAuAdqWYSMnLOv"
TIMESTAMP = 107608047
MINTED_AT = datetime(2017, 10, 10, 4, 0, 47, tzinfo=timezone.utc)
