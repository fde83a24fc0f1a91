"""
Pytest configuration and shared fixtures

Clocks are frozen at the reference identifier's creation time and payloads
come from a seeded source, so every generated id in the suite is reproducible.
"""

import pytest

from helpers import MINTED_AT, PAYLOAD_BYTES, TIMESTAMP

from ksuid_toolkit.generator import KsuidGenerator
from ksuid_toolkit.kernel.randomness import SeededPayloadSource
from ksuid_toolkit.kernel.time import TestTimeProvider
from ksuid_toolkit.ksuid import Ksuid


@pytest.fixture
def test_time() -> TestTimeProvider:
    """Controllable clock frozen at the reference identifier's creation time"""
    return TestTimeProvider(MINTED_AT)


@pytest.fixture
def ticking_time() -> TestTimeProvider:
    """Clock that moves forward one second on every read"""
    return TestTimeProvider(MINTED_AT, tick_seconds=1)


@pytest.fixture
def seeded_payloads() -> SeededPayloadSource:
    """Reproducible payload source - same seed, same payloads"""
    return SeededPayloadSource(123)


@pytest.fixture
def generator(seeded_payloads: SeededPayloadSource, test_time: TestTimeProvider) -> KsuidGenerator:
    """Fully deterministic generator"""
    return KsuidGenerator(seeded_payloads, test_time)


@pytest.fixture
def reference_ksuid() -> Ksuid:
    return Ksuid(TIMESTAMP, PAYLOAD_BYTES)
