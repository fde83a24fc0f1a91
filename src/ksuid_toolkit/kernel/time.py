"""
Time provider abstraction for deterministic testing

The generator reads "now" through this protocol, so tests can pin or advance
the clock without patching the datetime module.

Fun fact: The concept of "now" is surprisingly complex in distributed systems.
This abstraction sidesteps relativity theory by making time injectable!
"""

from datetime import datetime, timedelta, timezone
from typing import Protocol


class TimeProvider(Protocol):
    """Protocol for time providers - allows deterministic testing"""

    def now(self) -> datetime:
        """Return current UTC datetime"""
        ...


class RealTimeProvider:
    """Production time provider using system clock"""

    def now(self) -> datetime:
        """Return current UTC time from system clock"""
        return datetime.now(timezone.utc)


class TestTimeProvider:
    """
    Controllable time provider for deterministic tests

    Allows tests to freeze time, advance time, and optionally tick forward
    by a fixed step on every read, which is how a batch of identifiers gets
    strictly increasing timestamps.
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        initial_time: datetime | None = None,
        tick_seconds: float = 0,
    ) -> None:
        """
        Initialize with optional fixed time

        Args:
            initial_time: Starting time (defaults to Unix epoch)
            tick_seconds: Seconds to advance after every now() call
        """
        self._current_time = initial_time or datetime(1970, 1, 1, tzinfo=timezone.utc)
        self._tick = timedelta(seconds=tick_seconds)

    def now(self) -> datetime:
        """Return current test time, then apply the tick"""
        current = self._current_time
        self._current_time += self._tick
        return current

    def set_time(self, dt: datetime) -> None:
        """Set current time to specific value"""
        self._current_time = dt

    def advance_seconds(self, seconds: int) -> None:
        """Advance time by specified seconds"""
        self._current_time += timedelta(seconds=seconds)

    def advance_days(self, days: int) -> None:
        """Advance time by specified days"""
        self._current_time += timedelta(days=days)


# Global default time provider
default_time_provider: TimeProvider = RealTimeProvider()
