"""Fake Time implementation for testing.

FakeTime is an in-memory clock that tests move forward with advance(),
enabling fast tests of timestamps and cache expiry.
"""

from datetime import UTC, datetime, timedelta

from framework_kit.integrations.time.abc import Time


class FakeTime(Time):
    """In-memory fake clock that only moves when advance() is called.

    All state is provided via constructor; advance() exists for tests only.
    """

    def __init__(self, now: datetime | None = None) -> None:
        """Create FakeTime.

        Args:
            now: Starting wall-clock time (defaults to 2025-01-01T00:00:00Z)
        """
        self._now = now or datetime(2025, 1, 1, tzinfo=UTC)
        self._monotonic = 0.0

    def now(self) -> datetime:
        return self._now

    def monotonic(self) -> float:
        return self._monotonic

    def advance(self, seconds: float) -> None:
        """Move both clocks forward by seconds."""
        self._now = self._now + timedelta(seconds=seconds)
        self._monotonic += seconds
