"""Real time implementation using the system clocks."""

import time
from datetime import UTC, datetime

from framework_kit.integrations.time.abc import Time


class RealTime(Time):
    """Production implementation using datetime and time.monotonic()."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def monotonic(self) -> float:
        return time.monotonic()
