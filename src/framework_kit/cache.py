"""Instance-owned caches for catalog and registry documents."""

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class TimedCache(Generic[T]):
    """Holds a single value for a bounded time window.

    A ``ttl`` of ``None`` keeps the value until ``invalidate()`` is called.
    Freshness is measured with the injected monotonic ``clock`` so tests can
    drive it with a fake time source.
    """

    def __init__(self, clock: Callable[[], float], ttl: float | None = None) -> None:
        self._clock = clock
        self._ttl = ttl
        self._value: T | None = None
        self._stored_at = 0.0

    @property
    def is_fresh(self) -> bool:
        if self._value is None:
            return False
        if self._ttl is None:
            return True
        return (self._clock() - self._stored_at) < self._ttl

    def get(self) -> T | None:
        """Return the cached value, or None if absent or expired."""
        if not self.is_fresh:
            return None
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        self._stored_at = self._clock()

    def invalidate(self) -> None:
        self._value = None
        self._stored_at = 0.0
