"""Monotonic counter shared by every generation call of a process.

The counter is seeded lazily on the first ``next()`` call from a random
64-bit value multiplied by ``COUNTER_SEED_MULTIPLIER``. Seeding happens
exactly once, even when many threads race for the first value.

Guarantees:
  - next() returns the current value and advances it by one.
  - N calls, from any number of threads, return exactly
    {seed, seed + 1, ..., seed + N - 1} in some order.
  - The value is a signed 64-bit integer and wraps from INT64_MAX to INT64_MIN.
"""

from __future__ import annotations

import threading
from typing import Optional

from cuid2.constants import COUNTER_SEED_MULTIPLIER, INT64_MAX, INT64_MIN
from cuid2.platform import Platform
from cuid2.utils.logger import get_logger

logger = get_logger(__name__)

_INT64_RANGE = 1 << 64


def wrap_int64(value: int) -> int:
    """Reduce ``value`` into the signed 64-bit range (two's complement wrap)."""
    return (value - INT64_MIN) % _INT64_RANGE + INT64_MIN


def seed_value(random_int64: int) -> int:
    return wrap_int64(random_int64 * COUNTER_SEED_MULTIPLIER)


class Counter:
    """Thread-safe, lazily seeded int64 counter.

    Usage:
        counter = Counter(platform)
        value = counter.next()
    """

    def __init__(self, platform: Platform) -> None:
        self._platform = platform
        self._value: Optional[int] = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._value is not None

    def next(self) -> int:
        """Return the next counter value (fetch-then-increment)."""
        with self._lock:
            if self._value is None:
                self._value = seed_value(self._platform.random_int64())
                logger.debug("counter_seeded")
            current = self._value
            self._value = INT64_MIN if current == INT64_MAX else current + 1
            return current
