"""Wall-clock timestamps in 100-nanosecond ticks since the Unix epoch."""

from __future__ import annotations

import time

from cuid2.constants import NANOSECONDS_PER_TICK


def timestamp_ticks() -> int:
    """Return the current time as 100 ns ticks since 1970-01-01T00:00:00Z.

    Follows the system clock, so values are only coarsely ordered: a backward
    clock adjustment produces smaller timestamps.
    """
    return time.time_ns() // NANOSECONDS_PER_TICK
