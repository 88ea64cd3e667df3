"""Current time source for datetuple.

The "now" constructors read the wall clock through a clock callable that
returns a ClockReading. system_clock is the default; tests pass their own.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Callable

# (year, month, day, hour, minute, second)
ClockReading = tuple[int, int, int, int, int, int]
Clock = Callable[[], ClockReading]


def system_clock() -> ClockReading:
    """Return the current local wall-clock time, truncated to seconds."""
    now = _datetime.datetime.now()
    return (now.year, now.month, now.day, now.hour, now.minute, now.second)


def read_clock(clock: Clock | None = None) -> ClockReading:
    """Read ``clock``, falling back to the system clock."""
    return (clock or system_clock)()


__all__ = [
    "ClockReading",
    "Clock",
    "system_clock",
    "read_clock",
]
