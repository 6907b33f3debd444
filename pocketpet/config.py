"""Display geometry, timing constants and the virtual day clock."""

from __future__ import annotations

import time

SCREEN_WIDTH = 128
SCREEN_HEIGHT = 64

SIM_TICK_MS = 1000
ANIM_TICK_MS = 80
AUTOSAVE_MS = 60_000

MS_PER_VIRTUAL_HOUR = 60_000
# A virtual day lasts 24 minutes: one virtual hour per real minute.
VDAY_MS = 24 * MS_PER_VIRTUAL_HOUR

NIGHT_STARTS_AT = 20
NIGHT_ENDS_AT = 6


class Clock:
    """Milliseconds elapsed since the clock was created."""

    def __init__(self) -> None:
        self._origin_ns = time.monotonic_ns()

    def millis(self) -> int:
        return (time.monotonic_ns() - self._origin_ns) // 1_000_000


class ManualClock(Clock):
    """A clock that only moves when told to."""

    def __init__(self, start_ms: int = 0) -> None:
        if start_ms < 0:
            raise ValueError("start time cannot be negative")
        self._now = start_ms

    def millis(self) -> int:
        return self._now

    def advance(self, ms: int) -> int:
        """Move the clock forward by ``ms`` and return the new time."""
        if ms < 0:
            raise ValueError("a clock cannot go backwards")
        self._now += ms
        return self._now


def hour_of_day(now_ms: int) -> int:
    """Virtual hour (0..23) at the given time."""
    return (now_ms % VDAY_MS) // MS_PER_VIRTUAL_HOUR


def is_night(now_ms: int) -> bool:
    """True during virtual hours 20..23 and 0..6."""
    hour = hour_of_day(now_ms)
    return hour >= NIGHT_STARTS_AT or hour <= NIGHT_ENDS_AT