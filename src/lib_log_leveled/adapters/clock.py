"""System clock adapter implementing :class:`ClockPort`."""

from __future__ import annotations

import time

from lib_log_leveled.application.ports.time import ClockPort


class SystemClock(ClockPort):
    """Wall clock with nanosecond resolution."""

    def now_ns(self) -> int:
        return time.time_ns()


__all__ = ["SystemClock"]
