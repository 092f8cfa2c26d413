"""Port for the wall clock used to timestamp log lines."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current time as nanoseconds since the epoch."""

    def now_ns(self) -> int: ...


__all__ = ["ClockPort"]
