"""Sink port describing where formatted log lines are written.

Purpose
-------
Keep the emitter independent of the concrete output stream. Anything with a
``write`` method accepting text qualifies: ``sys.stderr``, an open file, a
``StringIO`` in tests, or the Rich-backed adapter.

System Role
-----------
Exactly one sink is active per :class:`~lib_log_leveled.runtime.LoggingConfig`;
swapping it is a configuration change, never a fan-out.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SinkPort(Protocol):
    """Accept one fully formatted line, newline included."""

    def write(self, text: str, /) -> Any: ...


__all__ = ["SinkPort"]
