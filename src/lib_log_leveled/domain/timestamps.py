"""Timestamp rendering with nanosecond precision.

``strftime`` patterns are extended with two directives:

* ``%N`` - nanoseconds within the second, zero padded to nine digits;
* ``%:z`` - UTC offset as ``+HH:MM``, or ``Z`` for UTC.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%N%:z"

_NS_PER_SECOND = 1_000_000_000
_EXTENSIONS = re.compile(r"%(%|N|:z)")


def _colon_offset(moment: datetime) -> str:
    offset = moment.utcoffset() or timedelta(0)
    if not offset:
        return "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def format_timestamp(epoch_ns: int, pattern: str, tz: tzinfo | None = None) -> str:
    """Render ``epoch_ns`` (nanoseconds since the epoch) with ``pattern``.

    ``tz`` defaults to the local timezone.

    Examples
    --------
    >>> format_timestamp(1_700_000_000_123_456_789, DEFAULT_TIMESTAMP_FORMAT, timezone.utc)
    '2023-11-14T22:13:20.123456789Z'
    """

    seconds, nanos = divmod(epoch_ns, _NS_PER_SECOND)
    moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    moment = moment.astimezone(tz) if tz is not None else moment.astimezone()

    def _expand(match: re.Match[str]) -> str:
        directive = match.group(1)
        if directive == "N":
            return f"{nanos:09d}"
        if directive == ":z":
            return _colon_offset(moment)
        return "%%"

    return moment.strftime(_EXTENSIONS.sub(_expand, pattern))


__all__ = ["DEFAULT_TIMESTAMP_FORMAT", "format_timestamp"]
