"""Call-site tokens identifying where a log primitive was invoked.

Purpose
-------
Record the ``path:line`` of the code that called a printer primitive so every
line points back at its origin.

Contents
--------
* :class:`CallSite` value object with :meth:`CallSite.capture`.
* :func:`get_loc` helper that resolves a frame by absolute skip count.

System Role
-----------
Primitives capture the token at their own boundary and hand it to the emitter,
so the reported location does not depend on how many internal frames sit
between the caller and the sink writer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from types import FrameType

UNKNOWN_PATH = "?"


@dataclass(slots=True, frozen=True)
class CallSite:
    """Source file and line number of a logging call."""

    path: str
    line: int

    def __str__(self) -> str:
        return f"{self.path}:{self.line}"

    @classmethod
    def capture(cls, stacklevel: int = 1) -> "CallSite":
        """Return the call site ``stacklevel`` frames above the caller.

        ``stacklevel=1`` names the code that called the function invoking
        ``capture``; wrappers around a primitive raise it by one per layer, the
        same convention as :mod:`logging`.

        Examples
        --------
        >>> def primitive():
        ...     return CallSite.capture()
        >>> primitive().line > 0
        True
        """

        return cls.from_frame(_frame_at(stacklevel + 1))

    @classmethod
    def from_frame(cls, frame: FrameType | None) -> "CallSite":
        if frame is None:
            return cls(UNKNOWN_PATH, 0)
        return cls(frame.f_code.co_filename, frame.f_lineno)


def _frame_at(depth: int) -> FrameType | None:
    """Return the frame ``depth`` levels above the caller of this helper."""

    frame: FrameType | None = sys._getframe(1)
    for _ in range(depth):
        if frame is None:
            break
        frame = frame.f_back
    return frame


def get_loc(skip: int) -> str:
    """Return ``path:line`` for the frame ``skip`` levels above :func:`get_loc`.

    ``skip=0`` reports the line inside :func:`get_loc` itself and ``skip=1``
    the line that called it. A ``skip`` deeper than the stack yields ``"?:0"``.

    Examples
    --------
    >>> get_loc(10_000)
    '?:0'
    """

    if skip == 0:
        return str(CallSite.from_frame(sys._getframe(0)))
    return str(CallSite.from_frame(_frame_at(skip)))


__all__ = ["CallSite", "UNKNOWN_PATH", "get_loc"]
