"""Dumper port rendering arbitrary values for the dump printer.

Purpose
-------
Describe the collaborator that turns a sequence of Python objects into a
human-readable, usually multi-line block of text.

Examples
--------
>>> class Recorder:
...     def __call__(self, *values):
...         return "|".join(repr(value) for value in values)
>>> isinstance(Recorder(), DumperPort)
True
>>> Recorder()(1, "a")
"1|'a'"
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DumperPort(Protocol):
    """Render ``values`` into text; must not mutate them."""

    def __call__(self, *values: Any) -> str: ...


__all__ = ["DumperPort"]
