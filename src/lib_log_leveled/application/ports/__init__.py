"""Protocols describing the collaborators of the logging pipeline."""

from __future__ import annotations

from .dump import DumperPort
from .sink import SinkPort
from .time import ClockPort

__all__ = ["ClockPort", "DumperPort", "SinkPort"]
