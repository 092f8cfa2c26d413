"""Concrete adapters for the clock, dumper and sink ports."""

from __future__ import annotations

from .clock import SystemClock
from .console import RichConsoleSink
from .dump import RichDumper

__all__ = ["RichConsoleSink", "RichDumper", "SystemClock"]
