"""Use cases turning printer calls into written log lines."""

from __future__ import annotations

from .emit import CHECK_MARKER, EntryEmitter, ProducerKind, render_message
from .printers import LevelPrinter, create_level_printer

__all__ = [
    "CHECK_MARKER",
    "EntryEmitter",
    "LevelPrinter",
    "ProducerKind",
    "create_level_printer",
    "render_message",
]
