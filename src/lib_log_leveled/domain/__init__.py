"""Domain entities and value objects used by the leveled logger."""

from __future__ import annotations

from .entry import LogEntry, format_entry
from .levels import (
    LEVEL_SPECS,
    Level,
    LevelSpec,
    level_display_name,
    level_from_string,
    level_name,
    level_names,
)
from .location import CallSite, get_loc
from .timestamps import DEFAULT_TIMESTAMP_FORMAT, format_timestamp

__all__ = [
    "CallSite",
    "DEFAULT_TIMESTAMP_FORMAT",
    "LEVEL_SPECS",
    "Level",
    "LevelSpec",
    "LogEntry",
    "format_entry",
    "format_timestamp",
    "get_loc",
    "level_display_name",
    "level_from_string",
    "level_name",
    "level_names",
]
