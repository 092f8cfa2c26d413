"""Public package surface of the leveled logging printers.

Typical use::

    from lib_log_leveled import get_logger, set_app_name, set_log_level, Level

    log = get_logger()
    set_app_name("billing")
    set_log_level(Level.DEBUG)
    log.info.ln("started", 3, "workers")
    if log.error.chk(err):
        return

Every line reads ``<timestamp> <APP> <level> <message> <file:line>``.
"""

from __future__ import annotations

from .application.state import AppName, LoggingConfig
from .application.use_cases import CHECK_MARKER, EntryEmitter, LevelPrinter, ProducerKind
from .domain import (
    DEFAULT_TIMESTAMP_FORMAT,
    LEVEL_SPECS,
    CallSite,
    Level,
    LevelSpec,
    LogEntry,
    format_entry,
    get_loc,
    level_display_name,
    level_from_string,
    level_name,
    level_names,
)
from .runtime import (
    Logger,
    coerce_level,
    default_config,
    get_app_name,
    get_log_level,
    get_logger,
    get_timestamp_format,
    install_default_config,
    reset_default_config,
    set_app_name,
    set_colorize,
    set_log_level,
    set_timestamp_format,
    set_writer,
    summary_info,
)

__all__ = [
    "AppName",
    "CHECK_MARKER",
    "CallSite",
    "DEFAULT_TIMESTAMP_FORMAT",
    "EntryEmitter",
    "LEVEL_SPECS",
    "Level",
    "LevelPrinter",
    "LevelSpec",
    "LogEntry",
    "Logger",
    "LoggingConfig",
    "ProducerKind",
    "coerce_level",
    "default_config",
    "format_entry",
    "get_app_name",
    "get_loc",
    "get_log_level",
    "get_logger",
    "get_timestamp_format",
    "install_default_config",
    "level_display_name",
    "level_from_string",
    "level_name",
    "level_names",
    "reset_default_config",
    "set_app_name",
    "set_colorize",
    "set_log_level",
    "set_timestamp_format",
    "set_writer",
    "summary_info",
]
