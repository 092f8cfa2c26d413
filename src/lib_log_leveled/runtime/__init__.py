"""Runtime façade: logger construction and the process-wide settings.

Purpose
-------
Expose the entry points host applications use (`get_logger`, `set_log_level`,
`set_writer`, `set_timestamp_format`, `set_app_name`, ...) instead of wiring
the application layer by hand.

Contents
--------
* ``get_logger`` / :class:`Logger` - the facade with one printer bundle per
  exposed level.
* Setters and getters operating on the process-wide default
  :class:`LoggingConfig`.
* ``coerce_level`` - accepts enum members, ordinals and names.
* ``summary_info`` - metadata banner shared with the CLI.

System Role
-----------
Outer shell of the package. Libraries that need isolation build their own
:class:`LoggingConfig` and pass it to :func:`get_logger`; everything else
shares the process default manipulated by the helpers below.
"""

from __future__ import annotations

from typing import TextIO

from lib_log_leveled.application.ports import SinkPort
from lib_log_leveled.application.state import AppName, LoggingConfig
from lib_log_leveled.domain.levels import Level

from ._logger import Logger, get_logger
from ._state import default_config, install_default_config, reset_default_config


def coerce_level(level: Level | int | str) -> Level:
    """Normalise ``level`` into a :class:`Level`.

    Strings go through :meth:`Level.from_name` (case-insensitive) and integers
    must be a valid ordinal; anything else raises :class:`ValueError`.

    Examples
    --------
    >>> coerce_level("warn") is Level.WARN
    True
    >>> coerce_level(7) is Level.TRACE
    True
    >>> coerce_level(99)
    Traceback (most recent call last):
    ...
    ValueError: 99 is not a valid Level
    """

    if isinstance(level, Level):
        return level
    if isinstance(level, str):
        return Level.from_name(level)
    return Level(level)


def set_log_level(level: Level | int | str) -> None:
    """Set the process-wide threshold."""

    default_config().level = coerce_level(level)


def get_log_level() -> Level:
    return default_config().level


def set_writer(writer: SinkPort | TextIO | None) -> None:
    """Route process-wide output to ``writer``; ``None`` restores ``sys.stderr``."""

    default_config().writer = writer


def set_timestamp_format(pattern: str) -> None:
    """Set the timestamp pattern (``strftime`` plus ``%N`` and ``%:z``)."""

    default_config().timestamp_format = pattern


def get_timestamp_format() -> str:
    return default_config().timestamp_format


def set_app_name(name: str) -> None:
    """Set the application name printed (upper-cased) in every line."""

    default_config().app_name.store(name)


def get_app_name() -> str:
    return default_config().app_name.load()


def set_colorize(enabled: bool) -> None:
    default_config().colorize = enabled


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Outputs
    -------
    str
        Multi-line banner ending with a newline.
    """

    from .. import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = [
    "AppName",
    "Logger",
    "LoggingConfig",
    "coerce_level",
    "default_config",
    "get_app_name",
    "get_log_level",
    "get_logger",
    "get_timestamp_format",
    "install_default_config",
    "reset_default_config",
    "set_app_name",
    "set_colorize",
    "set_log_level",
    "set_timestamp_format",
    "set_writer",
    "summary_info",
]
