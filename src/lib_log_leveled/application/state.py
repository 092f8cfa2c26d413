"""Mutable logging configuration shared by every printer built from it.

Purpose
-------
Hold the threshold, sink, timestamp pattern and application name behind
locks so any thread can reconfigure logging while others are emitting.

Contents
--------
* :class:`AppName` - independently synchronised string cell.
* :class:`LoggingConfig` - the configuration object injected into emitters.

System Role
-----------
One instance is created per independent logger family. The process-wide
default lives in :mod:`lib_log_leveled.runtime._state`; tests build their own
instances so they never leak settings into each other.
"""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from lib_log_leveled.adapters.clock import SystemClock
from lib_log_leveled.adapters.dump import RichDumper
from lib_log_leveled.domain.levels import Level
from lib_log_leveled.domain.timestamps import DEFAULT_TIMESTAMP_FORMAT

from .ports import ClockPort, DumperPort, SinkPort


class AppName:
    """Thread-safe mutable string holding the application name."""

    def __init__(self, value: str = "") -> None:
        self._lock = threading.Lock()
        self._value = value

    def load(self) -> str:
        with self._lock:
            return self._value

    def store(self, value: str) -> None:
        with self._lock:
            self._value = value

    def __str__(self) -> str:
        return self.load()

    def __repr__(self) -> str:
        return f"AppName({self.load()!r})"


class LoggingConfig:
    """Threshold, sink, timestamp pattern and collaborators of a logger family.

    Parameters
    ----------
    level:
        Threshold; entries with a higher (less severe) level are dropped.
    writer:
        Sink receiving formatted lines. ``None`` selects ``sys.stderr`` at the
        moment of each write so redirections made later are honoured.
    timestamp_format:
        ``strftime`` pattern extended with ``%N`` and ``%:z``.
    app:
        Initial application name.
    colorize:
        When ``False`` the level tag is written without ANSI colour.
    clock, dumper:
        Collaborators; default to :class:`SystemClock` and :class:`RichDumper`.

    Examples
    --------
    >>> config = LoggingConfig(level=Level.DEBUG, app="demo")
    >>> config.level is Level.DEBUG, config.app_name.load()
    (True, 'demo')
    """

    def __init__(
        self,
        *,
        level: Level = Level.INFO,
        writer: SinkPort | TextIO | None = None,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        app: str = "",
        colorize: bool = True,
        clock: ClockPort | None = None,
        dumper: DumperPort | None = None,
    ) -> None:
        self.lock = threading.RLock()
        self.app_name = AppName(app)
        self._level = Level(level)
        self._writer = writer
        self._timestamp_format = timestamp_format
        self._colorize = colorize
        self.clock = clock if clock is not None else SystemClock()
        self.dumper = dumper if dumper is not None else RichDumper()

    @property
    def level(self) -> Level:
        with self.lock:
            return self._level

    @level.setter
    def level(self, value: Level) -> None:
        level = Level(value)
        with self.lock:
            self._level = level

    @property
    def writer(self) -> SinkPort | TextIO:
        """Return the active sink, resolving the ``sys.stderr`` default."""

        with self.lock:
            return self._writer if self._writer is not None else sys.stderr

    @writer.setter
    def writer(self, value: SinkPort | TextIO | None) -> None:
        with self.lock:
            self._writer = value

    @property
    def timestamp_format(self) -> str:
        with self.lock:
            return self._timestamp_format

    @timestamp_format.setter
    def timestamp_format(self, value: str) -> None:
        with self.lock:
            self._timestamp_format = value

    @property
    def colorize(self) -> bool:
        with self.lock:
            return self._colorize

    @colorize.setter
    def colorize(self, value: bool) -> None:
        with self.lock:
            self._colorize = bool(value)

    def __repr__(self) -> str:
        return (
            f"LoggingConfig(level={self.level.name}, app={self.app_name.load()!r}, "
            f"timestamp_format={self.timestamp_format!r}, colorize={self.colorize})"
        )


__all__ = ["AppName", "LoggingConfig"]
