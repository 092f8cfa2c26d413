"""Logger facade aggregating one printer bundle per exposed level."""

from __future__ import annotations

from dataclasses import dataclass

from lib_log_leveled.application.state import LoggingConfig
from lib_log_leveled.application.use_cases.emit import EntryEmitter
from lib_log_leveled.application.use_cases.printers import LevelPrinter, create_level_printer
from lib_log_leveled.domain.levels import Level

from ._state import default_config


@dataclass(slots=True, frozen=True)
class Logger:
    """Printer bundles for ``FATAL`` through ``TRACE``.

    ``CHECK`` has no field of its own; reach it with ``logger.printer(Level.CHECK)``.
    ``emitter`` is the writer the six bundles share. It is part of the facade so
    that ``printer`` and ``config`` reach the same gate and lock.

    Examples
    --------
    >>> from io import StringIO
    >>> sink = StringIO()
    >>> log = get_logger(LoggingConfig(writer=sink, colorize=False))
    >>> log.info.ln("hello", 42)
    >>> log.debug.ln("hidden")
    >>> " info  hello 42 " in sink.getvalue(), "hidden" in sink.getvalue()
    (True, False)
    """

    fatal: LevelPrinter
    error: LevelPrinter
    warn: LevelPrinter
    info: LevelPrinter
    debug: LevelPrinter
    trace: LevelPrinter
    emitter: EntryEmitter

    @property
    def config(self) -> LoggingConfig:
        return self.emitter.config

    def printer(self, level: Level | int) -> LevelPrinter:
        """Return the primitives for any ``level``, including ``CHECK``."""

        return create_level_printer(Level(level), self.emitter)


def get_logger(config: LoggingConfig | None = None) -> Logger:
    """Build a :class:`Logger` writing through ``config`` (default: process-wide)."""

    emitter = EntryEmitter(config if config is not None else default_config())
    return Logger(
        fatal=create_level_printer(Level.FATAL, emitter),
        error=create_level_printer(Level.ERROR, emitter),
        warn=create_level_printer(Level.WARN, emitter),
        info=create_level_printer(Level.INFO, emitter),
        debug=create_level_printer(Level.DEBUG, emitter),
        trace=create_level_printer(Level.TRACE, emitter),
        emitter=emitter,
    )


__all__ = ["Logger", "get_logger"]
