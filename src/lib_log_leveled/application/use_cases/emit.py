"""Gate and sink writer: the single entry point every printer funnels into.

Purpose
-------
Decide whether an entry passes the configured threshold and, only then, build
its message, stamp it, format it and write it to the sink.

Contents
--------
* :class:`ProducerKind` - tag telling the emitter how to turn a payload into
  message text.
* :func:`render_message` - the per-kind message builders.
* :class:`EntryEmitter` - lock-holding gate bound to one
  :class:`~lib_log_leveled.application.state.LoggingConfig`.

System Role
-----------
All output of a configuration is serialised by its lock: threshold check,
message rendering, timestamp, formatting and the write happen while it is
held, so concurrent lines never interleave. Payloads are inspected only after
the gate accepted the entry, which keeps filtered dumps and closures free.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any

from lib_log_leveled.application.ports import DumperPort
from lib_log_leveled.application.state import LoggingConfig
from lib_log_leveled.domain.entry import format_entry
from lib_log_leveled.domain.levels import Level
from lib_log_leveled.domain.location import CallSite
from lib_log_leveled.domain.timestamps import format_timestamp

logger = logging.getLogger(__name__)

CHECK_MARKER = "CHECK:"
DEFAULT_DUMP_HEADER = "spew:\n"


class ProducerKind(Enum):
    """How a printer payload becomes message text."""

    LINE = "line"
    FORMAT = "format"
    DUMP = "dump"
    CLOSURE = "closure"
    CHECK = "check"


def _join(values: Sequence[Any]) -> str:
    return " ".join(str(value) for value in values)


def _format(payload: tuple[str, Sequence[Any]]) -> str:
    template, args = payload
    if not args:
        return template
    values: Any = tuple(args)
    if len(values) == 1 and isinstance(values[0], Mapping) and values[0]:
        values = values[0]
    try:
        return template % values
    except (TypeError, ValueError, KeyError) as exc:
        logger.warning("Format template %r does not match arguments %r: %s", template, values, exc)
        return f"{template} {values!r}"


def _dump(values: Sequence[Any], dumper: DumperPort) -> str:
    header = DEFAULT_DUMP_HEADER
    if values and isinstance(values[0], str):
        header = values[0].rstrip() + "\n"
        values = values[1:]
    return header + dumper(*values)


def render_message(kind: ProducerKind, payload: Any, dumper: DumperPort) -> str:
    """Return the message text for ``payload`` interpreted as ``kind``.

    Examples
    --------
    >>> from lib_log_leveled.adapters import RichDumper
    >>> render_message(ProducerKind.LINE, ("a", 1, None), RichDumper())
    'a 1 None'
    >>> render_message(ProducerKind.FORMAT, ("%s=%d", ("x", 3)), RichDumper())
    'x=3'
    >>> render_message(ProducerKind.DUMP, ("head  ", [1]), RichDumper())
    'head\\n[1]\\n'
    >>> render_message(ProducerKind.CHECK, ValueError("boom"), RichDumper())
    'CHECK: boom'
    """

    if kind is ProducerKind.LINE:
        return _join(payload)
    if kind is ProducerKind.FORMAT:
        return _format(payload)
    if kind is ProducerKind.DUMP:
        return _dump(tuple(payload), dumper)
    if kind is ProducerKind.CLOSURE:
        return str(payload())
    if kind is ProducerKind.CHECK:
        return _join((CHECK_MARKER, payload))
    raise ValueError(f"Unsupported producer kind: {kind!r}")


class EntryEmitter:
    """Threshold gate and writer bound to one :class:`LoggingConfig`."""

    def __init__(self, config: LoggingConfig) -> None:
        self._config = config

    @property
    def config(self) -> LoggingConfig:
        return self._config

    def enabled(self, level: Level) -> bool:
        """Return ``True`` when an entry at ``level`` would be written."""

        return level <= self._config.level

    def emit(self, level: Level, kind: ProducerKind, payload: Any, call_site: CallSite) -> bool:
        """Write one entry when ``level`` passes the threshold.

        Returns
        -------
        bool
            ``True`` when the line was handed to the sink, ``False`` when the
            gate rejected it (the payload is then left untouched).
        """

        config = self._config
        with config.lock:
            if level > config.level:
                return False
            message = render_message(kind, payload, config.dumper)
            timestamp = format_timestamp(config.clock.now_ns(), config.timestamp_format)
            line = format_entry(
                timestamp,
                config.app_name.load(),
                level,
                message,
                str(call_site),
                colorize=config.colorize,
            )
            self._write(line + "\n")
            return True

    def _write(self, text: str) -> None:
        sink = self._config.writer
        try:
            sink.write(text)
            flush: Callable[[], Any] | None = getattr(sink, "flush", None)
            if flush is not None:
                flush()
        except (OSError, ValueError) as exc:
            logger.warning("Log sink %r rejected a line; dropping it", sink, exc_info=exc)


__all__ = ["CHECK_MARKER", "DEFAULT_DUMP_HEADER", "EntryEmitter", "ProducerKind", "render_message"]
