"""Printer factory: the five print primitives bound to one severity level.

Purpose
-------
Give callers terse, level-specific helpers (``log.info.ln(...)``) while all
the real work stays in :class:`~lib_log_leveled.application.use_cases.emit.EntryEmitter`.

Contents
--------
* :class:`LevelPrinter` - immutable bundle exposing ``ln``, ``f``, ``s``,
  ``c`` and ``chk``.
* :func:`create_level_printer` - factory used by the logger facade.

System Role
-----------
Each primitive captures the caller's :class:`CallSite` at its own boundary and
forwards a tagged payload to the emitter; no message text is built here.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from lib_log_leveled.domain.levels import Level
from lib_log_leveled.domain.location import CallSite

from .emit import EntryEmitter, ProducerKind


class LevelPrinter:
    """Print primitives for a single :class:`Level`.

    Every primitive accepts a keyword-only ``stacklevel``: ``1`` reports the
    line that called the primitive, wrappers add one per extra layer.
    """

    __slots__ = ("_level", "_emitter")

    def __init__(self, level: Level, emitter: EntryEmitter) -> None:
        self._level = Level(level)
        self._emitter = emitter

    @property
    def level(self) -> Level:
        return self._level

    @property
    def enabled(self) -> bool:
        """Return ``True`` when this level currently passes the threshold."""

        return self._emitter.enabled(self._level)

    def _emit(self, kind: ProducerKind, payload: Any, stacklevel: int) -> None:
        call_site = CallSite.capture(stacklevel + 1)
        self._emitter.emit(self._level, kind, payload, call_site)

    def ln(self, *values: Any, stacklevel: int = 1) -> None:
        """Print ``values`` separated by single spaces."""

        self._emit(ProducerKind.LINE, values, stacklevel)

    def f(self, template: str, *args: Any, stacklevel: int = 1) -> None:
        """Print ``template % args``; substitution only happens when printed.

        A single mapping argument fills ``%(name)s`` placeholders. A template
        that does not match its arguments is printed raw instead of raising.
        """

        self._emit(ProducerKind.FORMAT, (template, args), stacklevel)

    def s(self, *values: Any, stacklevel: int = 1) -> None:
        """Pretty-print ``values``.

        A leading ``str`` is used as the header line; otherwise the header is
        ``spew:``.
        """

        self._emit(ProducerKind.DUMP, values, stacklevel)

    def c(self, closure: Callable[[], str], *, stacklevel: int = 1) -> None:
        """Print the result of ``closure``, calling it only when printed."""

        self._emit(ProducerKind.CLOSURE, closure, stacklevel)

    def chk(self, error: BaseException | None, *, stacklevel: int = 1) -> bool:
        """Print ``error`` prefixed with ``CHECK:`` and return whether it was set.

        Meant for early exits::

            if log.error.chk(err):
                return
        """

        if error is None:
            return False
        self._emit(ProducerKind.CHECK, error, stacklevel)
        return True

    def __repr__(self) -> str:
        return f"LevelPrinter({self._level.name})"


def create_level_printer(level: Level, emitter: EntryEmitter) -> LevelPrinter:
    """Return the primitive bundle for ``level`` routed through ``emitter``."""

    return LevelPrinter(level, emitter)


__all__ = ["LevelPrinter", "create_level_printer"]
