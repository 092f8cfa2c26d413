"""Log entry value object and the single-line renderer.

Purpose
-------
Turn the pieces collected by the emitter into the text written to the sink.

Contents
--------
* :class:`LogEntry` immutable dataclass.
* :func:`format_entry` functional shortcut used by the emitter.

System Role
-----------
Pure domain logic; the emitter supplies an already formatted timestamp and a
resolved location so rendering stays deterministic and easy to test.
"""

from __future__ import annotations

from dataclasses import dataclass

from .levels import LEVEL_SPECS, Level, level_name


@dataclass(slots=True, frozen=True)
class LogEntry:
    """Everything printed for one accepted log call.

    Attributes
    ----------
    timestamp:
        Timestamp already rendered with the configured pattern.
    app:
        Application name; rendered upper-cased.
    level:
        Severity of the entry.
    message:
        Message text produced by the printer primitive.
    location:
        ``path:line`` of the originating call.
    """

    timestamp: str
    app: str
    level: Level
    message: str
    location: str

    def level_tag(self, *, colorize: bool = True) -> str:
        """Return the padded level label, coloured when ``colorize`` is set."""

        spec = LEVEL_SPECS.get(self.level)
        if spec is None:
            return level_name(self.level)
        return spec.colorizer(spec.name) if colorize else spec.name

    def render(self, *, colorize: bool = True) -> str:
        """Return the five space-separated fields without a trailing newline.

        Examples
        --------
        >>> entry = LogEntry("2025-01-01T00:00:00", "demo", Level.INFO, "ready\\n", "app.py:3")
        >>> entry.render(colorize=False)
        '2025-01-01T00:00:00 DEMO info  ready app.py:3'
        """

        line = " ".join(
            (
                self.timestamp,
                self.app.upper(),
                self.level_tag(colorize=colorize),
                self.message.rstrip("\r\n"),
                self.location,
            )
        )
        return line.rstrip("\r\n")


def format_entry(
    timestamp: str,
    app: str,
    level: Level,
    message: str,
    location: str,
    *,
    colorize: bool = True,
) -> str:
    """Render one log line; see :meth:`LogEntry.render`."""

    return LogEntry(timestamp, app, level, message, location).render(colorize=colorize)


__all__ = ["LogEntry", "format_entry"]
