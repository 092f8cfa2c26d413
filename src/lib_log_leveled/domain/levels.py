"""Severity scale and per-level presentation metadata.

Purpose
-------
Define the ordered severity scale used by the gate together with the fixed
width labels and 24-bit colours printed in every log line.

Contents
--------
* :class:`Level` integer enum with conversion helpers.
* :class:`LevelSpec` value object pairing a label with its colouriser.
* :data:`LEVEL_SPECS` read-only lookup table built once at import time.
* Lookup helpers :func:`level_name`, :func:`level_display_name`,
  :func:`level_from_string` and :func:`level_names`.

System Role
-----------
Leaf of the dependency graph: the emitter compares :class:`Level` values
numerically and the entry formatter asks :data:`LEVEL_SPECS` for the label and
colour of each line.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

from rich.color import Color
from rich.style import Style


class Level(IntEnum):
    """Ordered severity scale; a higher value is less severe."""

    OFF = 0
    FATAL = 1
    ERROR = 2
    CHECK = 3
    WARN = 4
    INFO = 5
    DEBUG = 6
    TRACE = 7

    @property
    def display_name(self) -> str:
        """Return the lowercase label without padding."""

        return level_display_name(self)

    @property
    def spec(self) -> "LevelSpec":
        return LEVEL_SPECS[self]

    @classmethod
    def from_name(cls, name: str) -> "Level":
        """Return the level for ``name`` ignoring case and surrounding blanks.

        Examples
        --------
        >>> Level.from_name(" Warn ") is Level.WARN
        True
        >>> Level.from_name("verbose")
        Traceback (most recent call last):
        ...
        ValueError: Unknown log level: 'verbose'
        """

        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc


@dataclass(slots=True, frozen=True)
class LevelSpec:
    """Fixed-width label and colour for one :class:`Level`.

    Attributes
    ----------
    name:
        Label padded with spaces so every level renders with the same width.
    color:
        RGB triple rendered as a 24-bit foreground colour.
    """

    name: str
    color: tuple[int, int, int]

    @property
    def style(self) -> Style:
        return Style(color=Color.from_rgb(*self.color))

    def colorizer(self, text: str) -> str:
        """Wrap ``text`` in the ANSI sequences of this level's colour.

        Examples
        --------
        >>> LEVEL_SPECS[Level.FATAL].colorizer("fatal")
        '\\x1b[38;2;255;0;0mfatal\\x1b[0m'
        """

        return self.style.render(text)


_LEVEL_NAMES: Mapping[Level, str] = {
    Level.OFF: "off  ",
    Level.FATAL: "fatal",
    Level.ERROR: "error",
    Level.CHECK: "check",
    Level.WARN: "warn ",
    Level.INFO: "info ",
    Level.DEBUG: "debug",
    Level.TRACE: "trace",
}
# Uniform-width labels printed between the application name and the message.

_LEVEL_COLORS: Mapping[Level, tuple[int, int, int]] = {
    Level.OFF: (0, 0, 0),
    Level.FATAL: (255, 0, 0),
    Level.ERROR: (255, 128, 0),
    Level.CHECK: (255, 255, 0),
    Level.WARN: (128, 255, 0),
    Level.INFO: (0, 255, 0),
    Level.DEBUG: (0, 128, 255),
    Level.TRACE: (128, 0, 255),
}

_LEVELS_BY_NAME: Mapping[str, Level] = {name.strip(): level for level, name in _LEVEL_NAMES.items()}

LEVEL_SPECS: Mapping[Level, LevelSpec] = MappingProxyType(
    {level: LevelSpec(name=_LEVEL_NAMES[level], color=_LEVEL_COLORS[level]) for level in Level}
)
"""Immutable per-level label and colour table."""


def level_name(level: Level | int) -> str:
    """Return the padded label for ``level``; unknown values yield ``""``.

    Examples
    --------
    >>> level_name(Level.WARN)
    'warn '
    >>> level_name(42)
    ''
    """

    return _LEVEL_NAMES.get(level, "")


def level_display_name(level: Level | int) -> str:
    """Return the label for ``level`` with the padding removed."""

    return level_name(level).strip()


def level_from_string(name: str, default: Level) -> Level:
    """Return the level called ``name`` (case-sensitive) or ``default``.

    Examples
    --------
    >>> level_from_string("debug", Level.INFO) is Level.DEBUG
    True
    >>> level_from_string("DEBUG", Level.INFO) is Level.INFO
    True
    """

    return _LEVELS_BY_NAME.get(name, default)


def level_names() -> str:
    """Return every trimmed label in severity order separated by spaces."""

    return " ".join(level_display_name(level) for level in Level)


__all__ = [
    "LEVEL_SPECS",
    "Level",
    "LevelSpec",
    "level_display_name",
    "level_from_string",
    "level_name",
    "level_names",
]
