"""Rich-powered dumper implementing :class:`DumperPort`.

Purpose
-------
Render arbitrary Python values for the dump printer (``LevelPrinter.s``) the
way Rich pretty-prints them: containers are expanded over several lines,
dataclasses and attrs classes show their type and fields.

Contents
--------
* :class:`RichDumper` - callable adapter configured with Rich pretty options.

System Role
-----------
Only invoked by the emitter after the gate accepted the entry, so large
structures cost nothing when the level is filtered out.
"""

from __future__ import annotations

from typing import Any

from rich.pretty import pretty_repr

from lib_log_leveled.application.ports.dump import DumperPort


class RichDumper(DumperPort):
    """Render values with :func:`rich.pretty.pretty_repr`, one block per value."""

    def __init__(
        self,
        *,
        max_width: int = 100,
        indent_size: int = 4,
        max_length: int | None = None,
        max_string: int | None = None,
        max_depth: int | None = None,
        expand_all: bool = False,
    ) -> None:
        """Store the pretty-printing limits applied to every dump."""
        self._max_width = max_width
        self._indent_size = indent_size
        self._max_length = max_length
        self._max_string = max_string
        self._max_depth = max_depth
        self._expand_all = expand_all

    def __call__(self, *values: Any) -> str:
        """Return the rendering of ``values``, each block ending in a newline.

        Examples
        --------
        >>> RichDumper()({"a": 1}, [1, 2])
        "{'a': 1}\\n[1, 2]\\n"
        >>> RichDumper()()
        ''
        """

        return "".join(f"{self._render(value)}\n" for value in values)

    def _render(self, value: Any) -> str:
        return pretty_repr(
            value,
            max_width=self._max_width,
            indent_size=self._indent_size,
            max_length=self._max_length,
            max_string=self._max_string,
            max_depth=self._max_depth,
            expand_all=self._expand_all,
        )


__all__ = ["RichDumper"]
