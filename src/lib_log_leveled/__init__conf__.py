"""Static package metadata surfaced by the CLI banner.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Callable

name = "lib_log_leveled"
title = "Leveled, colourised, location-aware logging printers"
version = "0.1.0"
author = "lib_log_leveled contributors"
shell_command = "lib_log_leveled"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner line by line.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_leveled:\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in lines:
        emit(line)


__all__ = ["print_info", "name", "title", "version", "author", "shell_command"]
