"""Rich-powered sink adapter implementing :class:`SinkPort`.

Purpose
-------
Let Rich decide how the ANSI-coloured level tag reaches the terminal: colours
are kept on capable terminals, downgraded to the available colour system, or
dropped entirely when ``no_color`` is requested or the output is redirected.

Contents
--------
* :class:`RichConsoleSink` - adapter accepted anywhere a writable sink is.

System Role
-----------
Optional alternative to writing straight into ``sys.stderr``; install it with
``set_writer(RichConsoleSink())`` or ``LoggingConfig(writer=...)``.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from lib_log_leveled.application.ports.sink import SinkPort


class RichConsoleSink(SinkPort):
    """Write formatted log lines through a Rich :class:`~rich.console.Console`."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
    ) -> None:
        """Configure the sink with colour overrides or an existing console."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(
                stderr=True,
                force_terminal=force_color or None,
                no_color=no_color,
                soft_wrap=True,
            )

    @property
    def console(self) -> Console:
        return self._console

    def write(self, text: str, /) -> int:
        """Print ``text`` (ANSI sequences included) without Rich markup.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=200)
        >>> sink = RichConsoleSink(console=console)
        >>> _ = sink.write("\\x1b[31mtag\\x1b[0m msg\\n")
        >>> console.export_text()
        'tag msg\\n'
        """

        styled = Text.from_ansi(text.rstrip("\n"))
        self._console.print(styled, highlight=False, soft_wrap=True)
        return len(text)


__all__ = ["RichConsoleSink"]
