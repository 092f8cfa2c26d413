"""Console entry point: metadata banner, level list and a live demo.

Purpose
-------
Expose ``python -m lib_log_leveled`` and the ``lib_log_leveled`` console
script so installations can be smoke-tested and the line format previewed.

Contents
--------
* :func:`cli` - Click group with ``info``, ``levels``, ``demo`` and ``stress``
  commands.
* :func:`main` - test-friendly wrapper returning an exit code.

System Role
-----------
Presentation layer only: it reads configuration through
:mod:`lib_log_leveled.config` and prints through the regular logger facade.
"""

from __future__ import annotations

import os
import re
import threading
import time
from io import StringIO
from typing import Sequence

import click

from . import __init__conf__
from . import config as log_config
from .application.state import LoggingConfig
from .domain.levels import Level, level_names
from .runtime import get_logger, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _parse_level(ctx: click.Context, param: click.Parameter, value: str | None) -> Level | None:
    if value is None:
        return None
    try:
        return Level.from_name(value)
    except ValueError as exc:
        raise click.BadParameter(f"{exc}; choose from: {level_names()}", ctx=ctx, param=param) from exc


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before reading LOG_* variables (default: ${log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, version: bool, use_dotenv: bool | None) -> None:
    """Leveled logging printers: inspect metadata or preview the line format."""

    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)

    if log_config.should_use_dotenv(explicit=use_dotenv, env_value=os.environ.get(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        ctx.invoke(cli_info)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("levels", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_levels() -> None:
    """List the severity levels from most to least severe."""

    click.echo(level_names())


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--level", "level", callback=_parse_level, help="Threshold; overrides LOG_LEVEL (default: trace).")
@click.option("--app", default=None, help="Application name; overrides LOG_APP (default: demo).")
@click.option("--no-color", is_flag=True, help="Print level tags without ANSI colour.")
def cli_demo(level: Level | None, app: str | None, no_color: bool) -> None:
    """Print one sample line per level to stderr."""

    settings = LoggingConfig(level=Level.TRACE, app="demo")
    try:
        log_config.configure_from_env(settings)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    if level is not None:
        settings.level = level
    if app is not None:
        settings.app_name.store(app)
    if no_color:
        settings.colorize = False

    log = get_logger(settings)
    for printer in (log.trace, log.debug, log.info, log.warn, log.error, log.fatal):
        printer.ln("demo log level", printer.level.display_name)
    log.printer(Level.CHECK).ln("demo log level", Level.CHECK.display_name)
    log.error.chk(RuntimeError("demo error check"))
    log.info.s("demo dump", {"levels": level_names().split()})


@cli.command("stress", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--threads", default=8, show_default=True, type=click.IntRange(min=1), help="Concurrent writer threads.")
@click.option("--lines", default=1000, show_default=True, type=click.IntRange(min=1), help="Lines written per thread.")
def cli_stress(threads: int, lines: int) -> None:
    """Hammer one logger from several threads and verify every line arrived intact."""

    sink = StringIO()
    log = get_logger(LoggingConfig(writer=sink, app="stress", colorize=False))
    pattern = re.compile(r" STRESS info  worker=(\d+) seq=(\d+) .+:\d+$")

    def worker(index: int) -> None:
        for seq in range(lines):
            log.info.f("worker=%d seq=%d", index, seq)

    started = time.perf_counter()
    pool = [threading.Thread(target=worker, args=(index,), name=f"stress-{index}") for index in range(threads)]
    for thread in pool:
        thread.start()
    for thread in pool:
        thread.join()
    elapsed = time.perf_counter() - started

    written = sink.getvalue().splitlines()
    seen = {match.groups() for match in map(pattern.search, written) if match is not None}
    malformed = len(written) - len(seen)
    click.echo(f"{len(written)} lines from {threads} threads in {elapsed:.3f}s, {malformed} malformed")
    if len(seen) != threads * lines:
        raise click.ClickException(f"expected {threads * lines} distinct lines, got {len(seen)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group and return its exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0.1...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
