from __future__ import annotations

import inspect
from dataclasses import dataclass
from io import StringIO

import pytest

from lib_log_leveled.application.state import LoggingConfig
from lib_log_leveled.application.use_cases.emit import EntryEmitter
from lib_log_leveled.application.use_cases.printers import LevelPrinter, create_level_printer
from lib_log_leveled.domain.levels import Level


@dataclass
class Order:
    order_id: str
    total: float


@pytest.fixture
def info(config: LoggingConfig) -> LevelPrinter:
    return create_level_printer(Level.INFO, EntryEmitter(config))


@pytest.fixture
def debug(config: LoggingConfig) -> LevelPrinter:
    return create_level_printer(Level.DEBUG, EntryEmitter(config))


def test_ln_joins_values_and_reports_call_site(info: LevelPrinter, sink: StringIO) -> None:
    line = inspect.currentframe().f_lineno + 1
    info.ln("answer", 42, True)
    assert sink.getvalue().endswith(f" info  answer 42 True {__file__}:{line}\n")


def test_f_formats_lazily(info: LevelPrinter, debug: LevelPrinter, sink: StringIO) -> None:
    class Expensive:
        renders = 0

        def __str__(self) -> str:
            Expensive.renders += 1
            return "expensive"

    debug.f("value=%s", Expensive())
    assert Expensive.renders == 0
    assert sink.getvalue() == ""

    info.f("value=%s", Expensive())
    assert Expensive.renders == 1
    assert "value=expensive" in sink.getvalue()


def test_c_closure_runs_only_when_printed(info: LevelPrinter, debug: LevelPrinter, sink: StringIO) -> None:
    counter = {"calls": 0}

    def closure() -> str:
        counter["calls"] += 1
        return "computed"

    debug.c(closure)
    assert counter["calls"] == 0
    info.c(closure)
    assert counter["calls"] == 1
    assert " computed " in sink.getvalue()


def test_s_prints_header_then_dumped_values(info: LevelPrinter, sink: StringIO) -> None:
    info.s("header text", Order("A-17", 12.5), {"sku": "B-2"})
    output = sink.getvalue()
    assert " info  header text\n" in output
    assert "order_id='A-17'" in output
    assert "'sku': 'B-2'" in output


def test_s_without_header_uses_spew_marker(info: LevelPrinter, sink: StringIO) -> None:
    info.s([1, 2, 3])
    assert " info  spew:\n[1, 2, 3]" in sink.getvalue()


def test_chk_returns_true_and_prints_once_for_errors(info: LevelPrinter, sink: StringIO) -> None:
    assert info.chk(ValueError("dummy information check")) is True
    lines = sink.getvalue().splitlines()
    assert len(lines) == 1
    assert "CHECK: dummy information check" in lines[0]


def test_chk_is_silent_for_none(info: LevelPrinter, sink: StringIO) -> None:
    assert info.chk(None) is False
    assert sink.getvalue() == ""


def test_chk_still_signals_when_level_is_filtered(debug: LevelPrinter, sink: StringIO) -> None:
    assert debug.chk(RuntimeError("hidden")) is True
    assert sink.getvalue() == ""


def test_chk_as_early_return_guard(info: LevelPrinter) -> None:
    def load() -> str:
        error = OSError("disk gone")
        if info.chk(error):
            return "aborted"
        return "loaded"

    assert load() == "aborted"


def test_stacklevel_reports_wrapper_caller(info: LevelPrinter, sink: StringIO) -> None:
    def audit(message: str) -> None:
        info.ln("audit:", message, stacklevel=2)

    line = inspect.currentframe().f_lineno + 1
    audit("login")
    assert sink.getvalue().endswith(f"audit: login {__file__}:{line}\n")


def test_enabled_follows_threshold(config: LoggingConfig, info: LevelPrinter, debug: LevelPrinter) -> None:
    assert info.enabled and not debug.enabled
    config.level = Level.TRACE
    assert debug.enabled


def test_printer_is_bound_to_its_level(info: LevelPrinter) -> None:
    assert info.level is Level.INFO
    assert repr(info) == "LevelPrinter(INFO)"
