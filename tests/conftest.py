from __future__ import annotations

from io import StringIO

import pytest

from lib_log_leveled.application.state import LoggingConfig
from lib_log_leveled.domain.levels import Level
from lib_log_leveled.runtime import install_default_config
from tests._support import FixedClock


@pytest.fixture
def sink() -> StringIO:
    return StringIO()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def config(sink: StringIO, clock: FixedClock) -> LoggingConfig:
    return LoggingConfig(level=Level.INFO, writer=sink, colorize=False, clock=clock)


@pytest.fixture
def fresh_default_config(sink: StringIO):
    """Install an isolated process-wide configuration for the test."""

    replacement = LoggingConfig(writer=sink)
    previous = install_default_config(replacement)
    try:
        yield replacement
    finally:
        install_default_config(previous)
