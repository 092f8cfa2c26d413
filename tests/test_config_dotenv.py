from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_leveled import __main__ as cli_module
from lib_log_leveled import config as log_config
from lib_log_leveled.application.state import LoggingConfig
from lib_log_leveled.domain.levels import Level


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> Iterator[None]:
    """Reset shared dotenv state around each test."""

    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


def test_env_file_in_parent_directory_feeds_configuration(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    project = tmp_path / "project"
    workdir = project / "src"
    workdir.mkdir(parents=True)
    env_file = project / ".env"
    env_file.write_text("LOG_LEVEL=debug\nLOG_APP=from-file\n")
    monkeypatch.chdir(workdir)
    for name in ("LOG_LEVEL", "LOG_APP"):
        monkeypatch.delenv(name, raising=False)

    try:
        assert log_config.enable_dotenv() == env_file.resolve()
        assert log_config.loaded_dotenv() == env_file.resolve()
        config = log_config.configure_from_env(LoggingConfig())
        assert config.level is Level.DEBUG
        assert config.app_name.load() == "from-file"
    finally:
        os.environ.pop("LOG_LEVEL", None)
        os.environ.pop("LOG_APP", None)


def test_process_environment_wins_over_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("LOG_LEVEL=trace\n")
    monkeypatch.setenv("LOG_LEVEL", "warn")

    assert log_config.enable_dotenv(start=tmp_path) == (tmp_path / ".env").resolve()
    assert log_config.configure_from_env(LoggingConfig()).level is Level.WARN


def test_enable_dotenv_without_file_returns_none(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(log_config, "_find_upwards", lambda start: "")

    assert log_config.enable_dotenv(start=tmp_path) is None
    assert log_config.loaded_dotenv() is None


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (True, None, True),
        (False, "1", False),
        (None, "yes", True),
        (None, "off", False),
        (None, None, False),
        (None, "", False),
    ],
)
def test_should_use_dotenv_precedence(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert log_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_should_use_dotenv_rejects_garbage() -> None:
    with pytest.raises(ValueError, match="Invalid boolean"):
        log_config.should_use_dotenv(explicit=None, env_value="maybe")


def test_configure_from_env_applies_every_variable() -> None:
    config = LoggingConfig()
    log_config.configure_from_env(
        config,
        {
            "LOG_LEVEL": "Debug",
            "LOG_APP": "svc",
            "LOG_TIMESTAMP_FORMAT": "%H:%M",
            "LOG_NO_COLOR": "1",
        },
    )
    assert config.level is Level.DEBUG
    assert config.app_name.load() == "svc"
    assert config.timestamp_format == "%H:%M"
    assert config.colorize is False


def test_configure_from_env_leaves_unset_values_alone() -> None:
    config = LoggingConfig(level=Level.WARN, app="keep")
    log_config.configure_from_env(config, {})
    assert config.level is Level.WARN
    assert config.app_name.load() == "keep"
    assert config.colorize is True


def test_no_color_convention_disables_colour() -> None:
    config = log_config.configure_from_env(LoggingConfig(), {"NO_COLOR": "1"})
    assert config.colorize is False


def test_configure_from_env_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        log_config.configure_from_env(LoggingConfig(), {"LOG_LEVEL": "loud"})


@pytest.mark.parametrize(
    "args, env, loads",
    [
        (["--use-dotenv", "levels"], {}, True),
        (["levels"], {"LOG_USE_DOTENV": "1"}, True),
        (["--no-use-dotenv", "levels"], {"LOG_USE_DOTENV": "1"}, False),
        (["levels"], {}, False),
    ],
)
def test_cli_decides_whether_to_load_env_file(
    monkeypatch: pytest.MonkeyPatch, args: list[str], env: dict[str, str], loads: bool
) -> None:
    starts: list[object] = []
    monkeypatch.setattr(log_config, "enable_dotenv", lambda start=None: starts.append(start))
    monkeypatch.delenv(log_config.DOTENV_ENV_VAR, raising=False)

    result = CliRunner().invoke(cli_module.cli, args, env=env)

    assert result.exit_code == 0, result.output
    assert starts == ([None] if loads else [])
