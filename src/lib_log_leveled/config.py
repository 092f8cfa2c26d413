"""Environment and ``.env`` driven configuration.

Purpose
-------
Let deployments tune the threshold, application name, timestamp pattern and
colour handling without touching code.

Contents
--------
* :data:`ENV_LEVEL`, :data:`ENV_APP`, :data:`ENV_TIMESTAMP_FORMAT`,
  :data:`ENV_NO_COLOR`, :data:`DOTENV_ENV_VAR` - recognised variables.
* :func:`configure_from_env` - apply the variables to a configuration.
* :func:`enable_dotenv` / :func:`should_use_dotenv` - optional ``.env``
  loading via python-dotenv.

System Role
-----------
Used by the CLI and available to host applications at startup. Values already
present in the process environment always win over ``.env`` entries.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from lib_log_leveled.application.state import LoggingConfig
from lib_log_leveled.domain.levels import Level
from lib_log_leveled.runtime import default_config

logger = logging.getLogger(__name__)

ENV_LEVEL = "LOG_LEVEL"
ENV_APP = "LOG_APP"
ENV_TIMESTAMP_FORMAT = "LOG_TIMESTAMP_FORMAT"
ENV_NO_COLOR = "LOG_NO_COLOR"
DOTENV_ENV_VAR = "LOG_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_dotenv_loaded: Path | None = None


def _env_bool(value: str | None, default: bool) -> bool:
    """Interpret ``1/true/yes/on`` style strings; blank means ``default``.

    Examples
    --------
    >>> _env_bool("On", False), _env_bool("0", True), _env_bool(None, True)
    (True, False, True)
    """

    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Return whether ``.env`` should be loaded; an explicit flag wins."""

    if explicit is not None:
        return explicit
    return _env_bool(env_value, False)


def enable_dotenv(start: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` walking up from ``start`` (default: cwd).

    Existing environment variables are never overridden. Returns the resolved
    path of the loaded file or ``None`` when none was found.
    """

    global _dotenv_loaded
    if start is None:
        found = find_dotenv(usecwd=True)
    else:
        found = _find_upwards(start.resolve())
    if not found:
        logger.debug("No .env file found")
        return None
    path = Path(found).resolve()
    load_dotenv(path, override=False)
    _dotenv_loaded = path
    logger.debug("Loaded environment from %s", path)
    return path


def _find_upwards(start: Path) -> str:
    directory = start if start.is_dir() else start.parent
    for candidate in (directory, *directory.parents):
        env_file = candidate / ".env"
        if env_file.is_file():
            return str(env_file)
    return ""


def loaded_dotenv() -> Path | None:
    """Return the ``.env`` file loaded by :func:`enable_dotenv`, if any."""

    return _dotenv_loaded


def configure_from_env(
    config: LoggingConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> LoggingConfig:
    """Apply the ``LOG_*`` variables from ``environ`` to ``config``.

    Unset variables leave the corresponding setting untouched. ``NO_COLOR``
    (any non-empty value) disables colour like ``LOG_NO_COLOR=1``.

    Raises
    ------
    ValueError
        When ``LOG_LEVEL`` names an unknown level or a boolean is malformed.

    Examples
    --------
    >>> cfg = configure_from_env(LoggingConfig(), {"LOG_LEVEL": "trace", "LOG_APP": "svc"})
    >>> cfg.level is Level.TRACE, cfg.app_name.load()
    (True, 'svc')
    """

    target = config if config is not None else default_config()
    env = os.environ if environ is None else environ

    level = env.get(ENV_LEVEL)
    if level is not None and level.strip():
        target.level = Level.from_name(level)
    app = env.get(ENV_APP)
    if app is not None:
        target.app_name.store(app)
    pattern = env.get(ENV_TIMESTAMP_FORMAT)
    if pattern:
        target.timestamp_format = pattern
    if env.get("NO_COLOR"):
        target.colorize = False
    if env.get(ENV_NO_COLOR) is not None:
        target.colorize = not _env_bool(env.get(ENV_NO_COLOR), not target.colorize)
    return target


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_loaded
    _dotenv_loaded = None


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_APP",
    "ENV_LEVEL",
    "ENV_NO_COLOR",
    "ENV_TIMESTAMP_FORMAT",
    "configure_from_env",
    "enable_dotenv",
    "loaded_dotenv",
    "should_use_dotenv",
]
