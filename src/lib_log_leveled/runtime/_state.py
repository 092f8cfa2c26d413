"""Process-wide default configuration and access helpers."""

from __future__ import annotations

from threading import RLock

from lib_log_leveled.application.state import LoggingConfig

_DEFAULT: LoggingConfig = LoggingConfig()
_DEFAULT_LOCK = RLock()


def default_config() -> LoggingConfig:
    """Return the configuration used when callers do not inject their own."""

    with _DEFAULT_LOCK:
        return _DEFAULT


def install_default_config(config: LoggingConfig) -> LoggingConfig:
    """Install ``config`` as the process default and return the previous one.

    Loggers already built keep the configuration they were created with.
    """

    global _DEFAULT
    with _DEFAULT_LOCK:
        previous = _DEFAULT
        _DEFAULT = config
        return previous


def reset_default_config() -> LoggingConfig:
    """Replace the process default with a fresh :class:`LoggingConfig`."""

    return install_default_config(LoggingConfig())


__all__ = [
    "default_config",
    "install_default_config",
    "reset_default_config",
]
