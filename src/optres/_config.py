"""Library configuration: Config, init() and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from optres._logging import configure_logging

__all__ = [
    'Config',
    'LogFormat',
    'get_config',
    'init',
    'reset',
]


class LogFormat(Enum):
    """Output format for configured logging."""

    JSON = 'json'
    CONSOLE = 'console'


@dataclass(frozen=True)
class Config:
    """Configuration for optres.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        log_format: JSON or colored console output.
        capture: Exception types converted to Err by wrap/safe when the
            caller does not pass `exceptions`.
    """

    log_level: str | None = None
    log_format: LogFormat = LogFormat.JSON
    capture: tuple[type[BaseException], ...] = (Exception,)


# Global configuration (set by init())
_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read OPTRES_LOG_LEVEL; empty or unset means silent."""
    level = os.environ.get('OPTRES_LOG_LEVEL', '').strip().upper()
    return level or None


def _detect_log_format() -> LogFormat:
    """Read OPTRES_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    env_format = os.environ.get('OPTRES_LOG_FORMAT', '').lower()
    if env_format == 'console':
        return LogFormat.CONSOLE
    if env_format and env_format != 'json':
        logging.warning("Unknown OPTRES_LOG_FORMAT value '%s', defaulting to json", env_format)
    return LogFormat.JSON


def init(
    log_level: str | None = None,
    log_format: LogFormat | str | None = None,
    capture: tuple[type[BaseException], ...] | None = None,
) -> Config:
    """Initialize optres with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            OPTRES_LOG_LEVEL if None; silent if neither is set.
        log_format: Log output format. Read from OPTRES_LOG_FORMAT if None.
        capture: Default exception types captured by wrap/safe.

    Returns:
        The Config that was set.

    Example:
        ```python
        import optres

        optres.init(log_level='DEBUG', log_format='console')
        ```
    """
    global _config  # noqa: PLW0603

    if log_format is None:
        resolved_format = _detect_log_format()
    elif isinstance(log_format, str):
        resolved_format = LogFormat(log_format.lower())
    else:
        resolved_format = log_format

    _config = Config(
        log_level=log_level if log_level is not None else _detect_log_level(),
        log_format=resolved_format,
        capture=capture if capture is not None else (Exception,),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.log_format is LogFormat.JSON)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    Returns the defaults when init() has not been called.
    """
    if _config is None:
        return Config()
    return _config


def reset() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
