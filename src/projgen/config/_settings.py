"""Loader settings.

This module provides LoaderSettings, which controls how config loading and
saving report diagnostics.
"""

import os
from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar, Self

from pydantic import BaseModel, ConfigDict

from projgen.config._models._common import LogFormat, LogLevel
from projgen.utils._logging import create_config_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def _parse_log_level(value: str) -> LogLevel:
    """Parse log level string to LogLevel enum, with fallback.

    Args:
        value: Log level string value.

    Returns:
        LogLevel enum value, defaulting to INFO for invalid values.
    """
    try:
        return LogLevel(value.lower())
    except ValueError:
        return LogLevel.INFO


def _parse_log_format(value: str) -> LogFormat:
    """Parse log format string to LogFormat enum, with fallback.

    Args:
        value: Log format string value.

    Returns:
        LogFormat enum value, defaulting to TEXT for invalid values.
    """
    try:
        return LogFormat(value.lower())
    except ValueError:
        return LogFormat.TEXT


class LoaderSettings(BaseModel):
    """Diagnostics settings for config loading.

    Attributes:
        log_level: Log level threshold.
        log_format: Log output format.
        log_file: Path to log file (empty logs to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    log_level: LogLevel = LogLevel.INFO
    log_format: LogFormat = LogFormat.TEXT
    log_file: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Read settings from PROJGEN_* environment variables.

        Environment variables:
            - PROJGEN_LOG_LEVEL: debug, info, warning or error
            - PROJGEN_LOG_FORMAT: text or json
            - PROJGEN_LOG_FILE: log file path

        Invalid values fall back to defaults.

        Args:
            environ: Environment mapping. Defaults to os.environ.
        """
        env = os.environ if environ is None else environ
        return cls(
            log_level=_parse_log_level(env.get("PROJGEN_LOG_LEVEL", "info")),
            log_format=_parse_log_format(env.get("PROJGEN_LOG_FORMAT", "text")),
            log_file=env.get("PROJGEN_LOG_FILE", ""),
        )

    def create_logger(self) -> "FilteringBoundLogger":  # noqa: UP037
        """Create a diagnostics logger for these settings."""
        return create_config_logger(
            self.log_level.value,
            log_format="json" if self.log_format is LogFormat.JSON else "text",
            log_file=self.log_file,
        )


def default_logger() -> "FilteringBoundLogger":  # noqa: UP037
    """Create the logger used when a caller does not supply one."""
    return LoaderSettings.from_env().create_logger()
