"""Logging utilities for projgen.

This module provides standalone structlog logger factories that write
text-formatted or JSON-formatted diagnostics to stderr or a log file. Each
logger is self-contained and does not modify global structlog configuration.
"""

import logging
import sys
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]


def _log_level_from_string(level: str | None) -> int:
    """Convert a log level string to a logging level integer.

    The log level is determined by (in order of precedence):
    1. PROJGEN_DEBUG environment variable (if set, enables DEBUG level)
    2. The `level` argument (if provided)
    3. PROJGEN_LOG_LEVEL environment variable
    4. Default: INFO

    Args:
        level: Log level string (debug, info, warning, error), or None.

    Returns:
        The logging level as an integer.
    """
    if getenv("PROJGEN_DEBUG", None):
        return logging.DEBUG

    name = level if level is not None else getenv("PROJGEN_LOG_LEVEL", "info")
    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(name.upper(), logging.INFO)


def create_config_logger(
    level: str | None = None,
    *,
    log_format: LogFormatType = "text",
    log_file: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger for generator config diagnostics.

    Args:
        level: Optional log level string (debug, info, warning, error).
            Overrides PROJGEN_LOG_LEVEL but not PROJGEN_DEBUG.
        log_format: Output format, either "json" or "text".
        log_file: Path to a log file opened in append mode. Logs go to stderr
            when empty.

    Returns:
        A FilteringBoundLogger instance.
    """
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger_factory = structlog.WriteLoggerFactory(file=log_path.open("a"))
    else:
        logger_factory = structlog.WriteLoggerFactory(file=sys.stderr)

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Text format: "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    wrapper_class = structlog.make_filtering_bound_logger(_log_level_from_string(level))

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            logger_factory(),
            processors=processors,
            wrapper_class=wrapper_class,
            context_class=dict,
        ),
    )
