"""Logging utilities for repostat.

This module provides a standalone structlog logger factory writing
JSON-formatted or text-formatted logs to a file or to stderr. Loggers are
self-contained and do not modify global structlog configuration.
"""

import logging
import sys
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TextIO, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]


def _log_level_from_string(level: str, *, respect_env: bool = True) -> int:
    """Convert a log level string to a logging level integer.

    Args:
        level: Log level string (debug, info, warning, error).
        respect_env: If True, REPOSTAT_DEBUG overrides to DEBUG level.

    Returns:
        The logging level as an integer, WARNING for unknown names.
    """
    if respect_env and getenv("REPOSTAT_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.WARNING)


def _open_sink(log_file: str) -> TextIO:
    if not log_file:
        return sys.stderr
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return log_path.open("a")


def create_logger(
    *,
    level: str = "warning",
    log_format: LogFormatType = "text",
    log_file: str = "",
    command: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a standalone structlog logger.

    The level can be forced to DEBUG with the REPOSTAT_DEBUG environment
    variable regardless of configuration.

    Args:
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to a log file opened in append mode. Empty writes
            to stderr.
        command: Name of the CLI command, bound to all entries if given.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    effective_level = _log_level_from_string(level)

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

    logger_factory = structlog.WriteLoggerFactory(file=_open_sink(log_file))

    logger = cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            logger_factory(),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(effective_level),
            context_class=dict,
        ),
    )

    if command:
        return logger.bind(command=command)
    return logger
