"""Logging configuration for Word Swarm."""

import logging
import logging.handlers
import os
import sys
from typing import TYPE_CHECKING, Final

import structlog

from wordswarm.utils import get_app_data_path

if TYPE_CHECKING:
    from pathlib import Path

#: Environment variable that turns on console output and debug events.
DEBUG_ENV_VAR: Final[str] = "WORDSWARM_DEBUG"
#: Name of the JSON log file inside the log directory.
LOG_FILE_NAME: Final[str] = "wordswarm.log.json"
#: Days covered by one log file.
ROTATION_DAYS: Final[int] = 21
#: Rotated log files kept.
BACKUP_COUNT: Final[int] = 5


def get_log_dir() -> "Path":
    """
    Get the path to the log directory, creating it if needed.

    Returns:
        The path to the log directory.

    """
    log_dir = get_app_data_path() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_log_file_path() -> "Path":
    """
    Get the path to the current log file.

    Returns:
        The path to the current log file.

    """
    return get_log_dir() / LOG_FILE_NAME


def is_debug_enabled() -> bool:
    return DEBUG_ENV_VAR in os.environ


def _file_handler() -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        get_log_file_path(),
        when="D",
        interval=ROTATION_DAYS,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
        )
    )
    return handler


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(),
        )
    )
    return handler


def configure_logging(debug: bool | None = None) -> None:
    """
    Configure structlog on top of standard logging.

    Events are written as JSON lines to :func:`get_log_file_path`, rotated
    every :data:`ROTATION_DAYS` days.  In debug mode the level drops to
    ``DEBUG``, so per-sequence and per-frame events such as
    ``sequence.started`` and ``tokens.removed`` are kept, and a console
    handler is added.

    Keyword Args:
        debug: Force debug mode on or off; if ``None``, debug mode is on when
            ``WORDSWARM_DEBUG`` is set

    """
    if debug is None:
        debug = is_debug_enabled()

    handlers = [_file_handler()]
    if debug:
        handlers.append(_console_handler())

    logging.basicConfig(
        handlers=handlers,
        level=logging.DEBUG if debug else logging.INFO,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance.

    Args:
        name: Logger name

    Returns:
        A structlog logger

    """
    return structlog.get_logger(name)
