"""
Shared Logger

Root logging setup plus a small context-carrying logger.
Modules log through ``logging.getLogger(__name__)``; services that want
structured context use ``get_service_logger``.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Context attached through ContextLogger
        context = getattr(record, "context", None)
        if context:
            log_data["context"] = context

        return json.dumps(log_data, default=str)


class ColoredFormatter(logging.Formatter):
    """Plain layout with the level name wrapped in an ANSI color."""

    COLORS = dict(DEBUG="\033[36m", INFO="\033[32m", WARNING="\033[33m", ERROR="\033[31m", CRITICAL="\033[35m")
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Copy so other handlers still see the bare level name
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


class ContextLogger:
    """
    Logger that attaches a fixed context to every record.

    Plain formatters append the context as ``key=value`` pairs, the JSON
    formatter emits it under ``context``.
    """

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        self._logger = logging.getLogger(name)
        self._context = context or {}

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    def with_context(self, **kwargs: Any) -> "ContextLogger":
        """Copy of this logger with extra context merged in."""
        return ContextLogger(self._logger.name, {**self._context, **kwargs})

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        context = {**self._context, **kwargs}
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in context.items())
            message = f"{message} [{pairs}]"
        self._logger.log(level, message, exc_info=exc_info, extra={"context": context}, stacklevel=3)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log an error with the active exception's traceback."""
        self._log(logging.ERROR, message, exc_info=True, **kwargs)


def configure_logging(
    level: str = "INFO",
    format_type: str = "plain",
    log_file: str | None = None,
) -> None:
    """
    Configure root logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'plain', 'colored' or 'json'
        log_file: Optional file path; file output is always JSON
    """
    numeric_level = logging.getLevelNamesMapping()[level.upper()]
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    if format_type == "json":
        console_handler.setFormatter(JSONFormatter())
    elif format_type == "colored":
        console_handler.setFormatter(ColoredFormatter(PLAIN_FORMAT, datefmt=DATE_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)


def get_logger(name: str, context: dict[str, Any] | None = None) -> ContextLogger:
    """Context-aware logger; plain module loggers need no wrapper."""
    return ContextLogger(name, context)


def get_service_logger(service_name: str) -> ContextLogger:
    """Logger for an application service, tagged with its name."""
    return get_logger(f"surplus.service.{service_name}", {"service": service_name})
