"""
Logging Configuration

Structured logging setup using structlog for consistent, parseable logs.
"""
import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from config.settings import settings

APP_NAME = "housephotos"

# Chatty HTTP client loggers, kept at WARNING
NOISY_LOGGERS = ["urllib3", "requests"]


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Stamp every entry with the app name and environment."""
    event_dict["app"] = APP_NAME
    event_dict["environment"] = settings.environment
    return event_dict


def setup_logging(log_level: str = None, log_format: str = None) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Override for settings.log_level
        log_format: Override for settings.log_format ("json" or "console")
    """
    level = (log_level or settings.log_level).upper()
    fmt = log_format or settings.log_format

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level),
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
    ]

    if fmt == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.processors.ExceptionRenderer())
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Module logger; call with __name__."""
    return structlog.get_logger(name)


def bind_log_context(**values: Any) -> None:
    """
    Bind key/value pairs to every log entry emitted from the current thread.

    Args:
        **values: Context such as worker_id
    """
    structlog.contextvars.bind_contextvars(**values)


def clear_log_context() -> None:
    """Drop context bound with bind_log_context in the current thread."""
    structlog.contextvars.clear_contextvars()
