"""
structlog setup for resolver notifications.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import orjson
import structlog
from structlog.typing import EventDict, WrappedLogger

from env_resolver.config.logging import LogFormat, LoggingSettings


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(_name=name or "root")


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Expose the name bound by `get_logger` as `logger`."""
    event_dict["logger"] = event_dict.pop("_name", "root")
    return event_dict


def orjson_dumps(v: Any, *, default: Any = str) -> str:
    return orjson.dumps(v, default=default).decode()


def configure_logging(settings: LoggingSettings | None = None, *, stream: TextIO | None = None) -> None:
    """
    Route every `get_logger` logger to `stream` (stderr by default).

    Args:
        settings: Level and format; read from `ENV_RESOLVER_LOG_*` when omitted.
        stream: Output stream.
    """
    settings = settings or LoggingSettings()
    stream = stream or sys.stderr

    if settings.format is LogFormat.JSON:
        renderer: Any = structlog.processors.JSONRenderer(serializer=orjson_dumps)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=bool(getattr(stream, "isatty", lambda: False)()))

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            add_logger_name,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, settings.level.upper(), logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )
