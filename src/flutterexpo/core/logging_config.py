"""
Structured Logging Configuration
structlog over stdlib logging; every bridge event carries the service name
and whatever session context is bound for the current message.
"""

import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger import jsonlogger
from structlog.types import EventDict, Processor, WrappedLogger

SERVICE_NAME = "flutterexpo-bridge"

# Per-request chatter from the server; kept at WARNING or above
QUIET_LOGGERS = ("uvicorn.access",)


def add_service(service: str) -> Processor:
    """Processor stamping ``service`` on every event that lacks one."""

    def processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        return event_dict

    return processor


def configure_logging(
    level: str = "INFO", json_logs: bool = False, service: str = SERVICE_NAME
) -> None:
    """
    Configure structured logging for the bridge.

    Safe to call more than once: the root handler is replaced, not stacked.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: One JSON object per line instead of console output
        service: Value of the ``service`` key on every event
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        handler.setFormatter(
            jsonlogger.JsonFormatter(
                "%(asctime)s %(levelname)s %(name)s %(message)s",
                rename_fields={"asctime": "timestamp", "levelname": "level"},
            )
        )
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_service(service),
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


class LogContext:
    """
    Bind keys (``session_id``, ``message_type``, ...) for every event logged
    inside the block. Nested blocks restore the outer values on exit.
    """

    def __init__(self, **kwargs: Any):
        self.context = kwargs
        self.tokens: dict[str, Any] = {}

    def __enter__(self) -> "LogContext":
        self.tokens = structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.reset_contextvars(**self.tokens)
