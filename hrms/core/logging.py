"""
Centralized logging configuration using structlog.

Configures structured logging for the whole application, including
processors for request context (correlation_id, user_id, request_path).
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from hrms.core.config import settings


def add_correlation_id(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add correlation_id to log context if present."""
    correlation_id = event_dict.get("correlation_id")
    if correlation_id:
        event_dict["correlation_id"] = str(correlation_id)
    return event_dict


def add_user_context(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Normalise user_id to a string when present."""
    user_id = event_dict.get("user_id")
    if user_id is not None:
        event_dict["user_id"] = str(user_id)
    return event_dict


def add_request_context(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Drop empty request path/method keys so JSON lines stay compact."""
    for key in ("request_path", "request_method"):
        if key in event_dict and not event_dict[key]:
            del event_dict[key]
    return event_dict


def configure_logging() -> None:
    """
    Configure structlog for the application.

    Uses LOG_LEVEL and LOG_FORMAT from settings. JSON output is meant for
    log shippers, text output for local development.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_correlation_id,
        add_user_context,
        add_request_context,
    ]

    if settings.log_format.lower() == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Configured structlog BoundLogger instance
    """
    return structlog.get_logger(name)


def bind_request_context(**kwargs: Any) -> None:
    """
    Replace the per-request logging context.

    Example:
        bind_request_context(correlation_id="789e0123-...", request_path="/api/auth/login")
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**kwargs)


def bind_user_context(user_id: Any, role: str) -> None:
    """Attach the authenticated user to every log line of the current request."""
    structlog.contextvars.bind_contextvars(user_id=user_id, user_role=role)


def clear_request_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
