"""
Centralized logging configuration for rid.

This module sets up structured logging with:
- Settings-driven configuration (level and renderer from LoggingSettings)
- JSON formatting for production, pretty console for development
- Redaction of secrets so HMAC signing keys never reach a log line

Nothing here runs on import; applications call ``setup_logging()`` once at
startup. Without it, rid's loggers fall back to structlog's defaults.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import structlog
from structlog.types import EventDict, Processor

from .config import AppSettings, LoggingSettings

# Sensitive fields to redact from logs
REDACTED_FIELDS = {
    "secret",
    "signing_secret",
    "key",
    "token",
    "password",
}

_REDACTED_SUBSTRINGS = ("secret", "key", "token", "password")
_PROTECTED_KEYS = {"level", "event", "timestamp", "logger"}


def add_timestamp(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add ISO format UTC timestamp to event dict."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def redact_sensitive_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Redact sensitive fields from logs."""
    for key in list(event_dict.keys()):
        if key in _PROTECTED_KEYS:
            continue
        lowered = key.lower()
        if lowered in REDACTED_FIELDS or any(
            sensitive in lowered for sensitive in _REDACTED_SUBSTRINGS
        ):
            event_dict[key] = "***REDACTED***"
    return event_dict


def shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        redact_sensitive_fields,
        structlog.processors.format_exc_info,
    ]


def configure_structlog(settings: LoggingSettings) -> None:
    """
    Configure structlog with appropriate processors for the environment.

    json: one JSON object per line for log shipping
    console: pretty console formatting with colors
    """
    if settings.log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            pad_event=15,
            sort_keys=False,
        )

    structlog.configure(
        processors=shared_processors() + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_stdlib_logging(settings: LoggingSettings) -> None:
    """Route stdlib logging to stdout at the configured level."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
    )


def setup_logging(settings: Optional[AppSettings] = None) -> None:
    """
    Initialize logging for an application embedding rid.

    Args:
        settings: Application settings; loaded from the environment when
            omitted. Production always logs JSON.
    """
    settings = settings or AppSettings()
    log_settings = settings.logging or LoggingSettings()
    if settings.is_production:
        log_settings = log_settings.model_copy(update={"log_format": "json"})

    configure_stdlib_logging(log_settings)
    configure_structlog(log_settings)

    structlog.get_logger(__name__).info(
        "logging_initialized",
        env=settings.env,
        log_level=log_settings.log_level,
        log_format=log_settings.log_format,
    )
