"""
Structured logging configuration for captcha-verify.

Nothing here runs on import: a library must not reconfigure its host
application's logging. Applications that have no structlog setup of their own
call configure_logging() once at startup.

Sets up:
- JSON formatting ("json") or pretty console output ("console")
- Redaction of secrets and client tokens
- Standard library logging bridge so levels are honoured
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog
from structlog.types import EventDict, Processor

from captcha_verify.config import LoggingSettings

# Sensitive fields to redact from logs
REDACTED_FIELDS = {
    "secret",
    "captcha_secret",
    "token",
    "response_token",
    "client_response",
    "authorization",
    "password",
}

_SENSITIVE_FRAGMENTS = ("secret", "token", "password", "key")
_PASSTHROUGH_FIELDS = {"level", "event", "timestamp", "logger"}


def redact_sensitive_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Redact sensitive fields from logs."""
    for key in list(event_dict.keys()):
        lowered = key.lower()
        if key in _PASSTHROUGH_FIELDS:
            continue
        if lowered in REDACTED_FIELDS or any(
            fragment in lowered for fragment in _SENSITIVE_FRAGMENTS
        ):
            event_dict[key] = "***REDACTED***"
    return event_dict


def build_processors(log_format: str) -> list[Processor]:
    """Processor chain for *log_format* ("json" or "console")."""
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        redact_sensitive_fields,
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        return shared_processors + [structlog.processors.JSONRenderer()]
    return shared_processors + [
        structlog.dev.ConsoleRenderer(colors=True, pad_event=15, sort_keys=False)
    ]


def configure_logging(
    settings: Optional[LoggingSettings] = None,
    *,
    cache_logger_on_first_use: bool = True,
) -> None:
    """
    Initialize stdlib logging and structlog from *settings*.

    Defaults to a fresh LoggingSettings() read from the environment.
    """
    if settings is None:
        settings = LoggingSettings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    structlog.configure(
        processors=build_processors(settings.log_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_logger_on_first_use,
    )
