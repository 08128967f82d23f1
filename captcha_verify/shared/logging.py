"""
Logger factory and helpers for captcha-verify.

Provides:
- get_logger(): Get a structlog logger for a module
- hash_ip(): Hash client IP addresses before they reach a log line
- configure_logging(): Opt-in structlog setup (re-exported)
"""

import hashlib
import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from captcha_verify.shared.logging_config import (
    configure_logging,
    redact_sensitive_fields,
)


def get_logger(name: str) -> BoundLogger:
    """
    Get a structlog logger backed by the stdlib logger *name*.

    Events go through stdlib logging, so they stay silent (below WARNING) or
    go to stderr until the host application configures logging.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Example:
        >>> log = get_logger(__name__)
        >>> log.debug("captcha_verify_request", endpoint=endpoint)
    """
    return structlog.wrap_logger(logging.getLogger(name))


def hash_ip(ip_address: Optional[str]) -> Optional[str]:
    """
    SHA-256 digest (first 16 hex chars) of a client IP address.

    Returns None for None or an empty string, so "no IP supplied" stays
    distinguishable in logs.
    """
    if not ip_address:
        return None
    return hashlib.sha256(ip_address.encode()).hexdigest()[:16]


__all__ = [
    "configure_logging",
    "get_logger",
    "hash_ip",
    "redact_sensitive_fields",
]
