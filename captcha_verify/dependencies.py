"""
Provider functions that build verifiers from CaptchaSettings.

Applications call these once at startup (or wire them into their framework's
dependency system) and share the resulting verifier across requests.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from captcha_verify.config import CaptchaSettings
from captcha_verify.infrastructure.captcha.simple import SimpleCaptchaVerifier
from captcha_verify.infrastructure.captcha.verifier import CaptchaVerifier
from captcha_verify.infrastructure.http_client import HttpClient, HttpPoster


@lru_cache
def get_settings() -> CaptchaSettings:
    """Return the process-wide CaptchaSettings, read from the environment once."""
    return CaptchaSettings()


def build_captcha_verifier(
    settings: Optional[CaptchaSettings] = None,
    http_client: Optional[HttpPoster] = None,
) -> CaptchaVerifier:
    """Build a CaptchaVerifier; without *http_client* one is created with the configured timeout."""
    if settings is None:
        settings = get_settings()
    if http_client is None:
        http_client = HttpClient(timeout=settings.captcha_timeout_seconds)
    return CaptchaVerifier(
        endpoint=settings.captcha_endpoint,
        secret=settings.captcha_secret,
        http_client=http_client,
        encoding=settings.captcha_request_encoding,
    )


def build_simple_verifier(
    settings: Optional[CaptchaSettings] = None,
    http_client: Optional[HttpPoster] = None,
) -> SimpleCaptchaVerifier:
    if settings is None:
        settings = get_settings()
    return SimpleCaptchaVerifier(
        build_captcha_verifier(settings, http_client),
        settings.expectations,
    )
