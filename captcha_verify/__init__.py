"""
captcha-verify: server-side verification of Cloudflare Turnstile, Google
reCAPTCHA (v2 and v3), hCaptcha and other siteverify-compatible captchas.

CaptchaVerifier returns the endpoint's VerifyResponse as is.
SimpleCaptchaVerifier checks it against CaptchaExpectations and returns a bool.
"""

from captcha_verify.endpoints import CLOUDFLARE_TURNSTILE, GOOGLE_RECAPTCHA, HCAPTCHA
from captcha_verify.errors import (
    CaptchaError,
    CaptchaTransportError,
    Non200StatusError,
    RequestEncodeError,
    ResponseParseError,
)
from captcha_verify.infrastructure.captcha.protocol import CaptchaProvider
from captcha_verify.infrastructure.captcha.provider import FailClosedCaptchaProvider
from captcha_verify.infrastructure.captcha.simple import SimpleCaptchaVerifier
from captcha_verify.infrastructure.captcha.verifier import (
    CaptchaVerifier,
    send_verify_request,
)
from captcha_verify.infrastructure.http_client import HttpClient, HttpPoster
from captcha_verify.schemas.expectations import CaptchaExpectations
from captcha_verify.schemas.verify import (
    ERROR_BAD_REQUEST,
    ERROR_INTERNAL_ERROR,
    ERROR_INVALID_INPUT_RESPONSE,
    ERROR_INVALID_INPUT_SECRET,
    ERROR_MISSING_INPUT_RESPONSE,
    ERROR_MISSING_INPUT_SECRET,
    ERROR_TIMEOUT_OR_DUPLICATE,
    KNOWN_ERROR_CODES,
    RequestEncoding,
    VerifyRequest,
    VerifyResponse,
)

__all__ = [
    "CLOUDFLARE_TURNSTILE",
    "GOOGLE_RECAPTCHA",
    "HCAPTCHA",
    "CaptchaError",
    "CaptchaTransportError",
    "Non200StatusError",
    "RequestEncodeError",
    "ResponseParseError",
    "CaptchaProvider",
    "FailClosedCaptchaProvider",
    "SimpleCaptchaVerifier",
    "CaptchaVerifier",
    "send_verify_request",
    "HttpClient",
    "HttpPoster",
    "CaptchaExpectations",
    "ERROR_BAD_REQUEST",
    "ERROR_INTERNAL_ERROR",
    "ERROR_INVALID_INPUT_RESPONSE",
    "ERROR_INVALID_INPUT_SECRET",
    "ERROR_MISSING_INPUT_RESPONSE",
    "ERROR_MISSING_INPUT_SECRET",
    "ERROR_TIMEOUT_OR_DUPLICATE",
    "KNOWN_ERROR_CODES",
    "RequestEncoding",
    "VerifyRequest",
    "VerifyResponse",
]
