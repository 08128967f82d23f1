"""
Captcha verification error hierarchy.

CaptchaError is the base for all typed errors raised while talking to a
verification endpoint. The four subclasses form a closed set, one per phase
of a verify call, in the order they can occur:

    RequestEncodeError     - the request could not be built or serialized
    CaptchaTransportError  - the POST itself failed (connect, TLS, timeout)
    Non200StatusError      - the endpoint answered with a status other than 200
    ResponseParseError     - the body was not a valid verify response

A response that parses but fails the caller's expectations is not an error;
SimpleCaptchaVerifier reports it as False.
"""

from __future__ import annotations

from typing import Any, Optional


class CaptchaError(Exception):
    """Base captcha error. All typed errors inherit from this."""

    error_code: str = "captcha_error"

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def cause(self) -> Optional[BaseException]:
        """The underlying exception this error was raised from, if any."""
        return self.__cause__

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class RequestEncodeError(CaptchaError):
    error_code = "request_encode_error"


class CaptchaTransportError(CaptchaError):
    error_code = "transport_error"


class Non200StatusError(CaptchaError):
    error_code = "non_200_status"

    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"captcha verify endpoint returned non-200 status: {status_code}",
            details={"status_code": status_code},
        )
        self.status_code = status_code


class ResponseParseError(CaptchaError):
    error_code = "response_parse_error"
