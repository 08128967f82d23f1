"""
Wire models for the siteverify exchange.

VerifyRequest   - body POSTed to the endpoint ({secret, response, remoteip})
VerifyResponse  - JSON document the endpoint answers with
RequestEncoding - how VerifyRequest is put on the wire

The error-code constants are the server-side vocabulary reported in
VerifyResponse.error_codes. Endpoints may add codes of their own.
"""

from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from typing import Any, Optional
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field, model_validator

from captcha_verify.shared.datetime_utils import parse_datetime

# The secret was not passed.
ERROR_MISSING_INPUT_SECRET = "missing-input-secret"
# The secret is invalid.
ERROR_INVALID_INPUT_SECRET = "invalid-input-secret"
# The client response was not passed.
ERROR_MISSING_INPUT_RESPONSE = "missing-input-response"
# The client response is invalid.
ERROR_INVALID_INPUT_RESPONSE = "invalid-input-response"
# The request was malformed.
ERROR_BAD_REQUEST = "bad-request"
# The response is too old or has been used before.
ERROR_TIMEOUT_OR_DUPLICATE = "timeout-or-duplicate"
# Unknown server-side failure. The request can be retried.
ERROR_INTERNAL_ERROR = "internal-error"

KNOWN_ERROR_CODES = frozenset(
    {
        ERROR_MISSING_INPUT_SECRET,
        ERROR_INVALID_INPUT_SECRET,
        ERROR_MISSING_INPUT_RESPONSE,
        ERROR_INVALID_INPUT_RESPONSE,
        ERROR_BAD_REQUEST,
        ERROR_TIMEOUT_OR_DUPLICATE,
        ERROR_INTERNAL_ERROR,
    }
)


class RequestEncoding(str, Enum):
    JSON = "json"
    FORM = "form"

    @property
    def content_type(self) -> str:
        if self is RequestEncoding.FORM:
            return "application/x-www-form-urlencoded"
        return "application/json"


class VerifyRequest(BaseModel):
    """Request body for POST <endpoint>.

    ``remote_ip`` is optional. When empty the ``remoteip`` key is left out of
    the payload entirely so the endpoint does not attempt IP validation.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    secret: str
    response: str
    remote_ip: str = Field(default="", alias="remoteip")

    def to_payload(self) -> dict[str, str]:
        data = self.model_dump(by_alias=True)
        if not data.get("remoteip"):
            data.pop("remoteip", None)
        return data

    def encode(self, encoding: RequestEncoding = RequestEncoding.JSON) -> bytes:
        payload = self.to_payload()
        if encoding is RequestEncoding.FORM:
            return urlencode(payload).encode("utf-8")
        return json.dumps(payload).encode("utf-8")


class VerifyResponse(BaseModel):
    """Response body returned by a siteverify endpoint.

    Fields missing from the document (or sent as ``null``) take their zero
    value, and unknown fields are ignored, so the same model serves
    Turnstile, every reCAPTCHA version and hCaptcha.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    # True iff the validation was successful. Returned by all endpoints.
    success: bool = False

    # reCAPTCHA v3 only: 0.0 is a likely bot, 1.0 a likely human.
    score: float = Field(default=0.0, allow_inf_nan=False)

    # When the challenge was solved, ISO 8601. See parsed_challenge_time().
    challenge_ts: str = ""

    # Client-declared action. Turnstile and reCAPTCHA v3 only.
    action: str = ""

    # Site the challenge was solved on (web).
    hostname: str = ""

    # Android package the challenge was solved in (reCAPTCHA Android).
    apk_package_name: str = ""

    error_codes: tuple[str, ...] = Field(default=(), alias="error-codes")

    # Customer data round-tripped by Turnstile.
    cdata: str = ""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def parsed_challenge_time(self) -> Optional[datetime]:
        """``challenge_ts`` as a UTC datetime, or None if absent or unparseable."""
        return parse_datetime(self.challenge_ts)
