"""Raw siteverify client: posts a VerifyRequest and returns the parsed VerifyResponse.

Works with Cloudflare Turnstile, Google reCAPTCHA v2 and v3, hCaptcha or any
custom endpoint speaking the same protocol. The response is returned as the
endpoint sent it; judging it is left to the caller or SimpleCaptchaVerifier.

Failures are raised, never logged and swallowed. Retries and timeouts belong
to the injected HTTP client.
"""

from typing import Any, Optional

import httpx
from pydantic import ValidationError

from captcha_verify.errors import (
    CaptchaTransportError,
    Non200StatusError,
    RequestEncodeError,
    ResponseParseError,
)
from captcha_verify.infrastructure.http_client import HttpClient, HttpPoster
from captcha_verify.schemas.verify import RequestEncoding, VerifyRequest, VerifyResponse
from captcha_verify.shared.logging import get_logger, hash_ip

log = get_logger(__name__)


def send_verify_request(
    request: VerifyRequest,
    http_client: HttpPoster,
    endpoint: str,
    encoding: RequestEncoding = RequestEncoding.JSON,
) -> VerifyResponse:
    """POST *request* to *endpoint* and parse the answer.

    Most callers want CaptchaVerifier.verify or SimpleCaptchaVerifier instead.

    Raises:
        RequestEncodeError: the request could not be serialized
        CaptchaTransportError: the POST failed before a response arrived
        Non200StatusError: the endpoint answered with a status other than 200
        ResponseParseError: the body is not a valid verify response
    """
    try:
        body = request.encode(encoding)
    except (TypeError, ValueError) as e:
        raise RequestEncodeError(f"failed to format verify request: {e}") from e

    try:
        response = http_client.post(
            endpoint,
            content=body,
            headers={"Content-Type": encoding.content_type},
        )
    except (httpx.HTTPError, httpx.InvalidURL, OSError) as e:
        raise CaptchaTransportError(
            f"failed to perform POST to captcha verify endpoint: {e}",
            details={"endpoint": endpoint, "error_type": type(e).__name__},
        ) from e

    if response.status_code != 200:
        raise Non200StatusError(response.status_code)

    try:
        return VerifyResponse.model_validate_json(response.content)
    except ValidationError as e:
        raise ResponseParseError(
            f"failed to parse verify response: {e.error_count()} error(s)",
            details={"errors": e.errors(include_url=False, include_input=False)},
        ) from e


class CaptchaVerifier:
    """Client for a single siteverify endpoint and secret.

    ``http_client`` is public: callers may swap it for one with different
    timeouts, proxies or TLS settings at any time. When none is given the
    verifier creates (and owns) an HttpClient with a 5 second timeout.
    """

    def __init__(
        self,
        endpoint: str,
        secret: str,
        http_client: Optional[HttpPoster] = None,
        encoding: RequestEncoding = RequestEncoding.JSON,
    ) -> None:
        if not secret:
            log.warning("captcha_secret_not_configured", endpoint=endpoint)
        self._endpoint = endpoint
        self._secret = secret
        self._encoding = RequestEncoding(encoding)
        self._owned_client: Optional[HttpClient] = None
        if http_client is None:
            http_client = self._owned_client = HttpClient()
        self.http_client = http_client

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def encoding(self) -> RequestEncoding:
        return self._encoding

    def verify(self, client_response: str, remote_ip: str = "") -> VerifyResponse:
        """Verify *client_response*, optionally binding it to *remote_ip*.

        Leave *remote_ip* empty to skip IP verification. The returned
        VerifyResponse is unjudged: check ``success`` and friends yourself or
        use SimpleCaptchaVerifier.
        """
        try:
            request = VerifyRequest(
                secret=self._secret, response=client_response, remote_ip=remote_ip
            )
        except ValidationError as e:
            raise RequestEncodeError(f"failed to format verify request: {e}") from e

        log.debug(
            "captcha_verify_request",
            endpoint=self._endpoint,
            encoding=self._encoding.value,
            ip_hash=hash_ip(remote_ip),
        )
        result = send_verify_request(
            request, self.http_client, self._endpoint, self._encoding
        )
        log.debug(
            "captcha_verify_response",
            endpoint=self._endpoint,
            success=result.success,
            error_codes=list(result.error_codes),
        )
        return result

    def close(self) -> None:
        """Close the HTTP client if this verifier created it."""
        if self._owned_client is not None:
            self._owned_client.close()

    def __enter__(self) -> "CaptchaVerifier":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
