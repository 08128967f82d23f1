"""Fail-closed CaptchaProvider for request handlers that only need a yes/no gate.

SimpleCaptchaVerifier raises when the endpoint cannot be reached or
misbehaves. Handlers that treat those cases like a failed captcha can wrap it
here: every CaptchaError is logged and reported as False.
"""

from captcha_verify.errors import CaptchaError
from captcha_verify.infrastructure.captcha.simple import SimpleCaptchaVerifier
from captcha_verify.shared.logging import get_logger, hash_ip

log = get_logger(__name__)


class FailClosedCaptchaProvider:
    def __init__(self, verifier: SimpleCaptchaVerifier) -> None:
        self._verifier = verifier

    def verify(self, client_response: str, remote_ip: str = "") -> bool:
        try:
            return self._verifier.verify(client_response, remote_ip)
        except CaptchaError as e:
            log.error(
                "captcha_verification_error",
                endpoint=self._verifier.verifier.endpoint,
                error_code=e.error_code,
                status_code=getattr(e, "status_code", None),
                error=e.message,
                ip_hash=hash_ip(remote_ip),
            )
            return False
