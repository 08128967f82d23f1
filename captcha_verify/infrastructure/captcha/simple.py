"""SimpleCaptchaVerifier: a CaptchaVerifier plus the values a response must match.

A response passes when ``success`` is true, no error codes are reported, the
score reaches ``min_score`` and action, hostname and APK package name equal
the expected values. A response that fails these checks yields False, not an
error; errors from the endpoint exchange propagate unchanged.
"""

from typing import Optional

from captcha_verify.infrastructure.captcha.verifier import CaptchaVerifier
from captcha_verify.schemas.expectations import CaptchaExpectations
from captcha_verify.schemas.verify import VerifyResponse
from captcha_verify.shared.logging import get_logger

log = get_logger(__name__)


class SimpleCaptchaVerifier:
    def __init__(
        self,
        verifier: CaptchaVerifier,
        expectations: Optional[CaptchaExpectations] = None,
    ) -> None:
        if expectations is None:
            expectations = CaptchaExpectations()
        self.verifier = verifier
        self.expectations = expectations

    def verify(self, client_response: str, remote_ip: str = "") -> bool:
        """Verify against the configured expectations. Leave *remote_ip* empty to skip IP checks."""
        return self.verify_action(
            client_response, remote_ip, self.expectations.expected_action
        )

    def verify_with_response(
        self, client_response: str, remote_ip: str = ""
    ) -> tuple[VerifyResponse, bool]:
        return self.verify_action_with_response(
            client_response, remote_ip, self.expectations.expected_action
        )

    def verify_action(
        self, client_response: str, remote_ip: str, expected_action: str
    ) -> bool:
        """Like verify, but the response's action must equal *expected_action*.

        All other expectations are unchanged, so one verifier can guard
        several actions (``"login"``, ``"signup"``) without being rebuilt.
        """
        _, ok = self.verify_action_with_response(
            client_response, remote_ip, expected_action
        )
        return ok

    def verify_action_with_response(
        self, client_response: str, remote_ip: str, expected_action: str
    ) -> tuple[VerifyResponse, bool]:
        response = self.verifier.verify(client_response, remote_ip)
        failed = self.expectations.mismatches(response, expected_action)
        if failed:
            log.info(
                "captcha_policy_mismatch",
                endpoint=self.verifier.endpoint,
                failed_checks=failed,
                error_codes=list(response.error_codes),
                action=response.action,
                expected_action=expected_action,
            )
        return response, not failed
