"""
CaptchaExpectations - the values a verify response must match to pass.

Built once and shared by SimpleCaptchaVerifier across calls. Only the action
can be overridden per call (see SimpleCaptchaVerifier.verify_action).
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from captcha_verify.schemas.verify import VerifyResponse


class CaptchaExpectations(BaseModel):
    """Expected response values.

    ``min_score`` should be 0 unless reCAPTCHA v3 is used; Google suggests 0.5
    as a sensible threshold. ``expected_action`` stays empty for reCAPTCHA v2,
    which does not report one. Web apps set ``expected_hostname`` and leave
    ``expected_apk_package_name`` empty; Android apps do the opposite.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    min_score: float = Field(default=0.0, ge=0.0, le=1.0)
    expected_action: str = ""
    expected_hostname: str = ""
    expected_apk_package_name: str = ""

    def mismatches(
        self, response: VerifyResponse, expected_action: Optional[str] = None
    ) -> list[str]:
        """Return the names of the checks *response* fails; empty means it passes."""
        if expected_action is None:
            expected_action = self.expected_action

        failed: list[str] = []
        if not response.success:
            failed.append("success")
        if response.error_codes:
            failed.append("error_codes")
        # NaN fails
        if not response.score >= self.min_score:
            failed.append("score")
        if response.action != expected_action:
            failed.append("action")
        if response.hostname != self.expected_hostname:
            failed.append("hostname")
        if response.apk_package_name != self.expected_apk_package_name:
            failed.append("apk_package_name")
        return failed

    def matches(
        self, response: VerifyResponse, expected_action: Optional[str] = None
    ) -> bool:
        return not self.mismatches(response, expected_action)
