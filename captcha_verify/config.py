"""
Configuration via pydantic-settings.

All settings are loaded from environment variables (and a .env file when
present). Nothing in the verifiers reads these directly: they take explicit
constructor arguments, and captcha_verify.dependencies turns settings into
ready-made verifiers for applications that want environment-driven setup.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from captcha_verify.endpoints import CLOUDFLARE_TURNSTILE
from captcha_verify.schemas.expectations import CaptchaExpectations
from captcha_verify.schemas.verify import RequestEncoding


class CaptchaSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    captcha_endpoint: str = CLOUDFLARE_TURNSTILE
    captcha_secret: str = ""
    captcha_request_encoding: RequestEncoding = RequestEncoding.JSON
    captcha_timeout_seconds: float = Field(default=5.0, gt=0)

    # Expectations for SimpleCaptchaVerifier
    captcha_min_score: float = Field(default=0.0, ge=0.0, le=1.0)
    captcha_expected_action: str = ""
    captcha_expected_hostname: str = ""
    captcha_expected_apk_package_name: str = ""

    @property
    def expectations(self) -> CaptchaExpectations:
        return CaptchaExpectations(
            min_score=self.captcha_min_score,
            expected_action=self.captcha_expected_action,
            expected_hostname=self.captcha_expected_hostname,
            expected_apk_package_name=self.captcha_expected_apk_package_name,
        )


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production
