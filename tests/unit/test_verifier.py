"""Unit tests for CaptchaVerifier and send_verify_request."""

import json
from unittest.mock import MagicMock

import httpx
import pytest

from captcha_verify.endpoints import CLOUDFLARE_TURNSTILE, GOOGLE_RECAPTCHA
from captcha_verify.errors import (
    CaptchaError,
    CaptchaTransportError,
    Non200StatusError,
    RequestEncodeError,
    ResponseParseError,
)
from captcha_verify.infrastructure.captcha.verifier import (
    CaptchaVerifier,
    send_verify_request,
)
from captcha_verify.infrastructure.http_client import HttpClient
from captcha_verify.schemas.verify import RequestEncoding, VerifyRequest


def _sent_body(http) -> dict:
    _, kwargs = http.post.call_args
    return json.loads(kwargs["content"])


class TestCaptchaVerifier:
    def _make(self, http, endpoint=CLOUDFLARE_TURNSTILE, secret="test-secret"):
        return CaptchaVerifier(endpoint, secret, http_client=http)

    def test_returns_parsed_response(self, http, make_response):
        http.post.return_value = make_response(
            {
                "success": True,
                "challenge_ts": "2024-05-01T10:00:00Z",
                "hostname": "example.com",
                "action": "login",
                "cdata": "abc",
            }
        )
        resp = self._make(http).verify("client-token", "198.51.100.1")
        assert resp.success is True
        assert resp.hostname == "example.com"
        assert resp.action == "login"
        assert resp.cdata == "abc"

    def test_posts_json_to_endpoint(self, http):
        self._make(http, endpoint=GOOGLE_RECAPTCHA).verify("client-token", "198.51.100.1")
        http.post.assert_called_once()
        args, kwargs = http.post.call_args
        assert args[0] == GOOGLE_RECAPTCHA
        assert kwargs["headers"] == {"Content-Type": "application/json"}
        assert _sent_body(http) == {
            "secret": "test-secret",
            "response": "client-token",
            "remoteip": "198.51.100.1",
        }

    def test_empty_remote_ip_not_sent(self, http):
        self._make(http).verify("client-token")
        assert "remoteip" not in _sent_body(http)

    def test_form_encoding(self, http):
        verifier = CaptchaVerifier(
            "https://hcaptcha.com/siteverify",
            "test-secret",
            http_client=http,
            encoding="form",
        )
        verifier.verify("client-token")
        _, kwargs = http.post.call_args
        assert kwargs["headers"] == {
            "Content-Type": "application/x-www-form-urlencoded"
        }
        assert kwargs["content"] == b"secret=test-secret&response=client-token"
        assert verifier.encoding is RequestEncoding.FORM

    def test_non_200_raises_with_status(self, http, make_response):
        http.post.return_value = make_response(status_code=503, content=b"down")
        with pytest.raises(Non200StatusError) as exc_info:
            self._make(http).verify("client-token")
        assert exc_info.value.status_code == 503

    def test_non_200_even_with_success_body(self, http, make_response):
        http.post.return_value = make_response({"success": True}, status_code=201)
        with pytest.raises(Non200StatusError):
            self._make(http).verify("client-token")

    def test_malformed_json_raises_parse_error(self, http, make_response):
        http.post.return_value = make_response(content=b"<html>oops</html>")
        with pytest.raises(ResponseParseError) as exc_info:
            self._make(http).verify("client-token")
        assert not isinstance(exc_info.value, (Non200StatusError, CaptchaTransportError))
        assert exc_info.value.cause is not None

    def test_wrong_shape_raises_parse_error(self, http, make_response):
        http.post.return_value = make_response(content=b'["success"]')
        with pytest.raises(ResponseParseError):
            self._make(http).verify("client-token")

    @pytest.mark.parametrize(
        "exc",
        [
            httpx.ConnectError("connection refused"),
            httpx.ReadTimeout("timed out"),
            ConnectionResetError("reset"),
            httpx.InvalidURL("Invalid port: 'abc'"),
        ],
        ids=["connect", "timeout", "os_error", "invalid_url"],
    )
    def test_transport_failure_wrapped(self, http, exc):
        http.post.side_effect = exc
        with pytest.raises(CaptchaTransportError) as exc_info:
            self._make(http).verify("client-token")
        assert exc_info.value.cause is exc
        assert exc_info.value.details["endpoint"] == CLOUDFLARE_TURNSTILE

    def test_non_string_token_raises_encode_error(self, http):
        with pytest.raises(RequestEncodeError) as exc_info:
            self._make(http).verify(None)
        assert exc_info.value.cause is not None
        http.post.assert_not_called()

    def test_every_failure_is_a_captcha_error(self, http, make_response):
        http.post.return_value = make_response(status_code=500)
        with pytest.raises(CaptchaError):
            self._make(http).verify("client-token")

    def test_repeated_calls_are_independent(self, http, make_response):
        http.post.return_value = make_response({"success": True, "score": 0.7})
        verifier = self._make(http)
        first = verifier.verify("client-token")
        second = verifier.verify("client-token")
        assert first == second
        assert http.post.call_count == 2

    def test_http_client_can_be_replaced(self, http, make_response):
        verifier = self._make(http)
        replacement = MagicMock()
        replacement.post.return_value = make_response({"success": False})
        verifier.http_client = replacement
        assert verifier.verify("client-token").success is False
        http.post.assert_not_called()

    def test_exposes_configuration(self, http):
        verifier = self._make(http)
        assert verifier.endpoint == CLOUDFLARE_TURNSTILE
        assert verifier.secret == "test-secret"
        assert verifier.encoding is RequestEncoding.JSON


class TestClientOwnership:
    def test_creates_default_client(self):
        verifier = CaptchaVerifier(CLOUDFLARE_TURNSTILE, "s")
        assert isinstance(verifier.http_client, HttpClient)
        verifier.close()

    def test_closes_owned_client(self, mocker):
        verifier = CaptchaVerifier(CLOUDFLARE_TURNSTILE, "s")
        close = mocker.patch.object(verifier.http_client, "close")
        with verifier:
            pass
        close.assert_called_once()

    def test_leaves_injected_client_open(self, http):
        with CaptchaVerifier(CLOUDFLARE_TURNSTILE, "s", http_client=http):
            pass
        http.close.assert_not_called()


class TestSendVerifyRequest:
    def test_sends_prebuilt_request(self, http):
        req = VerifyRequest(secret="abc", response="tok", remote_ip="10.0.0.1")
        resp = send_verify_request(req, http, "https://captcha.internal/verify")
        assert resp.success is True
        args, _ = http.post.call_args
        assert args[0] == "https://captcha.internal/verify"
        assert _sent_body(http)["remoteip"] == "10.0.0.1"
