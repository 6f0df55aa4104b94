"""Tests for the bot verification client."""

import httpx
import pytest

from squad_builder.services.captcha_client import (
    CaptchaVerifier,
    MockCaptchaVerifier,
    get_captcha_verifier,
)


def _verifier(handler) -> CaptchaVerifier:
    return CaptchaVerifier("secret-key", transport=httpx.MockTransport(handler))


@pytest.mark.anyio
async def test_verify_success_posts_secret_and_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = request.content.decode()
        return httpx.Response(200, json={"success": True})

    verifier = _verifier(handler)
    assert await verifier.verify("token-123") is True
    await verifier.close()

    assert seen["url"] == CaptchaVerifier.VERIFY_URL
    assert "secret=secret-key" in seen["body"]
    assert "response=token-123" in seen["body"]


@pytest.mark.anyio
async def test_verify_rejected_token():
    verifier = _verifier(
        lambda request: httpx.Response(
            200, json={"success": False, "error-codes": ["invalid-input-response"]}
        )
    )
    assert await verifier.verify("bad") is False


@pytest.mark.anyio
async def test_verify_http_error_counts_as_failure():
    verifier = _verifier(lambda request: httpx.Response(503))
    assert await verifier.verify("token") is False


@pytest.mark.anyio
async def test_verify_empty_token_skips_request():
    def handler(request):
        raise AssertionError("should not be called")

    assert await _verifier(handler).verify("") is False


@pytest.mark.anyio
async def test_mock_verifier_accepts_any_token():
    verifier = MockCaptchaVerifier()
    assert verifier.is_configured
    assert await verifier.verify("anything") is True
    assert await verifier.verify("") is False


def test_is_configured_requires_secret():
    assert CaptchaVerifier("s").is_configured
    assert not CaptchaVerifier("").is_configured


def test_factory():
    assert isinstance(get_captcha_verifier("s", use_mock=True), MockCaptchaVerifier)
    verifier = get_captcha_verifier("s", verify_url="http://verify.test")
    assert isinstance(verifier, CaptchaVerifier)
    assert verifier.verify_url == "http://verify.test"
