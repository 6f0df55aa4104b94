"""Bot verification client used before accepting a new player profile.

Provides a real implementation (Google reCAPTCHA siteverify) and a mock
for testing/development.
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class MockCaptchaVerifier:
    """Accepts any non-empty token.

    Use this for testing and development when no reCAPTCHA secret is set up.
    """

    is_configured = True

    async def verify(self, token: str) -> bool:
        logger.info("MockCaptchaVerifier: accepting token without verification")
        return bool(token)

    async def close(self):
        pass


class CaptchaVerifier:
    """Verifies reCAPTCHA tokens against Google's siteverify endpoint."""

    VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"

    def __init__(
        self,
        secret_key: str,
        verify_url: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the verifier.

        Args:
            secret_key: reCAPTCHA server-side secret
            verify_url: Override for the siteverify URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.secret_key = secret_key
        self.verify_url = verify_url or self.VERIFY_URL
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.secret_key)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def verify(self, token: str) -> bool:
        """Check a client token.

        Transport and HTTP errors count as a failed verification.

        Args:
            token: Token produced by the reCAPTCHA widget

        Returns:
            True if Google reports the token as valid
        """
        if not token:
            return False

        try:
            client = await self._get_client()
            response = await client.post(
                self.verify_url,
                data={"secret": self.secret_key, "response": token},
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Captcha verification failed: {e}")
            return False

        success = bool(data.get("success"))
        if not success:
            logger.warning(f"Captcha rejected: {data.get('error-codes', [])}")
        return success


def get_captcha_verifier(
    secret_key: Optional[str] = None,
    verify_url: Optional[str] = None,
    use_mock: bool = False,
) -> MockCaptchaVerifier | CaptchaVerifier:
    """Factory function to get the appropriate verifier.

    Args:
        secret_key: reCAPTCHA secret key
        verify_url: Override for the siteverify URL
        use_mock: Force use of the mock verifier

    Returns:
        CaptchaVerifier or MockCaptchaVerifier
    """
    if use_mock:
        logger.info("Using MockCaptchaVerifier")
        return MockCaptchaVerifier()
    logger.info("Using reCAPTCHA verifier")
    return CaptchaVerifier(secret_key or "", verify_url=verify_url)
