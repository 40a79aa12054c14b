"""reCAPTCHA verification proxy."""

import httpx

from src.codewave.core.exceptions import UpstreamError, ValidationError
from src.codewave.core.logging import get_logger
from src.codewave.schemas.captcha import CaptchaResult

logger = get_logger(__name__)


class CaptchaService:
    """Forwards a client token to the reCAPTCHA siteverify API.

    A single upstream attempt is made; failures surface as UpstreamError.
    """

    def __init__(self, client: httpx.AsyncClient, secret: str | None, verify_url: str):
        self.client = client
        self.secret = secret
        self.verify_url = verify_url

    async def verify(self, token: str | None) -> CaptchaResult:
        """Verify a reCAPTCHA token.

        Raises:
            ValidationError: If no token was given.
            UpstreamError: If the service is not configured or the API call fails.
        """
        if not token:
            raise ValidationError("Missing token")
        if not self.secret:
            logger.warning("RECAPTCHA_SECRET not set - cannot verify tokens")
            raise UpstreamError("reCAPTCHA verification is not configured")

        try:
            response = await self.client.post(
                self.verify_url,
                data={"secret": self.secret, "response": token},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            logger.warning("reCAPTCHA request failed", error=str(e))
            raise UpstreamError("reCAPTCHA verification request failed") from e
        except ValueError as e:
            logger.warning("reCAPTCHA returned a non-JSON body")
            raise UpstreamError("reCAPTCHA returned an invalid response") from e

        if not isinstance(payload, dict):
            raise UpstreamError("reCAPTCHA returned an invalid response")
        if payload.get("success"):
            return CaptchaResult(success=True, message="reCAPTCHA verified")
        return CaptchaResult(
            success=False,
            error="reCAPTCHA failed",
            details=[str(code) for code in payload.get("error-codes", [])],
        )
