"""reCAPTCHA proxy schemas."""

from pydantic import BaseModel


class CaptchaRequest(BaseModel):
    token: str | None = None


class CaptchaResult(BaseModel):
    success: bool
    message: str | None = None
    error: str | None = None
    details: list[str] | None = None
