"""reCAPTCHA verification proxy endpoint."""

from fastapi import APIRouter

from src.codewave.api.dependencies import CaptchaServiceDep
from src.codewave.schemas.captcha import CaptchaRequest, CaptchaResult

router = APIRouter(tags=["captcha"])


@router.post(
    "/verify-recaptcha",
    response_model=CaptchaResult,
    response_model_exclude_none=True,
    summary="Verify reCAPTCHA token",
    responses={
        200: {"description": "Verification outcome, successful or not"},
        400: {"description": "Missing token"},
        502: {"description": "reCAPTCHA API unreachable or misconfigured"},
    },
)
async def verify_recaptcha(body: CaptchaRequest, service: CaptchaServiceDep) -> CaptchaResult:
    """Verify a reCAPTCHA token against the upstream API."""
    return await service.verify(body.token)
