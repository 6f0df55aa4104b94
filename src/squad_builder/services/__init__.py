"""Business logic services."""

from squad_builder.services.captcha_client import (
    CaptchaVerifier,
    MockCaptchaVerifier,
    get_captcha_verifier,
)
from squad_builder.services.team_builder_service import TeamBuilderSession
from squad_builder.services.team_evaluation_service import TeamEvaluationService

__all__ = [
    "CaptchaVerifier",
    "MockCaptchaVerifier",
    "get_captcha_verifier",
    "TeamBuilderSession",
    "TeamEvaluationService",
]
