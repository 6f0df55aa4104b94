"""REST endpoints for player profiles."""

import logging

from fastapi import APIRouter, HTTPException, Request

from squad_builder.errors import DuplicateNickname
from squad_builder.models.player import PlayerCandidate
from squad_builder.repositories.player_repository import PlayerRepository
from squad_builder.services.synergy_service import calculate_performance_score, is_high_elo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/players", tags=["players"])


class CreatePlayerRequest(PlayerCandidate):
    """Player fields plus the bot-verification token from the form."""

    captcha_token: str | None = None


def _get_repository(request: Request) -> PlayerRepository:
    return request.app.state.player_repository


@router.get("")
async def list_players(request: Request):
    """List all players, highest ELO first."""
    repo = _get_repository(request)
    return [player.to_dict() for player in repo.list_players()]


@router.post("", status_code=201)
async def create_player(request: Request, body: CreatePlayerRequest):
    """Create a player after verifying the captcha token."""
    if not body.captcha_token:
        raise HTTPException(status_code=400, detail="Captcha is required")

    verifier = request.app.state.captcha_verifier
    if not verifier.is_configured:
        logger.error("RECAPTCHA_SECRET_KEY is not configured")
        raise HTTPException(status_code=500, detail="Server misconfiguration")

    if not await verifier.verify(body.captcha_token):
        raise HTTPException(status_code=400, detail="Invalid captcha")

    candidate = PlayerCandidate(**body.model_dump(exclude={"captcha_token"}))
    try:
        player = _get_repository(request).create_player(candidate.to_player())
    except DuplicateNickname as e:
        raise HTTPException(status_code=409, detail=str(e))

    return player.to_dict()


@router.get("/{nickname}")
async def get_player_overview(request: Request, nickname: str):
    """Player profile with derived performance numbers."""
    player = _get_repository(request).get_player(nickname)
    if player is None:
        raise HTTPException(status_code=404, detail="Player not found")

    return {
        **player.to_dict(),
        "performance_score": calculate_performance_score(player.stats),
        "is_high_elo": is_high_elo(player.stats),
    }
