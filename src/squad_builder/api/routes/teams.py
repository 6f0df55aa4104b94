"""REST endpoints for saved teams."""

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field, field_validator

from squad_builder.errors import InvalidTeamInput
from squad_builder.models.player import PlayerStats
from squad_builder.models.team import TeamMember, TeamRecord
from squad_builder.repositories.team_repository import TeamRepository
from squad_builder.utils.role_normalizer import normalize_role_strict

router = APIRouter(prefix="/api/teams", tags=["teams"])


class MemberStats(BaseModel):
    elo: int = 0
    kd: float = 0
    hs_percentage: int = 0
    winrate: int = 0


class TeamMemberPayload(BaseModel):
    nickname: str
    role: str | None = None
    stats: MemberStats = Field(default_factory=MemberStats)

    @field_validator("role")
    @classmethod
    def _check_role(cls, value: str | None) -> str | None:
        return None if value is None else normalize_role_strict(value)


class CreateTeamRequest(BaseModel):
    """Request body for saving a team built elsewhere."""

    name: str = ""
    synergy: int = Field(default=0, ge=0, le=100)
    members: list[TeamMemberPayload] = Field(default_factory=list)


def _get_repository(request: Request) -> TeamRepository:
    return request.app.state.team_repository


@router.get("")
async def list_teams(request: Request):
    """List all teams with their members, newest first."""
    return [team.to_dict() for team in _get_repository(request).list_teams()]


@router.post("", status_code=201)
async def create_team(request: Request, body: CreateTeamRequest):
    """Save a team as submitted."""
    record = TeamRecord(
        name=body.name,
        synergy=body.synergy,
        members=[
            TeamMember(
                nickname=m.nickname,
                role=m.role,
                stats=PlayerStats(**m.stats.model_dump()),
            )
            for m in body.members
        ],
    )
    try:
        saved = _get_repository(request).create_team(record)
    except InvalidTeamInput as e:
        raise HTTPException(status_code=400, detail=str(e))

    return saved.to_dict()
