"""Player profile models."""

from dataclasses import asdict, dataclass
from datetime import datetime
from pydantic import BaseModel, Field, field_validator, model_validator

from squad_builder.utils.role_normalizer import (
    EXPERIENCE_TIERS,
    normalize_region,
    normalize_role_strict,
)

NICKNAME_PATTERN = r"^[a-zA-Z0-9_-]+$"
MIN_LEVEL_10_ELO = 2000


@dataclass(frozen=True)
class PlayerStats:
    """Performance numbers used by the scoring engine.

    Frozen so a roster can hold it as a snapshot.
    """

    elo: int
    kd: float
    hs_percentage: int
    winrate: int


@dataclass
class Player:
    """A stored player profile."""

    nickname: str
    region: str  # EU, NA, SA, ASIA, OCE
    level: int  # Faceit level 1-10
    elo: int
    kd: float
    hs_percentage: int
    winrate: int
    preferred_role: str  # IGL, Entry, Support, AWP, Lurker
    aggressiveness: int
    experience: str  # Online, LAN, Pro, Veteran
    id: int | None = None
    created_at: datetime | None = None

    @property
    def stats(self) -> PlayerStats:
        """Snapshot of the stats the scoring engine reads."""
        return PlayerStats(
            elo=self.elo,
            kd=self.kd,
            hs_percentage=self.hs_percentage,
            winrate=self.winrate,
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        if self.created_at is not None:
            data["created_at"] = self.created_at.isoformat()
        return data


class PlayerCandidate(BaseModel):
    """Validated input for creating a player profile."""

    nickname: str = Field(min_length=2, max_length=15, pattern=NICKNAME_PATTERN)
    region: str
    level: int = Field(ge=1, le=10)
    elo: int = Field(ge=0, le=5000)
    kd: float = Field(ge=0, le=5.0)
    hs_percentage: int = Field(ge=0, le=100)
    winrate: int = Field(ge=0, le=100)
    preferred_role: str
    aggressiveness: int = Field(ge=0, le=100)
    experience: str

    @field_validator("region")
    @classmethod
    def _check_region(cls, value: str) -> str:
        region = normalize_region(value)
        if region is None:
            raise ValueError(f"Unknown region: {value}")
        return region

    @field_validator("preferred_role")
    @classmethod
    def _check_role(cls, value: str) -> str:
        return normalize_role_strict(value)

    @field_validator("experience")
    @classmethod
    def _check_experience(cls, value: str) -> str:
        if value not in EXPERIENCE_TIERS:
            raise ValueError(f"Experience must be one of: {', '.join(EXPERIENCE_TIERS)}")
        return value

    @model_validator(mode="after")
    def _check_level_10_elo(self) -> "PlayerCandidate":
        if self.level == 10 and self.elo < MIN_LEVEL_10_ELO:
            raise ValueError(f"ELO must be at least {MIN_LEVEL_10_ELO} for Level 10")
        return self

    def to_player(self) -> Player:
        return Player(**self.model_dump())
