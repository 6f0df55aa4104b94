"""Saved team models."""

from dataclasses import asdict, dataclass, field
from datetime import datetime

from squad_builder.models.player import PlayerStats

UNASSIGNED_ROLE = "Unassigned"


@dataclass(frozen=True)
class TeamMember:
    """Snapshot of a roster member at save time."""

    nickname: str
    role: str | None  # None until a role is picked; stored as "Unassigned"
    stats: PlayerStats


@dataclass
class TeamRecord:
    """A team as handed to (and returned from) the team store."""

    name: str
    synergy: int  # 0-100
    members: list[TeamMember] = field(default_factory=list)
    id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        return data
