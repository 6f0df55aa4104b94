"""DuckDB-backed team store."""

import logging
from collections import defaultdict
from datetime import datetime
from pathlib import Path

from squad_builder.errors import InvalidTeamInput
from squad_builder.models.player import PlayerStats
from squad_builder.models.roster import ROSTER_SIZE
from squad_builder.models.team import UNASSIGNED_ROLE, TeamMember, TeamRecord
from squad_builder.repositories.database import Database
from squad_builder.services.roster_validator import MIN_TEAM_MEMBERS

logger = logging.getLogger(__name__)


def _row_to_member(row: dict) -> TeamMember:
    role = row["role"]
    return TeamMember(
        nickname=row["nickname"],
        role=None if role == UNASSIGNED_ROLE else role,
        stats=PlayerStats(
            elo=int(row["elo"]),
            kd=float(row["kd"]),
            hs_percentage=int(row["hs_percentage"]),
            winrate=int(row["winrate"]),
        ),
    )


class TeamRepository:
    """Create/read access to saved teams and their member snapshots."""

    def __init__(self, database: Database | str | Path):
        self._db = database if isinstance(database, Database) else Database(database)

    def list_teams(self) -> list[TeamRecord]:
        """All teams with members, newest first."""
        team_rows = self._db.query(
            "SELECT id, name, synergy, created_at FROM teams ORDER BY created_at DESC, id DESC"
        )
        member_rows = self._db.query(
            "SELECT * FROM team_members ORDER BY team_id, position"
        )

        members_by_team: dict[int, list[TeamMember]] = defaultdict(list)
        for row in member_rows:
            members_by_team[int(row["team_id"])].append(_row_to_member(row))

        return [
            TeamRecord(
                id=int(row["id"]),
                name=row["name"],
                synergy=int(row["synergy"]),
                members=members_by_team.get(int(row["id"]), []),
                created_at=datetime.fromisoformat(row["created_at"]),
            )
            for row in team_rows
        ]

    def create_team(self, record: TeamRecord) -> TeamRecord:
        """Persist a team and its members in one transaction.

        Raises:
            InvalidTeamInput: If the name is missing or there are fewer than
                two (or more than five) members, or two members share a nickname
        """
        name = (record.name or "").strip()
        if not name or not MIN_TEAM_MEMBERS <= len(record.members) <= ROSTER_SIZE:
            raise InvalidTeamInput()
        nicknames = [member.nickname for member in record.members]
        if len(set(nicknames)) != len(nicknames):
            raise InvalidTeamInput()

        with self._db.connect() as conn:
            conn.begin()
            try:
                team_id, created_at = conn.execute(
                    "INSERT INTO teams (name, synergy) VALUES (?, ?) RETURNING id, created_at",
                    [name, record.synergy or 0],
                ).fetchone()
                conn.executemany(
                    """
                    INSERT INTO team_members
                        (team_id, position, nickname, role, elo, kd, hs_percentage, winrate)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    [
                        [
                            team_id,
                            position,
                            member.nickname,
                            member.role or UNASSIGNED_ROLE,
                            member.stats.elo,
                            member.stats.kd,
                            member.stats.hs_percentage,
                            member.stats.winrate,
                        ]
                        for position, member in enumerate(record.members)
                    ],
                )
                conn.commit()
            except Exception:
                conn.rollback()
                raise

        logger.info(f"Created team '{name}' (id {team_id}, {len(record.members)} members)")
        return TeamRecord(
            id=team_id,
            name=name,
            synergy=record.synergy or 0,
            members=list(record.members),
            created_at=created_at,
        )
