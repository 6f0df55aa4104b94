"""DuckDB-backed player store."""

import logging
from datetime import datetime
from pathlib import Path

import duckdb

from squad_builder.errors import DuplicateNickname, PlayerNotFound
from squad_builder.models.player import Player
from squad_builder.repositories.database import Database

logger = logging.getLogger(__name__)

PLAYER_COLUMNS = [
    "nickname",
    "region",
    "level",
    "elo",
    "kd",
    "hs_percentage",
    "winrate",
    "preferred_role",
    "aggressiveness",
    "experience",
]


def _row_to_player(row: dict) -> Player:
    return Player(
        id=int(row["id"]),
        nickname=row["nickname"],
        region=row["region"],
        level=int(row["level"]),
        elo=int(row["elo"]),
        kd=float(row["kd"]),
        hs_percentage=int(row["hs_percentage"]),
        winrate=int(row["winrate"]),
        preferred_role=row["preferred_role"],
        aggressiveness=int(row["aggressiveness"]),
        experience=row["experience"],
        created_at=datetime.fromisoformat(row["created_at"]),
    )


class PlayerRepository:
    """Create/read access to player profiles, keyed by unique nickname."""

    def __init__(self, database: Database | str | Path):
        """Initialize with a Database or a path to the DuckDB file.

        Args:
            database: Shared Database instance, or path to squad_builder.duckdb
        """
        self._db = database if isinstance(database, Database) else Database(database)

    def list_players(self) -> list[Player]:
        """All players, highest ELO first."""
        rows = self._db.query(
            "SELECT * FROM players ORDER BY elo DESC, nickname ASC"
        )
        return [_row_to_player(row) for row in rows]

    def get_player(self, nickname: str) -> Player | None:
        rows = self._db.query("SELECT * FROM players WHERE nickname = ?", [nickname])
        return _row_to_player(rows[0]) if rows else None

    def get_player_strict(self, nickname: str) -> Player:
        """Like get_player, raising PlayerNotFound when missing."""
        player = self.get_player(nickname)
        if player is None:
            raise PlayerNotFound(nickname)
        return player

    def create_player(self, candidate: Player) -> Player:
        """Insert a player and return it with id and created_at filled in.

        Raises:
            DuplicateNickname: If the nickname is already registered
        """
        values = [getattr(candidate, col) for col in PLAYER_COLUMNS]
        placeholders = ", ".join("?" for _ in PLAYER_COLUMNS)

        try:
            with self._db.connect() as conn:
                player_id, created_at = conn.execute(
                    f"""
                    INSERT INTO players ({", ".join(PLAYER_COLUMNS)})
                    VALUES ({placeholders})
                    RETURNING id, created_at
                    """,
                    values,
                ).fetchone()
        except duckdb.ConstraintException as e:
            logger.warning(f"Duplicate nickname rejected: {candidate.nickname}")
            raise DuplicateNickname(candidate.nickname) from e

        logger.info(f"Created player {candidate.nickname} (id {player_id})")
        return Player(
            **{col: getattr(candidate, col) for col in PLAYER_COLUMNS},
            id=player_id,
            created_at=created_at,
        )

    def upsert_player(self, candidate: Player) -> Player:
        """Create the player unless the nickname exists; return the stored one."""
        existing = self.get_player(candidate.nickname)
        if existing is not None:
            return existing
        return self.create_player(candidate)
