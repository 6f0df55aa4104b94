"""DuckDB connection helpers and schema shared by the record stores."""

import logging
from pathlib import Path

import duckdb
import pandas as pd

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE SEQUENCE IF NOT EXISTS player_id_seq START 1;
CREATE SEQUENCE IF NOT EXISTS team_id_seq START 1;
CREATE SEQUENCE IF NOT EXISTS team_member_id_seq START 1;

CREATE TABLE IF NOT EXISTS players (
    id INTEGER PRIMARY KEY DEFAULT nextval('player_id_seq'),
    nickname VARCHAR NOT NULL UNIQUE,
    region VARCHAR NOT NULL,
    level INTEGER NOT NULL,
    elo INTEGER NOT NULL,
    kd DOUBLE NOT NULL,
    hs_percentage INTEGER NOT NULL,
    winrate INTEGER NOT NULL,
    preferred_role VARCHAR NOT NULL,
    aggressiveness INTEGER NOT NULL,
    experience VARCHAR NOT NULL,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp
);

CREATE TABLE IF NOT EXISTS teams (
    id INTEGER PRIMARY KEY DEFAULT nextval('team_id_seq'),
    name VARCHAR NOT NULL,
    synergy INTEGER NOT NULL DEFAULT 0,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp
);

CREATE TABLE IF NOT EXISTS team_members (
    id INTEGER PRIMARY KEY DEFAULT nextval('team_member_id_seq'),
    team_id INTEGER NOT NULL REFERENCES teams(id),
    position INTEGER NOT NULL,
    nickname VARCHAR NOT NULL,
    role VARCHAR NOT NULL,
    elo INTEGER NOT NULL,
    kd DOUBLE NOT NULL,
    hs_percentage INTEGER NOT NULL,
    winrate INTEGER NOT NULL
);
"""


class Database:
    """Thin wrapper around a DuckDB file.

    Each call opens its own short-lived connection.
    """

    def __init__(self, database_path: str | Path):
        self._db_path = Path(database_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

        with self.connect() as conn:
            for statement in SCHEMA_SQL.split(";"):
                if statement.strip():
                    conn.execute(statement)
            tables = conn.execute("SHOW TABLES").fetchall()
        logger.info(f"Database: Using {self._db_path} ({len(tables)} tables)")

    def connect(self) -> duckdb.DuckDBPyConnection:
        # Read-write in every case: DuckDB refuses mixed configurations
        # for the same file within one process
        return duckdb.connect(str(self._db_path))

    def query(self, sql: str, params: list | None = None) -> list[dict]:
        """Execute a query and return a list of dicts."""
        with self.connect() as conn:
            df = conn.execute(sql, params or []).df()

        for col in df.columns:
            if pd.api.types.is_datetime64_any_dtype(df[col]):
                # ISO strings survive the dict conversion unchanged
                df[col] = df[col].dt.strftime("%Y-%m-%dT%H:%M:%S.%f")

        return df.to_dict(orient="records")
