#!/usr/bin/env python3
"""Seed the DuckDB database with reference pro players.

Existing nicknames are left untouched, so the script can be re-run.

Usage:
    python scripts/seed_players.py [database_path]

Default database_path: data/squad_builder.duckdb (relative to repo root)
"""
import sys
from pathlib import Path

from squad_builder.models.player import PlayerCandidate
from squad_builder.repositories.player_repository import PlayerRepository

SEED_PLAYERS = [
    {
        "nickname": "ZywOo",
        "region": "EU",
        "level": 10,
        "elo": 3200,
        "kd": 1.45,
        "hs_percentage": 42,
        "winrate": 65,
        "preferred_role": "AWP",
        "aggressiveness": 60,
        "experience": "Pro",
    },
    {
        "nickname": "NiKo",
        "region": "EU",
        "level": 10,
        "elo": 3150,
        "kd": 1.25,
        "hs_percentage": 55,
        "winrate": 58,
        "preferred_role": "Entry",
        "aggressiveness": 85,
        "experience": "Pro",
    },
    {
        "nickname": "m0NESY",
        "region": "EU",
        "level": 10,
        "elo": 3300,
        "kd": 1.35,
        "hs_percentage": 45,
        "winrate": 62,
        "preferred_role": "AWP",
        "aggressiveness": 70,
        "experience": "Pro",
    },
    {
        "nickname": "karrigan",
        "region": "EU",
        "level": 10,
        "elo": 2500,
        "kd": 0.95,
        "hs_percentage": 40,
        "winrate": 60,
        "preferred_role": "IGL",
        "aggressiveness": 50,
        "experience": "Veteran",
    },
    {
        "nickname": "ropz",
        "region": "EU",
        "level": 10,
        "elo": 2900,
        "kd": 1.15,
        "hs_percentage": 50,
        "winrate": 59,
        "preferred_role": "Lurker",
        "aggressiveness": 40,
        "experience": "Pro",
    },
    {
        "nickname": "jks",
        "region": "OCE",
        "level": 10,
        "elo": 2700,
        "kd": 1.05,
        "hs_percentage": 48,
        "winrate": 55,
        "preferred_role": "Support",
        "aggressiveness": 45,
        "experience": "Pro",
    },
]


def seed_players(database_path: Path) -> int:
    """Insert the seed players that are not stored yet.

    Returns:
        Number of players in the seed list
    """
    repo = PlayerRepository(database_path)
    for data in SEED_PLAYERS:
        player = repo.upsert_player(PlayerCandidate(**data).to_player())
        print(f"Seeded player: {player.nickname}")
    return len(SEED_PLAYERS)


def main():
    if len(sys.argv) > 1:
        database_path = Path(sys.argv[1])
    else:
        repo_root = Path(__file__).parent.parent
        database_path = repo_root / "data" / "squad_builder.duckdb"

    count = seed_players(database_path)
    print(f"\nDone! {count} players available in {database_path}")


if __name__ == "__main__":
    main()
