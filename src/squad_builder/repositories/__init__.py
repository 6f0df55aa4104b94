"""Record stores for players and teams."""

from squad_builder.repositories.database import Database
from squad_builder.repositories.player_repository import PlayerRepository
from squad_builder.repositories.team_repository import TeamRepository

__all__ = ["Database", "PlayerRepository", "TeamRepository"]
