"""Data models for the squad builder."""

from squad_builder.models.player import Player, PlayerCandidate, PlayerStats
from squad_builder.models.roster import ROSTER_SIZE, Roster, RosterSlot, SlotOccupant
from squad_builder.models.team import TeamMember, TeamRecord

__all__ = [
    "Player",
    "PlayerCandidate",
    "PlayerStats",
    "ROSTER_SIZE",
    "Roster",
    "RosterSlot",
    "SlotOccupant",
    "TeamMember",
    "TeamRecord",
]
