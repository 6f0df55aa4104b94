"""Panel summary for a roster being built."""

from squad_builder.models.roster import ROSTER_SIZE, Roster
from squad_builder.services.synergy_service import (
    calculate_average_rating,
    calculate_team_synergy,
)
from squad_builder.utils.role_normalizer import ROLE_ORDER


class TeamEvaluationService:
    """Derives the numbers shown next to the roster after every change."""

    def evaluate_roster(self, roster: Roster) -> dict:
        """Evaluate the active members of a roster."""
        members = [slot.occupant for slot in roster.active_slots()]
        taken_roles = roster.taken_roles()

        return {
            "synergy_score": calculate_team_synergy(members),
            "average_elo": calculate_average_rating(members),
            "active_count": len(members),
            "roster_size": ROSTER_SIZE,
            "taken_roles": taken_roles,
            "open_roles": [role for role in ROLE_ORDER if role not in taken_roles],
            "unassigned_count": sum(1 for m in members if m.role is None),
        }
