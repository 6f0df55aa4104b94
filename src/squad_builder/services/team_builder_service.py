"""Team assembly workflow over one roster."""

import logging
from typing import Protocol

from squad_builder.errors import (
    DuplicatePlayer,
    InsufficientMembers,
    InvalidSlot,
    InvalidTeamName,
    RoleUnavailable,
)
from squad_builder.models.player import Player
from squad_builder.models.roster import Roster, RosterSlot
from squad_builder.models.team import TeamMember, TeamRecord
from squad_builder.services.roster_validator import (
    MIN_TEAM_MEMBERS,
    can_assign_role,
    find_player_slot,
    find_role_slot,
)
from squad_builder.services.synergy_service import calculate_team_synergy
from squad_builder.services.team_evaluation_service import TeamEvaluationService

logger = logging.getLogger(__name__)


class TeamStore(Protocol):
    def create_team(self, record: TeamRecord) -> TeamRecord: ...


class TeamBuilderSession:
    """One editing session: a roster plus the operations that change it.

    Every operation validates before touching the roster, so a rejected call
    leaves it exactly as it was.
    """

    def __init__(self, roster: Roster | None = None):
        self.roster = roster or Roster.create_empty()
        self._evaluator = TeamEvaluationService()

    def select_player(self, slot_id: int, player: Player) -> RosterSlot:
        """Put ``player`` into a slot, auto-assigning their preferred role.

        The preferred role is only taken if no other slot holds it; otherwise
        the slot starts without a role.

        Raises:
            InvalidSlot: If slot_id is outside the roster
            DuplicatePlayer: If the player is already in a different slot
        """
        self.roster.get_slot(slot_id)

        holder = find_player_slot(self.roster, player.nickname)
        if holder is not None and holder != slot_id:
            raise DuplicatePlayer(player.nickname, holder)

        role = player.preferred_role
        if not can_assign_role(self.roster, role, slot_id):
            role = None

        slot = self.roster.occupy(slot_id, player.nickname, role, player.stats)
        logger.debug(f"Slot {slot_id}: {player.nickname} as {role or 'unassigned'}")
        return slot

    def assign_role(self, slot_id: int, role: str) -> RosterSlot:
        """Set the role of an occupied slot.

        Raises:
            InvalidSlot: If slot_id is outside the roster or the slot is empty
            RoleUnavailable: If another slot holds the role
        """
        slot = self.roster.get_slot(slot_id)
        if not slot.is_occupied:
            raise InvalidSlot(slot_id, f"Slot {slot_id} is empty")

        holder = find_role_slot(self.roster, role, excluding_slot_id=slot_id)
        if holder is not None:
            raise RoleUnavailable(role, holder)

        return self.roster.set_role(slot_id, role)

    def remove_member(self, slot_id: int) -> RosterSlot:
        return self.roster.vacate(slot_id)

    def reset(self) -> Roster:
        """Drop every binding and start over with an empty roster."""
        self.roster = Roster.create_empty()
        return self.roster

    def build_team_record(self, name: str) -> TeamRecord:
        """Package the current roster as a team record without saving it.

        Raises:
            InvalidTeamName: If the trimmed name is empty
            InsufficientMembers: If fewer than two slots are filled
        """
        team_name = (name or "").strip()
        if not team_name:
            raise InvalidTeamName()

        members = [
            TeamMember(
                nickname=slot.occupant.nickname,
                role=slot.occupant.role,
                stats=slot.occupant.stats,
            )
            for slot in self.roster.active_slots()
        ]
        if len(members) < MIN_TEAM_MEMBERS:
            raise InsufficientMembers(len(members), MIN_TEAM_MEMBERS)

        # Synergy is recomputed here rather than reused from the last summary
        return TeamRecord(
            name=team_name,
            synergy=calculate_team_synergy(members),
            members=members,
        )

    def save_team(self, name: str, team_store: TeamStore) -> TeamRecord:
        """Validate, hand the team to the store, then clear the roster.

        The roster is only reset once the store has accepted the record.
        """
        record = self.build_team_record(name)
        saved = team_store.create_team(record)
        logger.info(
            f"Saved team '{saved.name}' with {len(saved.members)} members "
            f"(synergy {saved.synergy})"
        )
        self.reset()
        return saved

    def summary(self) -> dict:
        """Current synergy, average ELO and role coverage."""
        return self._evaluator.evaluate_roster(self.roster)

    def to_dict(self) -> dict:
        return {
            "roster": self.roster.to_dict(),
            "summary": self.summary(),
        }
