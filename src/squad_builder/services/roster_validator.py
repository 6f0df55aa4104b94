"""Composition rules for a roster being built.

All checks are pure: they read the roster passed in and keep no state.
"""

from collections.abc import Iterable

from squad_builder.models.player import Player
from squad_builder.models.roster import Roster
from squad_builder.utils.role_normalizer import ROLE_ORDER

MIN_TEAM_MEMBERS = 2


def find_player_slot(roster: Roster, nickname: str) -> int | None:
    """Slot id currently holding ``nickname``, or None."""
    for slot in roster.active_slots():
        if slot.occupant.nickname == nickname:
            return slot.slot_id
    return None


def find_role_slot(roster: Roster, role: str, excluding_slot_id: int | None = None) -> int | None:
    """Slot id (other than ``excluding_slot_id``) holding ``role``, or None."""
    for slot in roster.active_slots():
        if slot.slot_id != excluding_slot_id and slot.occupant.role == role:
            return slot.slot_id
    return None


def can_assign_player(roster: Roster, nickname: str) -> bool:
    """True if the player is not active anywhere in the roster."""
    return find_player_slot(roster, nickname) is None


def can_assign_role(roster: Roster, role: str, excluding_slot_id: int | None = None) -> bool:
    """True if no slot other than ``excluding_slot_id`` holds ``role``.

    A slot that already holds the role may keep or re-select it.
    """
    return find_role_slot(roster, role, excluding_slot_id) is None


def can_save(roster: Roster, team_name: str | None) -> bool:
    """True if the trimmed name is non-empty and enough slots are filled."""
    if not team_name or not team_name.strip():
        return False
    return roster.active_count >= MIN_TEAM_MEMBERS


def selectable_players(roster: Roster, pool: Iterable[Player]) -> list[Player]:
    """Players from ``pool`` that are not in the roster yet, in pool order."""
    taken = set(roster.taken_nicknames())
    return [player for player in pool if player.nickname not in taken]


def role_options(roster: Roster, slot_id: int) -> list[dict]:
    """Every role with a ``disabled`` flag for the role picker of a slot.

    Roles held by another slot are disabled; the slot's own role never is.
    """
    slot = roster.get_slot(slot_id)
    current_role = slot.occupant.role if slot.occupant else None
    return [
        {
            "role": role,
            "selected": role == current_role,
            "disabled": not can_assign_role(roster, role, slot_id),
        }
        for role in ROLE_ORDER
    ]
