"""Tests for roster composition rules."""

from squad_builder.models.player import PlayerStats
from squad_builder.models.roster import Roster
from squad_builder.services.roster_validator import (
    can_assign_player,
    can_assign_role,
    can_save,
    role_options,
    selectable_players,
)

STATS = PlayerStats(elo=2500, kd=1.0, hs_percentage=50, winrate=50)


def _roster(*occupants: tuple[int, str, str | None]) -> Roster:
    roster = Roster.create_empty()
    for slot_id, nickname, role in occupants:
        roster.occupy(slot_id, nickname, role, STATS)
    return roster


class TestCanAssignPlayer:
    def test_free_player(self):
        assert can_assign_player(_roster((0, "NiKo", "Entry")), "ropz")

    def test_taken_player(self):
        assert not can_assign_player(_roster((0, "NiKo", "Entry")), "NiKo")

    def test_empty_roster(self):
        assert can_assign_player(Roster.create_empty(), "NiKo")


class TestCanAssignRole:
    def test_role_held_by_other_slot(self):
        roster = _roster((0, "ZywOo", "AWP"))
        assert not can_assign_role(roster, "AWP", 1)

    def test_slot_keeps_its_own_role(self):
        roster = _roster((0, "ZywOo", "AWP"))
        assert can_assign_role(roster, "AWP", 0)

    def test_unassigned_slots_do_not_block(self):
        roster = _roster((0, "ZywOo", None), (1, "m0NESY", None))
        assert can_assign_role(roster, "AWP", 2)

    def test_free_role(self):
        roster = _roster((0, "ZywOo", "AWP"))
        assert can_assign_role(roster, "IGL", 1)


class TestCanSave:
    def test_requires_two_members(self):
        assert not can_save(_roster((0, "a", None)), "Solo")

    def test_requires_non_blank_name(self):
        roster = _roster((0, "a", None), (1, "b", None))
        assert not can_save(roster, "   ")
        assert not can_save(roster, "")
        assert not can_save(roster, None)

    def test_valid(self):
        roster = _roster((0, "a", None), (3, "b", None))
        assert can_save(roster, "  Dream Squad ")


def test_selectable_players_excludes_taken(make_player):
    pool = [make_player("ZywOo"), make_player("NiKo"), make_player("ropz")]
    roster = _roster((2, "NiKo", "Entry"))

    available = selectable_players(roster, pool)

    assert [p.nickname for p in available] == ["ZywOo", "ropz"]


def test_role_options_disable_roles_held_elsewhere():
    roster = _roster((0, "ZywOo", "AWP"), (1, "NiKo", "Entry"))

    options = {o["role"]: o for o in role_options(roster, 1)}

    assert options["AWP"]["disabled"] is True
    # The slot's own role stays selectable
    assert options["Entry"]["disabled"] is False
    assert options["Entry"]["selected"] is True
    assert options["IGL"]["disabled"] is False
    assert list(options) == ["IGL", "Entry", "Support", "AWP", "Lurker"]
