"""Tests for synergy, average rating and performance scoring."""

import pytest

from squad_builder.models.player import PlayerStats
from squad_builder.models.roster import SlotOccupant
from squad_builder.services.synergy_service import (
    calculate_average_rating,
    calculate_performance_score,
    calculate_team_synergy,
    is_high_elo,
    round_half_up,
)


def _members(*elos: int) -> list[SlotOccupant]:
    return [
        SlotOccupant(
            nickname=f"p{i}",
            role=None,
            stats=PlayerStats(elo=elo, kd=1.0, hs_percentage=40, winrate=50),
        )
        for i, elo in enumerate(elos)
    ]


@pytest.mark.parametrize("count", range(6))
def test_team_synergy_is_twenty_per_member(count):
    assert calculate_team_synergy(_members(*[2000] * count)) == 20 * count


def test_team_synergy_full_roster_hits_exactly_100():
    assert calculate_team_synergy(_members(*[2000] * 5)) == 100


def test_team_synergy_clamps_above_five():
    assert calculate_team_synergy(_members(*[2000] * 7)) == 100


def test_team_synergy_non_decreasing():
    scores = [calculate_team_synergy(_members(*[2000] * n)) for n in range(6)]
    assert scores == sorted(scores)


def test_team_synergy_accepts_generators():
    assert calculate_team_synergy(m for m in _members(1, 2, 3)) == 60


def test_average_rating_empty_is_zero():
    assert calculate_average_rating([]) == 0


def test_average_rating_single_member():
    assert calculate_average_rating(_members(3150)) == 3150


def test_average_rating_rounds_half_up():
    assert calculate_average_rating(_members(2000, 2001)) == 2001
    assert calculate_average_rating(_members(2000, 2000, 2001)) == 2000


def test_performance_score_reference_player():
    stats = PlayerStats(elo=3200, kd=1.45, hs_percentage=42, winrate=65)
    assert calculate_performance_score(stats) == 79


def test_performance_score_caps_elo_and_kd():
    capped = PlayerStats(elo=3000, kd=2.0, hs_percentage=0, winrate=0)
    above = PlayerStats(elo=5000, kd=5.0, hs_percentage=0, winrate=0)
    assert calculate_performance_score(capped) == calculate_performance_score(above) == 70


def test_performance_score_bounds():
    assert calculate_performance_score(PlayerStats(0, 0.0, 0, 0)) == 0
    assert calculate_performance_score(PlayerStats(5000, 5.0, 100, 100)) == 100


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(2.49) == 2


def test_is_high_elo():
    assert is_high_elo(PlayerStats(2501, 1.0, 0, 0))
    assert not is_high_elo(PlayerStats(2500, 1.0, 0, 0))
