"""Team synergy, average rating and individual performance scoring."""
import math
from collections.abc import Iterable
from typing import Protocol

from squad_builder.models.player import PlayerStats

SYNERGY_PER_MEMBER = 20
MAX_SYNERGY = 100

# Performance score weights and caps
ELO_CAP = 3000
KD_CAP = 2.0
ELO_WEIGHT = 0.4
KD_WEIGHT = 0.3
HS_WEIGHT = 0.1
WINRATE_WEIGHT = 0.2

HIGH_ELO_THRESHOLD = 2500


class HasStats(Protocol):
    stats: PlayerStats


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (round() is banker's)."""
    return math.floor(value + 0.5)


def calculate_team_synergy(members: Iterable[HasStats]) -> int:
    """Synergy as roster completeness: +20 per member, capped at 100.

    0 members -> 0, 5 members -> 100. This is a fill-level indicator, not a
    playstyle compatibility model.
    """
    count = sum(1 for _ in members)
    return min(count * SYNERGY_PER_MEMBER, MAX_SYNERGY)


def calculate_average_rating(members: Iterable[HasStats]) -> int:
    """Mean ELO of the members, rounded; 0 when there are none."""
    elos = [member.stats.elo for member in members]
    if not elos:
        return 0
    return round_half_up(sum(elos) / len(elos))


def calculate_performance_score(stats: PlayerStats) -> int:
    """Weighted 0-100 composite of a single player's stats.

    ELO above 3000 and K/D above 2.0 are capped before weighting; headshot
    percentage and winrate count linearly.
    """
    elo_score = min(stats.elo / ELO_CAP, 1) * 100
    kd_score = min(stats.kd / KD_CAP, 1) * 100

    score = (
        elo_score * ELO_WEIGHT
        + kd_score * KD_WEIGHT
        + stats.hs_percentage * HS_WEIGHT
        + stats.winrate * WINRATE_WEIGHT
    )
    return round_half_up(score)


def is_high_elo(stats: PlayerStats) -> bool:
    return stats.elo > HIGH_ELO_THRESHOLD
