"""Shared fixtures for squad builder tests."""

import pytest

from squad_builder.models.player import Player

DEFAULT_PLAYER_FIELDS = {
    "region": "EU",
    "level": 10,
    "elo": 2500,
    "kd": 1.0,
    "hs_percentage": 50,
    "winrate": 50,
    "preferred_role": "Support",
    "aggressiveness": 50,
    "experience": "Pro",
}


@pytest.fixture
def make_player():
    """Build a Player with sensible defaults."""

    def _make(nickname: str, **overrides) -> Player:
        return Player(nickname=nickname, **{**DEFAULT_PLAYER_FIELDS, **overrides})

    return _make


@pytest.fixture
def niko(make_player):
    return make_player(
        "NiKo", elo=3150, kd=1.25, hs_percentage=55, winrate=58, preferred_role="Entry"
    )


@pytest.fixture
def zywoo(make_player):
    return make_player(
        "ZywOo", elo=3200, kd=1.45, hs_percentage=42, winrate=65, preferred_role="AWP"
    )


@pytest.fixture
def monesy(make_player):
    return make_player(
        "m0NESY", elo=3300, kd=1.35, hs_percentage=45, winrate=62, preferred_role="AWP"
    )
