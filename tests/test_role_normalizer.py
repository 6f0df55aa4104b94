"""Tests for role and region normalization."""

import pytest

from squad_builder.utils.role_normalizer import (
    CANONICAL_ROLES,
    normalize_region,
    normalize_role,
    normalize_role_strict,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("AWP", "AWP"),
        ("awper", "AWP"),
        ("Sniper", "AWP"),
        ("in-game leader", "IGL"),
        ("igl", "IGL"),
        ("Entry Fragger", "Entry"),
        (" lurk ", "Lurker"),
        ("supp", "Support"),
    ],
)
def test_normalize_role_aliases(raw, expected):
    assert normalize_role(raw) == expected


def test_canonical_roles_map_to_themselves():
    for role in CANONICAL_ROLES:
        assert normalize_role(role) == role


def test_unknown_role():
    assert normalize_role("Rifler") is None
    assert normalize_role(None) is None
    with pytest.raises(ValueError, match="Unknown role"):
        normalize_role_strict("Rifler")


def test_normalize_region():
    assert normalize_region("eu") == "EU"
    assert normalize_region(" Asia ") == "ASIA"
    assert normalize_region("MARS") is None
