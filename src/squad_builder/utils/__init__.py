"""Utility modules for squad_builder."""

from squad_builder.utils.role_normalizer import (
    CANONICAL_ROLES,
    EXPERIENCE_TIERS,
    REGIONS,
    ROLE_ALIASES,
    ROLE_ORDER,
    normalize_role,
    normalize_role_strict,
    normalize_region,
)

__all__ = [
    "CANONICAL_ROLES",
    "EXPERIENCE_TIERS",
    "REGIONS",
    "ROLE_ALIASES",
    "ROLE_ORDER",
    "normalize_role",
    "normalize_role_strict",
    "normalize_region",
]
