"""Centralized role and region normalization.

All role handling in the codebase should go through this module so the
canonical spelling stays consistent: IGL, Entry, Support, AWP, Lurker.
"""

from typing import Optional

# Canonical roles - the exact strings stored and returned by the API
CANONICAL_ROLES = frozenset({"IGL", "Entry", "Support", "AWP", "Lurker"})

# Mapping from known role spellings (lowercased) to canonical form
ROLE_ALIASES: dict[str, str] = {
    # In-game leader
    "igl": "IGL",
    "in-game leader": "IGL",
    "in game leader": "IGL",
    "leader": "IGL",
    "caller": "IGL",

    # Entry fragger
    "entry": "Entry",
    "entry fragger": "Entry",
    "entryfragger": "Entry",
    "opener": "Entry",

    # Support
    "support": "Support",
    "supp": "Support",
    "sup": "Support",

    # AWPer
    "awp": "AWP",
    "awper": "AWP",
    "sniper": "AWP",

    # Lurker
    "lurker": "Lurker",
    "lurk": "Lurker",
}

# Role ordering for consistent display/sorting
ROLE_ORDER = ["IGL", "Entry", "Support", "AWP", "Lurker"]

REGIONS = ("EU", "NA", "SA", "ASIA", "OCE")

EXPERIENCE_TIERS = ("Online", "LAN", "Pro", "Veteran")


def normalize_role(role: Optional[str]) -> Optional[str]:
    """Normalize a role string to its canonical spelling.

    Args:
        role: Role string in any known format (e.g., "awper", "igl", "Entry")

    Returns:
        Canonical role string or None if invalid/None

    Examples:
        >>> normalize_role("awper")
        'AWP'
        >>> normalize_role("in-game leader")
        'IGL'
        >>> normalize_role(None)
        None
    """
    if role is None:
        return None

    if role in CANONICAL_ROLES:
        return role

    return ROLE_ALIASES.get(role.strip().lower())


def normalize_role_strict(role: str) -> str:
    """Normalize a role string, raising ValueError if unknown.

    Args:
        role: Role string in any known format

    Returns:
        Canonical role string

    Raises:
        ValueError: If role is not recognized
    """
    normalized = normalize_role(role)
    if normalized is None:
        raise ValueError(f"Unknown role: {role}")
    return normalized


def normalize_region(region: Optional[str]) -> Optional[str]:
    """Normalize a region code (case-insensitive) or return None if unknown."""
    if region is None:
        return None
    upper = region.strip().upper()
    return upper if upper in REGIONS else None
