"""Error types raised by the team builder core and the record stores."""


class SquadBuilderError(ValueError):
    """Base class for recoverable squad builder errors."""


class InvalidSlot(SquadBuilderError):
    """A slot id outside the roster, or a role change on an empty slot."""

    def __init__(self, slot_id: int, reason: str | None = None):
        self.slot_id = slot_id
        super().__init__(reason or f"Invalid slot: {slot_id}")


class DuplicatePlayer(SquadBuilderError):
    """Player is already active in a different slot."""

    def __init__(self, nickname: str, slot_id: int):
        self.nickname = nickname
        self.slot_id = slot_id
        super().__init__(f"{nickname} is already in slot {slot_id}")


class RoleUnavailable(SquadBuilderError):
    """Role is already held by a different active slot."""

    def __init__(self, role: str, slot_id: int):
        self.role = role
        self.slot_id = slot_id
        super().__init__(f"{role} is already assigned to slot {slot_id}")


class InvalidTeamName(SquadBuilderError):
    def __init__(self):
        super().__init__("Team name is required")


class InsufficientMembers(SquadBuilderError):
    def __init__(self, active_count: int, required: int):
        self.active_count = active_count
        self.required = required
        super().__init__(
            f"At least {required} members required to save a team (have {active_count})"
        )


class DuplicateNickname(SquadBuilderError):
    """Raised by the player store when the nickname is already registered."""

    def __init__(self, nickname: str):
        self.nickname = nickname
        super().__init__("A player with this nickname already exists")


class InvalidTeamInput(SquadBuilderError):
    """Raised by the team store for a record without a name or members."""

    def __init__(self):
        super().__init__("Team name and at least 2 members required")


class PlayerNotFound(SquadBuilderError):
    def __init__(self, nickname: str):
        self.nickname = nickname
        super().__init__(f"Player not found: {nickname}")
