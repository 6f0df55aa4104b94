"""Roster model for the team builder.

A roster is a fixed row of five slots. Slots own their position id; the
occupant is a snapshot of the player taken when they were selected, so later
edits to the stored player do not leak into a roster being built.

The roster does not check uniqueness of players or roles. Callers consult
``services.roster_validator`` before mutating it.
"""

from collections.abc import Iterator
from dataclasses import asdict, dataclass, field, replace

from squad_builder.errors import InvalidSlot
from squad_builder.models.player import PlayerStats

ROSTER_SIZE = 5


@dataclass(frozen=True)
class SlotOccupant:
    """Player bound to a slot."""

    nickname: str
    role: str | None
    stats: PlayerStats


@dataclass
class RosterSlot:
    """One roster position."""

    slot_id: int
    occupant: SlotOccupant | None = None

    @property
    def is_occupied(self) -> bool:
        return self.occupant is not None


@dataclass
class Roster:
    """Five ordered slots, ids 0..4."""

    slots: list[RosterSlot] = field(default_factory=list)

    @classmethod
    def create_empty(cls) -> "Roster":
        return cls(slots=[RosterSlot(slot_id=i) for i in range(ROSTER_SIZE)])

    def get_slot(self, slot_id: int) -> RosterSlot:
        """Return the slot at ``slot_id`` or raise InvalidSlot."""
        if not isinstance(slot_id, int) or not 0 <= slot_id < len(self.slots):
            raise InvalidSlot(slot_id)
        return self.slots[slot_id]

    def occupy(
        self,
        slot_id: int,
        nickname: str,
        role: str | None,
        stats: PlayerStats,
    ) -> RosterSlot:
        """Replace the occupant of a slot."""
        slot = self.get_slot(slot_id)
        slot.occupant = SlotOccupant(nickname=nickname, role=role, stats=stats)
        return slot

    def set_role(self, slot_id: int, role: str | None) -> RosterSlot:
        """Change the role of an occupied slot."""
        slot = self.get_slot(slot_id)
        if slot.occupant is None:
            raise InvalidSlot(slot_id, f"Slot {slot_id} is empty")
        slot.occupant = replace(slot.occupant, role=role)
        return slot

    def vacate(self, slot_id: int) -> RosterSlot:
        """Empty a slot. Vacating an empty slot is a no-op."""
        slot = self.get_slot(slot_id)
        slot.occupant = None
        return slot

    def active_slots(self) -> Iterator[RosterSlot]:
        """Occupied slots in ascending slot id, read from current state."""
        return (slot for slot in self.slots if slot.occupant is not None)

    @property
    def active_count(self) -> int:
        return sum(1 for _ in self.active_slots())

    def taken_nicknames(self) -> list[str]:
        return [slot.occupant.nickname for slot in self.active_slots()]

    def taken_roles(self) -> list[str]:
        return [
            slot.occupant.role
            for slot in self.active_slots()
            if slot.occupant.role is not None
        ]

    def copy(self) -> "Roster":
        # Occupants are frozen, so a shallow copy per slot is enough
        return Roster(slots=[replace(slot) for slot in self.slots])

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        return {
            "slots": [
                {
                    "slot_id": slot.slot_id,
                    "occupant": asdict(slot.occupant) if slot.occupant else None,
                }
                for slot in self.slots
            ]
        }
