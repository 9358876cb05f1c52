"""Lookups over occupied slots, expressed as data rather than callables."""

from dataclasses import dataclass

from lot.slot import Slot
from lot.types import QueryKind


@dataclass(frozen=True)
class SlotQuery:
    """A filter-and-project lookup the lot interprets slot by slot.

    Attributes:
        kind: Which attribute to match and what to report for matches
        value: Colour or registration to match, compared case-insensitively
    """

    kind: QueryKind
    value: str

    @classmethod
    def registrations_with_colour(cls, colour: str) -> "SlotQuery":
        return cls(kind=QueryKind.COLOUR_TO_REGISTRATION, value=colour)

    @classmethod
    def slots_with_colour(cls, colour: str) -> "SlotQuery":
        return cls(kind=QueryKind.COLOUR_TO_SLOT, value=colour)

    @classmethod
    def slots_with_registration(cls, registration: str) -> "SlotQuery":
        return cls(kind=QueryKind.REGISTRATION_TO_SLOT, value=registration)

    def project(self, slot: Slot) -> str | None:
        """Return the reported value for a matching slot, or None.

        Args:
            slot: Slot to inspect

        Returns:
            Registration or slot number as text when the slot matches,
            None for empty or non-matching slots
        """
        vehicle = slot.vehicle
        if vehicle is None:
            return None

        if self.kind == QueryKind.COLOUR_TO_REGISTRATION:
            return str(vehicle.registration) if vehicle.matches_colour(self.value) else None
        if self.kind == QueryKind.COLOUR_TO_SLOT:
            return str(slot.number) if vehicle.matches_colour(self.value) else None
        if self.kind == QueryKind.REGISTRATION_TO_SLOT:
            return str(slot.number) if vehicle.matches_registration(self.value) else None
        raise ValueError(f"Unsupported query kind: {self.kind}")
