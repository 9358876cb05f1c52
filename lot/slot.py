"""Single numbered position in the parking lot."""

from dataclasses import dataclass
from typing import Any

from lot.types import SlotNumber
from lot.vehicle import Vehicle


@dataclass
class Slot:
    """A slot keeps its number for life; only its occupant changes.

    ``vehicle`` is None while the slot is empty.
    """

    number: SlotNumber
    vehicle: Vehicle | None = None

    def __post_init__(self) -> None:
        """Validate the slot number."""
        if self.number < 1:
            raise ValueError("Slot number must be at least 1")

    def is_empty(self) -> bool:
        return self.vehicle is None

    def occupy(self, vehicle: Vehicle) -> None:
        """Place a vehicle in the slot, replacing any previous occupant."""
        self.vehicle = vehicle

    def vacate(self) -> None:
        """Free the slot. Vacating an empty slot is a no-op."""
        self.vehicle = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize slot to dictionary."""
        return {
            "number": int(self.number),
            "vehicle": self.vehicle.to_dict() if self.vehicle is not None else None,
        }
