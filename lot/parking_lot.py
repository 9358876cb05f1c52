"""Thread-safe parking lot state store."""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any

from lot.errors import (
    AlreadyAllocatedError,
    InvalidCapacityError,
    InvalidSlotNumberError,
    LotFullError,
    NotAllocatedError,
    NotFoundError,
)
from lot.queries import SlotQuery
from lot.slot import Slot
from lot.types import Capacity, Colour, Registration, SlotNumber
from lot.vehicle import Vehicle

STATUS_HEADER = "Slot No.   Registration No  Colour"


@dataclass(frozen=True)
class UnallocatedLot:
    """Lot state before a successful allocation."""


@dataclass
class AllocatedLot:
    """Lot state after allocation: a fixed, ordered run of slots."""

    slots: list[Slot] = field(default_factory=list)

    @property
    def capacity(self) -> Capacity:
        return Capacity(len(self.slots))


LotState = UnallocatedLot | AllocatedLot


class ParkingLot:
    """Owns the slots of one lot and enforces allocation and occupancy rules.

    The lot starts unallocated. ``allocate`` succeeds exactly once; every
    other operation fails with ``NotAllocatedError`` until it has. Slots are
    handed out first-fit, lowest number first.

    Every operation holds an internal lock so the scan-then-mutate in
    ``park`` stays atomic even when the store is shared between threads.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._lock = threading.Lock()
        self._state: LotState = UnallocatedLot()
        self.logger = logger or logging.getLogger(__name__)

    @property
    def is_allocated(self) -> bool:
        with self._lock:
            return isinstance(self._state, AllocatedLot)

    @property
    def capacity(self) -> Capacity:
        """Number of slots in the lot, 0 while unallocated."""
        with self._lock:
            if isinstance(self._state, AllocatedLot):
                return self._state.capacity
            return Capacity(0)

    @property
    def occupied_count(self) -> int:
        with self._lock:
            if isinstance(self._state, AllocatedLot):
                return sum(1 for slot in self._state.slots if not slot.is_empty())
            return 0

    def _allocated(self) -> AllocatedLot:
        """Return the allocated state or raise. Caller must hold the lock."""
        if isinstance(self._state, AllocatedLot):
            return self._state
        raise NotAllocatedError()

    def allocate(self, capacity: int) -> list[str]:
        """Create the lot with ``capacity`` empty slots.

        Args:
            capacity: Number of slots, must be positive

        Returns:
            Single confirmation line

        Raises:
            AlreadyAllocatedError: If the lot was already allocated
            InvalidCapacityError: If capacity is not positive
        """
        with self._lock:
            if isinstance(self._state, AllocatedLot):
                raise AlreadyAllocatedError()
            if capacity <= 0:
                raise InvalidCapacityError(capacity)
            self._state = AllocatedLot(
                slots=[Slot(number=SlotNumber(index)) for index in range(1, capacity + 1)]
            )
        self.logger.info(f"Allocated parking lot with {capacity} slots")
        return [f"Created a parking lot with {capacity} slots"]

    def park(self, registration: str, colour: str) -> list[str]:
        """Park a vehicle in the lowest-numbered empty slot.

        Args:
            registration: Vehicle registration
            colour: Vehicle colour

        Returns:
            Single line naming the allocated slot

        Raises:
            NotAllocatedError: If the lot is not allocated
            LotFullError: If every slot is occupied
        """
        with self._lock:
            lot = self._allocated()
            slot = next((slot for slot in lot.slots if slot.is_empty()), None)
            if slot is None:
                raise LotFullError()
            slot.occupy(Vehicle(registration=Registration(registration), colour=Colour(colour)))
        self.logger.info(f"Parked {registration} ({colour}) in slot {slot.number}")
        return [f"Allocated slot number: {slot.number}"]

    def leave(self, slot_number: int) -> list[str]:
        """Free a slot.

        Freeing an already empty slot succeeds.

        Args:
            slot_number: 1-based slot number

        Returns:
            Single confirmation line

        Raises:
            NotAllocatedError: If the lot is not allocated
            InvalidSlotNumberError: If slot_number is outside ``[1, capacity]``
        """
        with self._lock:
            lot = self._allocated()
            if slot_number < 1 or slot_number > lot.capacity:
                raise InvalidSlotNumberError(slot_number, lot.capacity)
            lot.slots[slot_number - 1].vacate()
        self.logger.info(f"Slot {slot_number} freed")
        return [f"Slot number {slot_number} is free"]

    def status(self) -> list[str]:
        """Header line plus one line per occupied slot in slot order."""
        with self._lock:
            lot = self._allocated()
            lines = [STATUS_HEADER]
            for slot in lot.slots:
                if slot.vehicle is not None:
                    lines.append(
                        f"{slot.number}     {slot.vehicle.registration}  {slot.vehicle.colour}"
                    )
            return lines

    def query(self, query: SlotQuery) -> list[str]:
        """Run a lookup over every slot in ascending order.

        Args:
            query: Lookup to apply to each slot

        Returns:
            Every non-empty projection, in slot order

        Raises:
            NotAllocatedError: If the lot is not allocated
            NotFoundError: If no slot matched
        """
        with self._lock:
            lot = self._allocated()
            results = [
                projected
                for projected in (query.project(slot) for slot in lot.slots)
                if projected is not None
            ]
        if not results:
            raise NotFoundError()
        return results

    def snapshot(self) -> dict[str, Any]:
        """Return a detached, JSON-friendly copy of the lot state."""
        with self._lock:
            if isinstance(self._state, AllocatedLot):
                return {
                    "allocated": True,
                    "capacity": int(self._state.capacity),
                    "slots": [slot.to_dict() for slot in self._state.slots],
                }
            return {"allocated": False, "capacity": 0, "slots": []}
